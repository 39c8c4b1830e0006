"""
trackerprovider: recurso declarativo "project" para Pivotal Tracker.
"""

__version__ = "1.0.0"

"""
Host: carga del estado deseado, persistencia de registros y orquestación.
"""

from trackerprovider.host.loader import DeclarativeLoader
from trackerprovider.host.store import StateStore
from trackerprovider.host.engine import ProjectEngine

__all__ = ["DeclarativeLoader", "StateStore", "ProjectEngine"]

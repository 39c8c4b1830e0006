"""
Providers: implementaciones concretas de recursos y clientes remotos.
"""

from trackerprovider.providers.client import TrackerClient
from trackerprovider.providers.project import ProjectResource

__all__ = ["TrackerClient", "ProjectResource"]

"""
Runtime: registro de estado del host y resolución de rutas de estado.

El estado real NUNCA vive dentro del repo; se escribe en state_root().
"""

from trackerprovider.core.runtime.resolver import state_root, state_file
from trackerprovider.core.runtime.state import ResourceRecord, StateDiff

__all__ = ["state_root", "state_file", "ResourceRecord", "StateDiff"]

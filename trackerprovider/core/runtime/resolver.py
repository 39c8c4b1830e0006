"""
Resolución de rutas de estado.

- state_root(): directorio de estado del host (TRACKER_STATE_ROOT o /var/lib/trackerprovider).
- state_file(): archivo YAML con los registros de recursos.

El core NO escribe en disco; solo expone estas rutas. Quién escribe (host/CLI)
debe usar state_root() para estado persistente.
"""

import os
from pathlib import Path
from typing import Optional


# Ruta canónica del estado (fuera del repo)
DEFAULT_STATE_ROOT = Path("/var/lib/trackerprovider")
STATE_FILE_NAME = "state.yaml"


def state_root() -> Path:
    """
    Directorio raíz del estado.
    Variable de entorno explícita TRACKER_STATE_ROOT; si no, /var/lib/trackerprovider/.
    """
    explicit = os.environ.get("TRACKER_STATE_ROOT", "").strip()
    if explicit:
        return Path(explicit).expanduser().resolve()
    return DEFAULT_STATE_ROOT


def state_file(root: Optional[Path] = None) -> Path:
    return (root or state_root()) / STATE_FILE_NAME

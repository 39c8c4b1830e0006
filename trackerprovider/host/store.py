"""
StateStore: persistencia de ResourceRecord en un archivo YAML bajo state_root().
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from trackerprovider.core.errors import ConfigError
from trackerprovider.core.runtime.resolver import state_file
from trackerprovider.core.runtime.state import ResourceRecord


class StateStore:
    """Implementa StateReader/StateWriter sobre un único state.yaml"""

    def __init__(self, path: Optional[Path] = None):
        self.path = path or state_file()

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Archivo de estado corrupto {self.path}: {e}")
        return data.get("resources") or {}

    def _save(self, resources: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(".tmp")
        with open(tmp, "w") as f:
            yaml.safe_dump({"version": 1, "resources": resources}, f, sort_keys=True, allow_unicode=True)
        tmp.replace(self.path)

    def names(self) -> List[str]:
        return sorted(self._load().keys())

    def read_record(self, name: str) -> Optional[ResourceRecord]:
        data = self._load().get(name)
        if data is None:
            return None
        return ResourceRecord.from_dict(data)

    def write_record(self, name: str, record: ResourceRecord) -> None:
        resources = self._load()
        resources[name] = record.to_dict()
        self._save(resources)

    def remove_record(self, name: str) -> None:
        resources = self._load()
        if resources.pop(name, None) is not None:
            self._save(resources)

"""
Loader del estado deseado
Carga projects.yaml y lo convierte a modelos Pydantic
"""

from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from trackerprovider.core.errors import ConfigError
from trackerprovider.core.project.models import ProjectConfig

DEFAULT_CONFIG_FILE = "projects.yaml"


class DeclarativeLoader:
    """Carga y gestiona el estado deseado (projects.yaml)"""

    def __init__(self, config_file: Path):
        self.config_file = config_file
        self._projects: Dict[str, ProjectConfig] = {}

    def load_all(self) -> Dict[str, ProjectConfig]:
        """
        Carga todos los proyectos declarados.

        Formato:
            projects:
              <nombre-recurso>:
                name: Demo
                iteration_length: 2
        """
        if not self.config_file.exists():
            raise ConfigError(f"No existe el archivo de configuración: {self.config_file}")

        try:
            with open(self.config_file, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"YAML inválido en {self.config_file}: {e}")

        projects = data.get("projects") if isinstance(data, dict) else None
        if projects is None:
            projects = {}
        if not isinstance(projects, dict):
            raise ConfigError(f"'projects' debe ser un mapa nombre → atributos en {self.config_file}")

        self._projects = {}
        for resource_name, attrs in projects.items():
            try:
                self._projects[str(resource_name)] = ProjectConfig(**(attrs or {}))
            except PydanticValidationError as e:
                raise ConfigError(f"Proyecto '{resource_name}' inválido: {e}")
        return dict(self._projects)

    def get_project(self, resource_name: str) -> Optional[ProjectConfig]:
        return self._projects.get(resource_name)

"""
Contratos que deben implementar los providers y sus clientes remotos.

El core solo define interfaces; la implementación vive en trackerprovider/providers/*.
"""

from typing import Any, Dict, List, Protocol

from trackerprovider.core.project.models import RemoteProject
from trackerprovider.core.runtime.state import ResourceRecord, StateDiff


class PlanResult:
    """Resultado de un plan (qué se aplicaría) sin ejecutar."""
    def __init__(
        self,
        actions: List[str],
        diffs: List[StateDiff],
        summary: str = ""
    ):
        self.actions = actions
        self.diffs = diffs
        self.summary = summary

    @property
    def has_changes(self) -> bool:
        return bool(self.actions)


class ProjectClient(Protocol):
    """
    Cliente remoto de proyectos. Red, reintentos y serialización son suyos.
    Los fallos se lanzan como TrackerAPIError.
    """
    def create(self, payload: Dict[str, Any]) -> RemoteProject:
        ...

    def fetch(self, project_id: int) -> RemoteProject:
        ...

    def update(self, project_id: int, payload: Dict[str, Any]) -> RemoteProject:
        ...

    def delete(self, project_id: int) -> None:
        ...


class ResourceContract(Protocol):
    """
    Contrato de un recurso declarativo: ciclo de vida sobre un ResourceRecord
    propiedad del host. Cada operación es independiente y síncrona.
    """
    @property
    def name(self) -> str:
        """Tipo de recurso (ej: tracker_project)."""
        ...

    def create(self, record: ResourceRecord) -> str:
        """Crea el objeto remoto y guarda la identidad. Devuelve la identidad."""
        ...

    def read(self, record: ResourceRecord) -> Dict[str, Any]:
        """Refresca los atributos sincronizados desde el remoto."""
        ...

    def update(self, record: ResourceRecord) -> str:
        """Reenvía todos los atributos escribibles."""
        ...

    def delete(self, record: ResourceRecord) -> None:
        """Borra el objeto remoto y limpia el registro."""
        ...

    def exists(self, record: ResourceRecord) -> bool:
        """Chequeo autoritativo de existencia."""
        ...

    def import_state(self, identifier: str) -> str:
        """Identidad inicial para un objeto existente."""
        ...

"""
Recurso tracker_project: reconcilia un ResourceRecord del host con un proyecto remoto.

Ciclo de vida: create / read / update / delete / exists / import_state.
La identidad se guarda como string decimal y se decodifica una vez por operación.
Ninguna operación muta el registro si falla.
"""

from typing import Any, Dict

from trackerprovider.core.errors import RemoteCallError, TrackerAPIError
from trackerprovider.core.infra.base import BaseResource, decode_identity, encode_identity
from trackerprovider.core.infra.contracts import ProjectClient
from trackerprovider.core.project.models import ProjectConfig, RemoteProject
from trackerprovider.core.runtime.state import ResourceRecord
from trackerprovider.core.schema import PROJECT_SCHEMA, synced_fields, writable_fields


def build_payload(config: ProjectConfig) -> Dict[str, Any]:
    """
    Payload completo: todos los atributos escribibles, siempre.
    Los no declarados van con el valor cero de su tipo.
    """
    payload: Dict[str, Any] = {}
    for field in writable_fields():
        value = getattr(config, field)
        payload[field] = value if value is not None else PROJECT_SCHEMA[field].zero
    return payload


def synced_values(project: RemoteProject) -> Dict[str, Any]:
    """Valores autoritativos del remoto para los atributos que read sobrescribe."""
    values: Dict[str, Any] = {}
    for field in synced_fields():
        value = getattr(project, field)
        values[field] = value if value is not None else PROJECT_SCHEMA[field].zero
    return values


class ProjectResource(BaseResource):
    """Reconciliador del recurso project. El cliente se inyecta en el constructor."""

    name = "tracker_project"

    def __init__(self, client: ProjectClient):
        self.client = client

    def create(self, record: ResourceRecord) -> str:
        payload = build_payload(ProjectConfig.from_record(record))
        try:
            project = self.client.create(payload)
        except TrackerAPIError as e:
            raise RemoteCallError("create", "creating new project failed", e)

        identity = encode_identity(project.id)
        record.set_id(identity)
        return identity

    def read(self, record: ResourceRecord) -> Dict[str, Any]:
        project_id = decode_identity(record.id)
        try:
            project = self.client.fetch(project_id)
        except TrackerAPIError as e:
            raise RemoteCallError("read", "get project api call failed", e)

        # status y join_as no se re-sincronizan (drift ignorado)
        values = synced_values(project)
        record.apply(encode_identity(project.id), values)
        return values

    def update(self, record: ResourceRecord) -> str:
        payload = build_payload(ProjectConfig.from_record(record))
        project_id = decode_identity(record.id)
        try:
            self.client.update(project_id, payload)
        except TrackerAPIError as e:
            raise RemoteCallError("update", "update project failed", e)

        identity = encode_identity(project_id)
        record.set_id(identity)
        return identity

    def delete(self, record: ResourceRecord) -> None:
        project_id = decode_identity(record.id)
        try:
            self.client.delete(project_id)
        except TrackerAPIError as e:
            raise RemoteCallError("delete", "delete project failed", e)

        record.clear()

    def exists(self, record: ResourceRecord) -> bool:
        project_id = decode_identity(record.id)
        try:
            project = self.client.fetch(project_id)
        except TrackerAPIError as e:
            raise RemoteCallError("exists", "get project api call failed", e)

        # ID 0 o negativo = no encontrado, aunque la llamada no haya fallado
        return project.id > 0

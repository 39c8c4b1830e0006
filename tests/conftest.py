"""
Fixtures compartidas: cliente remoto en memoria que implementa ProjectClient.
"""

from typing import Any, Dict, List, Optional, Tuple

import pytest

from trackerprovider.core.errors import TrackerAPIError
from trackerprovider.core.project.models import RemoteProject
from trackerprovider.providers.project import ProjectResource


class FakeProjectClient:
    """Simula el servicio remoto y registra cada llamada."""

    def __init__(self):
        self.projects: Dict[int, Dict[str, Any]] = {}
        self.calls: List[Tuple[str, Any]] = []
        self.next_id = 42
        self.fail: Optional[str] = None  # nombre de la operación que debe fallar
        self.fail_status: Optional[int] = 500
        self.defaults: Dict[str, Any] = {"point_scale": "0,1,2,3"}
        self.override_id: Optional[int] = None

    def _maybe_fail(self, op: str) -> None:
        if self.fail == op:
            raise TrackerAPIError(f"Error {self.fail_status}: boom", status_code=self.fail_status)

    def create(self, payload: Dict[str, Any]) -> RemoteProject:
        self.calls.append(("create", dict(payload)))
        self._maybe_fail("create")
        project_id = self.next_id
        self.next_id += 1
        project = {**payload, "id": project_id}
        for key, value in self.defaults.items():
            if not project.get(key):
                project[key] = value
        self.projects[project_id] = project
        return RemoteProject(**project)

    def fetch(self, project_id: int) -> RemoteProject:
        self.calls.append(("fetch", project_id))
        self._maybe_fail("fetch")
        if self.override_id is not None:
            return RemoteProject(id=self.override_id)
        project = self.projects.get(project_id)
        if project is None:
            raise TrackerAPIError("Error 404: not found", status_code=404)
        return RemoteProject(**project)

    def update(self, project_id: int, payload: Dict[str, Any]) -> RemoteProject:
        self.calls.append(("update", (project_id, dict(payload))))
        self._maybe_fail("update")
        project = self.projects.get(project_id)
        if project is None:
            raise TrackerAPIError("Error 404: not found", status_code=404)
        project.update(payload)
        return RemoteProject(**project)

    def delete(self, project_id: int) -> None:
        self.calls.append(("delete", project_id))
        self._maybe_fail("delete")
        if self.projects.pop(project_id, None) is None:
            raise TrackerAPIError("Error 404: not found", status_code=404)

    def ops(self) -> List[str]:
        return [op for op, _ in self.calls]


@pytest.fixture
def client() -> FakeProjectClient:
    return FakeProjectClient()


@pytest.fixture
def resource(client) -> ProjectResource:
    return ProjectResource(client)

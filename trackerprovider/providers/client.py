"""
Cliente Pivotal Tracker - Interacción con la API v5 de proyectos
"""

from typing import Any, Dict, Optional, Tuple

import requests
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console

from trackerprovider.core.errors import TrackerAPIError
from trackerprovider.core.project.models import RemoteProject

DEFAULT_API_URL = "https://www.pivotaltracker.com/services/v5"
DEFAULT_TIMEOUT = 10


class TrackerClient:
    """Cliente para la API de proyectos de Pivotal Tracker (implementa ProjectClient)"""

    def __init__(
        self,
        token: str,
        url: str = DEFAULT_API_URL,
        console: Optional[Console] = None,
        mock: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Inicializa cliente Tracker

        Args:
            token: Token de API (X-TrackerToken)
            url: URL base de la API (ej: https://www.pivotaltracker.com/services/v5)
            console: Console de Rich para salida (solo modo mock)
            mock: Si True, simula la API en memoria sin hacer llamadas reales
            timeout: Timeout por petición en segundos
            session: Sesión requests a reutilizar
        """
        self.api_url = url.rstrip("/")
        self.token = token
        self.console = console
        self.mock = mock
        self.timeout = timeout
        self.session = session or requests.Session()
        self._mock_projects: Dict[int, Dict[str, Any]] = {}
        self._mock_next_id = 1

    def _request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict] = None
    ) -> Tuple[bool, Optional[Dict], Optional[str], Optional[int]]:
        """
        Realiza una petición a la API

        Returns:
            Tuple (success, response_data, error_message, status_code)
        """
        if self.mock:
            return self._mock_request(method, endpoint, data)

        url = f"{self.api_url}/{endpoint.lstrip('/')}"
        headers = {
            "X-TrackerToken": self.token,
            "Content-Type": "application/json"
        }

        try:
            response = self.session.request(
                method.upper(), url, headers=headers, json=data, timeout=self.timeout
            )
        except requests.exceptions.Timeout:
            return False, None, "Timeout al conectar con Tracker", None
        except requests.exceptions.ConnectionError:
            return False, None, "Error de conexión con Tracker", None
        except requests.exceptions.RequestException as e:
            return False, None, f"Error Tracker API: {e}", None

        if response.status_code in (200, 201):
            try:
                return True, response.json(), None, response.status_code
            except ValueError:
                return False, None, f"Respuesta no JSON de Tracker: {response.text[:200]}", response.status_code
        if response.status_code == 204:
            return True, None, None, response.status_code
        return False, None, self._error_message(response), response.status_code

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Tracker devuelve {"kind": "error", "error": ..., "general_problem": ...}"""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            detail = body.get("general_problem") or body.get("error")
            if detail:
                return f"Error {response.status_code}: {detail}"
        return f"Error {response.status_code}: {response.text[:200]}"

    def _mock_request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict] = None
    ) -> Tuple[bool, Optional[Dict], Optional[str], Optional[int]]:
        """Simula la API de proyectos en memoria"""
        if self.console:
            self.console.print(f"[dim][MOCK] {method} {endpoint}[/dim]")

        parts = endpoint.strip("/").split("/")
        method = method.upper()
        if parts == ["projects"] and method == "POST":
            project_id = self._mock_next_id
            self._mock_next_id += 1
            project = {**(data or {}), "id": project_id}
            if not project.get("point_scale"):
                project["point_scale"] = "0,1,2,3"
            self._mock_projects[project_id] = project
            return True, dict(project), None, 200

        if len(parts) == 2 and parts[0] == "projects":
            project_id = int(parts[1])
            project = self._mock_projects.get(project_id)
            if project is None:
                return False, None, "Error 404: The object you tried to access could not be found.", 404
            if method == "GET":
                return True, dict(project), None, 200
            if method == "PUT":
                project.update(data or {})
                return True, dict(project), None, 200
            if method == "DELETE":
                del self._mock_projects[project_id]
                return True, None, None, 204

        return False, None, f"Método/endpoint no soportado en mock: {method} {endpoint}", 400

    def _call(self, method: str, endpoint: str, data: Optional[Dict] = None) -> Optional[Dict]:
        success, body, error, status = self._request(method, endpoint, data=data)
        if not success:
            raise TrackerAPIError(error or "Error desconocido", status_code=status)
        return body

    def _project(self, body: Optional[Dict]) -> RemoteProject:
        """Convierte la respuesta en RemoteProject; un cuerpo inesperado es un error de API"""
        if not isinstance(body, dict):
            raise TrackerAPIError(f"Respuesta inesperada de Tracker: {body!r:.200}")
        try:
            return RemoteProject(**body)
        except PydanticValidationError as e:
            raise TrackerAPIError(f"Respuesta de proyecto inválida: {e}")

    def create(self, payload: Dict[str, Any]) -> RemoteProject:
        """POST /projects"""
        return self._project(self._call("POST", "projects", data=payload))

    def fetch(self, project_id: int) -> RemoteProject:
        """GET /projects/{id}"""
        return self._project(self._call("GET", f"projects/{project_id}"))

    def update(self, project_id: int, payload: Dict[str, Any]) -> RemoteProject:
        """PUT /projects/{id}"""
        return self._project(self._call("PUT", f"projects/{project_id}", data=payload))

    def delete(self, project_id: int) -> None:
        """DELETE /projects/{id}"""
        self._call("DELETE", f"projects/{project_id}")

    def test_connection(self) -> bool:
        """
        Prueba la conexión con Tracker (GET /me)

        Returns:
            True si la conexión es exitosa
        """
        if self.mock:
            return True
        success, data, error, _ = self._request("GET", "me")
        if self.console:
            if success:
                username = data.get("username", "unknown") if isinstance(data, dict) else "unknown"
                self.console.print(f"[green]✔ Conexión Tracker exitosa: {username}[/green]")
            else:
                self.console.print(f"[red]✘ Error de conexión Tracker: {error}[/red]")
        return success

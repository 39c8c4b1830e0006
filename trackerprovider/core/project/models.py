"""
Modelos de datos del recurso project (agnósticos de interfaz y red).

ProjectConfig es el estado deseado tipado; RemoteProject es la representación
que devuelve el servicio.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from trackerprovider.core.schema import PROJECT_SCHEMA


class ProjectType(str, Enum):
    DEMO = "demo"
    PRIVATE = "private"
    PUBLIC = "public"
    SHARED = "shared"


class JoinAs(str, Enum):
    OWNER = "owner"
    MEMBER = "member"
    VIEWER = "viewer"


class WeekStartDay(str, Enum):
    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"


class ProjectConfig(BaseModel):
    """
    Estado deseado de un proyecto.

    None = no declarado. Enums y longitudes NO se validan aquí (ver validator.py):
    el reconciliador confía en el servicio remoto para eso.
    """
    name: str = Field(..., description="Nombre del proyecto")
    status: Optional[str] = None
    iteration_length: Optional[int] = None
    week_start_day: Optional[str] = None
    point_scale: Optional[str] = None
    bugs_and_chores_are_estimatable: Optional[bool] = None
    automatic_planning: Optional[bool] = None
    enable_tasks: Optional[bool] = None
    start_date: Optional[str] = None
    time_zone: Optional[str] = None
    velocity_averaged_over: Optional[int] = None
    number_of_done_iterations_to_show: Optional[int] = None
    description: Optional[str] = None
    profile_content: Optional[str] = None
    enable_incoming_emails: Optional[bool] = None
    initial_velocity: Optional[int] = None
    project_type: Optional[str] = None
    public: Optional[bool] = None
    atom_enabled: Optional[bool] = None
    account_id: Optional[int] = None
    join_as: Optional[str] = None
    no_owner: Optional[bool] = None
    new_account_name: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def from_record(cls, record: Any) -> "ProjectConfig":
        """
        Construye la config tipada una sola vez desde el registro del host.
        Cada lectura pasa por el accesor tipado del registro (falla con
        SchemaTypeError si el tipo guardado no coincide).
        """
        values = {name: record.get(name) for name in PROJECT_SCHEMA}
        return cls(**values)

    def declared(self) -> Dict[str, Any]:
        """Solo los atributos declarados explícitamente."""
        return self.model_dump(exclude_none=True)

    def desired(self) -> Dict[str, Any]:
        """
        Atributos declarados más el valor cero de los escribibles no computados
        que no se declararon: quitar un atributo de la config lo resetea.
        """
        values = self.declared()
        for field, spec in PROJECT_SCHEMA.items():
            if field not in values and spec.writable and not spec.computed:
                values[field] = spec.zero
        return values


class RemoteProject(BaseModel):
    """
    Proyecto tal como lo devuelve la API. Campos extra de la respuesta se ignoran;
    los ausentes o null quedan en None.
    """
    id: int = Field(0, description="ProjectID asignado por el servicio")
    name: Optional[str] = None
    status: Optional[str] = None
    iteration_length: Optional[int] = None
    week_start_day: Optional[str] = None
    point_scale: Optional[str] = None
    bugs_and_chores_are_estimatable: Optional[bool] = None
    automatic_planning: Optional[bool] = None
    enable_tasks: Optional[bool] = None
    start_date: Optional[str] = None
    time_zone: Optional[Any] = None
    velocity_averaged_over: Optional[int] = None
    number_of_done_iterations_to_show: Optional[int] = None
    description: Optional[str] = None
    profile_content: Optional[str] = None
    enable_incoming_emails: Optional[bool] = None
    initial_velocity: Optional[int] = None
    project_type: Optional[str] = None
    public: Optional[bool] = None
    atom_enabled: Optional[bool] = None
    account_id: Optional[int] = None
    join_as: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

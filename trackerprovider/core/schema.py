"""
Declaración de campos del recurso project.

Tabla estática nombre → tipo/flags/descripción. El reconciliador la usa para
lectura tipada de valores deseados; no valida enums ni longitudes (eso es
responsabilidad del servicio remoto o del host, ver project/validator.py).
"""

from typing import Any, Dict, List

TYPE_STRING = "string"
TYPE_BOOL = "bool"
TYPE_INT = "int"

# Valor cero por tipo: lo que se envía cuando un atributo opcional no está declarado
ZERO_VALUES: Dict[str, Any] = {
    TYPE_STRING: "",
    TYPE_BOOL: False,
    TYPE_INT: 0,
}


class FieldSpec:
    """Declaración de un atributo del recurso."""
    def __init__(
        self,
        type: str,
        required: bool = False,
        optional: bool = True,
        computed: bool = False,
        writable: bool = True,
        synced: bool = True,
        description: str = "",
    ):
        self.type = type
        self.required = required
        self.optional = optional and not required
        self.computed = computed
        self.writable = writable  # se envía en create/update
        self.synced = synced  # se sobrescribe desde la respuesta en read
        self.description = description

    @property
    def zero(self) -> Any:
        return ZERO_VALUES[self.type]


PROJECT_SCHEMA: Dict[str, FieldSpec] = {
    "no_owner": FieldSpec(
        TYPE_BOOL, writable=False, synced=False,
        description="Si se indica, el usuario autenticado no se añade como owner del proyecto.",
    ),
    "new_account_name": FieldSpec(
        TYPE_STRING, writable=False, synced=False,
        description="string[100]. Crea una cuenta nueva con este nombre y añade el proyecto a ella.",
    ),
    "name": FieldSpec(
        TYPE_STRING, required=True,
        description="extended string[50]. Nombre del proyecto.",
    ),
    "status": FieldSpec(
        TYPE_STRING, synced=False,
        description="Estado del proyecto. No se re-sincroniza en read.",
    ),
    "iteration_length": FieldSpec(
        TYPE_INT, computed=True,
        description="Número de semanas de una iteración.",
    ),
    "week_start_day": FieldSpec(
        TYPE_STRING, writable=False, synced=False,
        description="Día de inicio de iteración: Sunday, Monday, Tuesday, Wednesday, Thursday, Friday, Saturday.",
    ),
    "point_scale": FieldSpec(
        TYPE_STRING, computed=True,
        description='string[255]. Escala de puntos separada por comas; integradas: "0,1,2,3", "0,1,2,4,8", "0,1,2,3,5,8".',
    ),
    "bugs_and_chores_are_estimatable": FieldSpec(
        TYPE_BOOL,
        description="Permite estimar historias de tipo Bug y Chore.",
    ),
    "automatic_planning": FieldSpec(
        TYPE_BOOL, computed=True,
        description="Si es false, se suspende la planificación emergente de iteraciones.",
    ),
    "enable_tasks": FieldSpec(
        TYPE_BOOL, computed=True,
        description="Permite crear tareas dentro de cada historia.",
    ),
    "start_date": FieldSpec(
        TYPE_STRING, writable=False, synced=False,
        description='Primer día de una iteración, formato "YYYY-MM-DD". Debe ser consistente con week_start_day.',
    ),
    "time_zone": FieldSpec(
        TYPE_STRING, writable=False, synced=False,
        description="Zona horaria nativa del proyecto.",
    ),
    "velocity_averaged_over": FieldSpec(
        TYPE_INT, computed=True,
        description="Iteraciones usadas para promediar la velocidad.",
    ),
    "number_of_done_iterations_to_show": FieldSpec(
        TYPE_INT, computed=True,
        description="Máximo de iteraciones Done cargadas/mostradas.",
    ),
    "description": FieldSpec(
        TYPE_STRING,
        description="extended string[140]. Descripción del contenido del proyecto.",
    ),
    "profile_content": FieldSpec(
        TYPE_STRING,
        description="extended string[65535]. Descripción larga (Project Overview).",
    ),
    "enable_incoming_emails": FieldSpec(
        TYPE_BOOL, computed=True,
        description="Convierte respuestas por email a comentarios de historias.",
    ),
    "initial_velocity": FieldSpec(
        TYPE_INT, computed=True,
        description="Velocidad usada mientras no haya iteraciones suficientes.",
    ),
    "project_type": FieldSpec(
        TYPE_STRING, computed=True,
        description="Tipo de proyecto: demo (deprecado), private, public, shared.",
    ),
    "public": FieldSpec(
        TYPE_BOOL,
        description="Permite que cualquier usuario vea el proyecto.",
    ),
    "atom_enabled": FieldSpec(
        TYPE_BOOL,
        description="Permite suscribirse al feed Atom del proyecto.",
    ),
    "account_id": FieldSpec(
        TYPE_INT, computed=True,
        description="ID de la cuenta que contiene el proyecto.",
    ),
    "join_as": FieldSpec(
        TYPE_STRING, synced=False,
        description="join_as por defecto: owner, member, viewer. No se re-sincroniza en read.",
    ),
}


def writable_fields(schema: Dict[str, FieldSpec] = PROJECT_SCHEMA) -> List[str]:
    """Atributos que se envían completos en cada create/update."""
    return [name for name, spec in schema.items() if spec.writable]


def synced_fields(schema: Dict[str, FieldSpec] = PROJECT_SCHEMA) -> List[str]:
    """Atributos que read sobrescribe con el valor remoto."""
    return [name for name, spec in schema.items() if spec.synced]


def type_matches(spec: FieldSpec, value: Any) -> bool:
    """bool es subclase de int en Python: se distingue explícitamente."""
    if spec.type == TYPE_BOOL:
        return isinstance(value, bool)
    if spec.type == TYPE_INT:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, str)

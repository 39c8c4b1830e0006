"""
Contratos de estado (State): registro del host y lectura/escritura abstracta.

El core NO persiste estado; el host guarda un ResourceRecord por recurso
(identidad + atributos) entre invocaciones. Aquí solo se definen el registro
y los protocolos.
"""

from typing import Any, Dict, List, Optional, Protocol

from trackerprovider.core.errors import SchemaTypeError
from trackerprovider.core.schema import (
    PROJECT_SCHEMA,
    TYPE_BOOL,
    TYPE_INT,
    TYPE_STRING,
    FieldSpec,
    type_matches,
)


class StateDiff:
    """Diferencia entre estado deseado y real (agnóstico de provider)."""
    def __init__(
        self,
        resource_id: str,
        field: str,
        desired: Any,
        actual: Any,
        severity: str = "warning"
    ):
        self.resource_id = resource_id
        self.field = field
        self.desired = desired
        self.actual = actual
        self.severity = severity  # "error", "warning", "info"

    def __repr__(self) -> str:
        return f"StateDiff({self.resource_id}.{self.field}: {self.actual!r} -> {self.desired!r})"


class ResourceRecord:
    """
    Registro persistido por el host: identidad opaca (string) + atributos.

    La identidad vacía significa "recurso inexistente". Los accesores tipados
    fallan con SchemaTypeError si el tipo declarado no coincide con el guardado.
    """

    def __init__(
        self,
        id: str = "",
        attributes: Optional[Dict[str, Any]] = None,
        schema: Optional[Dict[str, FieldSpec]] = None,
    ):
        self.id = id
        self.attributes: Dict[str, Any] = dict(attributes or {})
        self.schema = schema if schema is not None else PROJECT_SCHEMA

    @property
    def exists(self) -> bool:
        return bool(self.id)

    def set_id(self, identity: str) -> None:
        self.id = identity

    def _spec(self, name: str) -> FieldSpec:
        spec = self.schema.get(name)
        if spec is None:
            raise SchemaTypeError(f"atributo no declarado: {name}")
        return spec

    def get(self, name: str) -> Any:
        """Valor tipado; si no está declarado devuelve el valor cero del tipo."""
        spec = self._spec(name)
        value = self.attributes.get(name)
        if value is None:
            return spec.zero
        if not type_matches(spec, value):
            raise SchemaTypeError(
                f"{name}: se esperaba {spec.type}, guardado {type(value).__name__} ({value!r})"
            )
        return value

    def _typed_get(self, name: str, expected: str) -> Any:
        spec = self._spec(name)
        if spec.type != expected:
            raise SchemaTypeError(f"{name} está declarado como {spec.type}, no {expected}")
        return self.get(name)

    def get_str(self, name: str) -> str:
        return self._typed_get(name, TYPE_STRING)

    def get_int(self, name: str) -> int:
        return self._typed_get(name, TYPE_INT)

    def get_bool(self, name: str) -> bool:
        return self._typed_get(name, TYPE_BOOL)

    def is_set(self, name: str) -> bool:
        return self.attributes.get(name) is not None

    def apply(self, identity: str, values: Dict[str, Any]) -> None:
        """Guarda identidad y valores de una vez (sin mutaciones parciales)."""
        for name, value in values.items():
            spec = self._spec(name)
            if value is not None and not type_matches(spec, value):
                raise SchemaTypeError(f"{name}: valor {value!r} no es {spec.type}")
        self.attributes.update(values)
        self.id = identity

    def clear(self) -> None:
        self.id = ""
        self.attributes = {}

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "attributes": dict(self.attributes)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], schema: Optional[Dict[str, FieldSpec]] = None) -> "ResourceRecord":
        return cls(
            id=str(data.get("id") or ""),
            attributes=data.get("attributes") or {},
            schema=schema,
        )


class StateReader(Protocol):
    """Protocolo: quien lee registros persistidos (p. ej. archivo de estado)."""
    def names(self) -> List[str]:
        ...

    def read_record(self, name: str) -> Optional[ResourceRecord]:
        ...


class StateWriter(Protocol):
    """Protocolo: quien persiste registros."""
    def write_record(self, name: str, record: ResourceRecord) -> None:
        ...

    def remove_record(self, name: str) -> None:
        ...


class StateBackend(StateReader, StateWriter, Protocol):
    """Lectura y escritura de registros (lo que necesita el motor del host)."""

"""
Core: lógica de negocio pura.

ENFORCEMENT (arquitectura limpia):
- Este paquete NO debe importar: trackerprovider.cli, trackerprovider.providers.*,
  ni módulos de red (requests) o filesystem real (salvo resolver que solo devuelve Path).
- Permitido: typing, pathlib.Path, pydantic, trackerprovider.core.*.
- Los providers y la CLI importan desde core; nunca al revés.
"""

from trackerprovider.core.errors import (
    TrackerProviderError,
    ValidationError,
    ConfigError,
    ProviderError,
    InvalidIdentifierError,
    RemoteCallError,
)

__all__ = [
    "TrackerProviderError",
    "ValidationError",
    "ConfigError",
    "ProviderError",
    "InvalidIdentifierError",
    "RemoteCallError",
]

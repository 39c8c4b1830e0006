"""
Base opcional para recursos: identidad y operaciones comunes.

Los recursos pueden heredar de aquí o implementar solo el contrato (Protocol).
"""

import re

from trackerprovider.core.errors import InvalidIdentifierError

# Entero base 10 con signo opcional; sin espacios ni separadores
_IDENTITY_RE = re.compile(r"[+-]?[0-9]+")


def decode_identity(identity: str) -> int:
    """
    Decodifica la identidad opaca del host al ID numérico remoto.
    Falla con InvalidIdentifierError (registro corrupto) sin tocar la red.
    """
    if not isinstance(identity, str) or not _IDENTITY_RE.fullmatch(identity):
        raise InvalidIdentifierError(identity)
    return int(identity)


def encode_identity(remote_id: int) -> str:
    return str(remote_id)


class BaseResource:
    """Base opcional para recursos; no obligatorio usar herencia."""

    name: str = "base"

    def import_state(self, identifier: str) -> str:
        """Import passthrough: la identidad externa se usa tal cual; el read posterior valida."""
        return identifier

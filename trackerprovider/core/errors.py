"""
Errores del provider.

El core solo define excepciones; las capas (CLI/host) se encargan del formato de salida.
"""

from typing import Optional


class TrackerProviderError(Exception):
    """Error base del provider."""
    pass


class ValidationError(TrackerProviderError):
    """Error de validación de configuración o modelos."""
    pass


class ConfigError(TrackerProviderError):
    """Error de configuración (archivo faltante, formato inválido)."""
    pass


class ProviderError(TrackerProviderError):
    """Error delegado desde un provider (cliente remoto, recurso)."""
    pass


class TrackerAPIError(ProviderError):
    """La API remota devolvió un error o no respondió."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidIdentifierError(ProviderError):
    """
    La identidad guardada no es un entero en base 10.

    Indica corrupción del registro local, no un problema remoto: nunca se reintenta.
    """

    retryable = False

    def __init__(self, identity: str):
        super().__init__(f"conversion of id failed: invalid identity {identity!r}")
        self.identity = identity


class RemoteCallError(ProviderError):
    """Fallo del cliente remoto envuelto con la fase del ciclo de vida."""

    retryable = True

    def __init__(self, phase: str, message: str, cause: Optional[Exception] = None):
        super().__init__(f"{message}: {cause}" if cause is not None else message)
        self.phase = phase
        self.cause = cause


class SchemaTypeError(TypeError):
    """El valor guardado no coincide con el tipo declarado (error de programación)."""
    pass

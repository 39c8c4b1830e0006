"""
Contratos y base para recursos y clientes remotos.

Los providers (project, ...) implementan estos contratos;
el core no depende de ningún provider concreto.
"""

from trackerprovider.core.infra.contracts import ResourceContract, ProjectClient, PlanResult
from trackerprovider.core.infra.base import BaseResource, decode_identity, encode_identity

__all__ = [
    "ResourceContract",
    "ProjectClient",
    "PlanResult",
    "BaseResource",
    "decode_identity",
    "encode_identity",
]

"""
Planificación: genera un plan de cambios (qué aplicar) sin ejecutar.

Lógica pura: entrada = diffs; salida = lista de acciones. La ejecución la hace
el host vía el provider.
"""

from typing import List

from trackerprovider.core.runtime.state import StateDiff


def plan_from_diffs(diffs: List[StateDiff]) -> List[str]:
    """
    Convierte una lista de StateDiff en acciones legibles (para mostrar en CLI).
    No ejecuta nada.
    """
    actions: List[str] = []
    for d in diffs:
        if d.field == "id":
            if d.desired == "absent":
                actions.append(f"Eliminar {d.resource_id}")
            else:
                actions.append(f"Crear {d.resource_id}")
        elif d.desired != d.actual:
            actions.append(f"Actualizar {d.resource_id}.{d.field}: {d.actual!r} → {d.desired!r}")
    return actions

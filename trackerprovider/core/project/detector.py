"""
Detección de drift (diferencias entre estado deseado y último estado conocido).

El estado remoto se obtiene vía read del provider y queda en el ResourceRecord;
aquí solo se comparan estructuras.
"""

from typing import List

from trackerprovider.core.project.models import ProjectConfig
from trackerprovider.core.runtime.state import ResourceRecord, StateDiff


def detect_drift(resource_id: str, desired: ProjectConfig, record: ResourceRecord) -> List[StateDiff]:
    """
    Compara el estado deseado (ProjectConfig.desired) con el registro refrescado.

    Los computados no declarados los decide el servidor y se ignoran; un
    escribible no computado que se quitó de la config se compara con su valor
    cero. Para los que read no re-sincroniza (status, join_as) el registro
    conserva el último valor aplicado, así que un cambio remoto en ellos no es drift.
    """
    if not record.exists:
        return [StateDiff(resource_id, "id", "exists", "missing", "error")]

    diffs: List[StateDiff] = []
    for field, value in desired.desired().items():
        actual = record.get(field)
        if actual != value:
            diffs.append(StateDiff(resource_id, field, value, actual, "warning"))
    return diffs

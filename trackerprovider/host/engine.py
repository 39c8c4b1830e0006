"""
Motor del host: decide qué operación del recurso invocar para cada proyecto
declarado y persiste los registros resultantes.

Un registro solo se escribe en el StateStore si la operación terminó bien.
"""

from typing import Dict, List, Optional

from trackerprovider.core.errors import RemoteCallError
from trackerprovider.core.infra.contracts import PlanResult, ResourceContract
from trackerprovider.core.project.detector import detect_drift
from trackerprovider.core.project.models import ProjectConfig
from trackerprovider.core.project.planner import plan_from_diffs
from trackerprovider.core.project.validator import ensure_valid
from trackerprovider.core.runtime.state import ResourceRecord, StateBackend, StateDiff


class ProjectEngine:
    """Orquesta plan/apply/refresh/import/destroy sobre un ResourceContract."""

    def __init__(self, resource: ResourceContract, store: StateBackend):
        self.resource = resource
        self.store = store

    def _remote_exists(self, record: ResourceRecord) -> bool:
        """
        Existencia autoritativa. Política del host: un 404 del remoto equivale
        a "no existe"; cualquier otro fallo se propaga.
        """
        try:
            return self.resource.exists(record)
        except RemoteCallError as e:
            if getattr(e.cause, "status_code", None) == 404:
                return False
            raise

    def _current(self, name: str) -> Optional[ResourceRecord]:
        """Registro guardado y refrescado, o None si no existe en remoto."""
        record = self.store.read_record(name)
        if record is None or not record.exists:
            return None
        if not self._remote_exists(record):
            return None
        self.resource.read(record)
        return record

    def plan(self, desired: Dict[str, ProjectConfig]) -> PlanResult:
        """Calcula qué cambios se aplicarían (sin ejecutar ni persistir)."""
        diffs: List[StateDiff] = []
        for name, config in desired.items():
            ensure_valid(config)
            record = self._current(name) or ResourceRecord()
            diffs.extend(detect_drift(name, config, record))
        for name in self.store.names():
            if name not in desired:
                diffs.append(StateDiff(name, "id", "absent", "exists", "error"))

        actions = plan_from_diffs(diffs)
        summary = f"{len(actions)} cambio(s)" if actions else "Sin cambios"
        return PlanResult(actions=actions, diffs=diffs, summary=summary)

    def apply(self, desired: Dict[str, ProjectConfig]) -> List[str]:
        """Aplica el estado deseado. Devuelve las acciones ejecutadas."""
        for config in desired.values():
            ensure_valid(config)

        done: List[str] = []
        for name, config in desired.items():
            record = self._current(name)
            if record is None:
                record = ResourceRecord(attributes=config.desired())
                self.resource.create(record)
                self.store.write_record(name, record)
                self.resource.read(record)
                done.append(f"Creado {name} (id={record.id})")
            elif detect_drift(name, config, record):
                record.apply(record.id, config.desired())
                self.resource.update(record)
                self.resource.read(record)
                done.append(f"Actualizado {name} (id={record.id})")
            self.store.write_record(name, record)

        for name in self.store.names():
            if name not in desired:
                self.destroy(name)
                done.append(f"Eliminado {name}")
        return done

    def refresh(self) -> List[str]:
        """Refresca todos los registros; los que ya no existen en remoto se olvidan."""
        gone: List[str] = []
        for name in self.store.names():
            record = self._current(name)
            if record is None:
                self.store.remove_record(name)
                gone.append(name)
            else:
                self.store.write_record(name, record)
        return gone

    def import_project(self, name: str, identifier: str) -> ResourceRecord:
        """Import passthrough + read inmediato (que valida la identidad)."""
        record = ResourceRecord(id=self.resource.import_state(identifier))
        self.resource.read(record)
        self.store.write_record(name, record)
        return record

    def destroy(self, name: str) -> None:
        record = self.store.read_record(name)
        if record is None:
            return
        if record.exists:
            self.resource.delete(record)
        self.store.remove_record(name)

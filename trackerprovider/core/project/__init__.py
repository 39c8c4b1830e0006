"""
Project: esquema, modelos, validación, planificación y detección de drift.

Lógica pura; sin I/O ni dependencias de CLI o providers.
"""

from trackerprovider.core.schema import PROJECT_SCHEMA, FieldSpec, writable_fields, synced_fields
from trackerprovider.core.project.models import ProjectConfig, RemoteProject, ProjectType, JoinAs, WeekStartDay
from trackerprovider.core.project.validator import validate_desired_config, ensure_valid
from trackerprovider.core.project.planner import plan_from_diffs
from trackerprovider.core.project.detector import detect_drift

__all__ = [
    "PROJECT_SCHEMA",
    "FieldSpec",
    "writable_fields",
    "synced_fields",
    "ProjectConfig",
    "RemoteProject",
    "ProjectType",
    "JoinAs",
    "WeekStartDay",
    "validate_desired_config",
    "ensure_valid",
    "plan_from_diffs",
    "detect_drift",
]

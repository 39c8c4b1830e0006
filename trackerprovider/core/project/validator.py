"""
Validación de configuración deseada (lógica pura, nivel host).

Sin I/O; solo las reglas que la API documenta. El reconciliador NO la ejecuta:
la corre el host antes de plan/apply.
"""

from datetime import date
from typing import Any, Dict, List

from trackerprovider.core.errors import ValidationError
from trackerprovider.core.project.models import JoinAs, ProjectConfig, ProjectType, WeekStartDay

MAX_LENGTHS: Dict[str, int] = {
    "name": 50,
    "description": 140,
    "profile_content": 65535,
    "point_scale": 255,
    "new_account_name": 100,
}

_WEEKDAYS = [
    WeekStartDay.MONDAY,
    WeekStartDay.TUESDAY,
    WeekStartDay.WEDNESDAY,
    WeekStartDay.THURSDAY,
    WeekStartDay.FRIDAY,
    WeekStartDay.SATURDAY,
    WeekStartDay.SUNDAY,
]


def parse_start_date(value: str) -> date:
    """start_date en formato YYYY-MM-DD."""
    try:
        if len(value) != 10:
            raise ValueError(value)
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError(f"start_date debe tener formato YYYY-MM-DD: {value!r}")


def _check_enum(errors: List[str], field: str, value: Any, enum_cls) -> None:
    allowed = [e.value for e in enum_cls]
    if value is not None and value not in allowed:
        errors.append(f"'{field}' debe ser uno de: {', '.join(allowed)}")


def validate_desired_config(config: ProjectConfig) -> List[str]:
    """
    Valida un ProjectConfig.
    Devuelve lista de mensajes de error; si vacía, es válido.
    """
    errors: List[str] = []
    if not config.name or not config.name.strip():
        errors.append("'name' no puede estar vacío")

    for field, limit in MAX_LENGTHS.items():
        value = getattr(config, field)
        if value is not None and len(value) > limit:
            errors.append(f"'{field}' excede {limit} caracteres ({len(value)})")

    _check_enum(errors, "project_type", config.project_type, ProjectType)
    _check_enum(errors, "join_as", config.join_as, JoinAs)
    _check_enum(errors, "week_start_day", config.week_start_day, WeekStartDay)

    for field in ("iteration_length", "velocity_averaged_over", "number_of_done_iterations_to_show", "initial_velocity"):
        value = getattr(config, field)
        if value is not None and value < 0:
            errors.append(f"'{field}' no puede ser negativo")

    if config.start_date is not None:
        try:
            start = parse_start_date(config.start_date)
        except ValidationError as e:
            errors.append(str(e))
        else:
            # start_date y week_start_day deben coincidir
            if config.week_start_day is not None and config.week_start_day in [d.value for d in WeekStartDay]:
                actual_day = _WEEKDAYS[start.weekday()].value
                if actual_day != config.week_start_day:
                    errors.append(
                        f"start_date {config.start_date} cae en {actual_day}, "
                        f"no coincide con week_start_day {config.week_start_day}"
                    )
    return errors


def ensure_valid(config: ProjectConfig) -> None:
    """Lanza ValidationError con todos los mensajes si la config no es válida."""
    errors = validate_desired_config(config)
    if errors:
        raise ValidationError("; ".join(errors))

"""Formatter JSON para os logs do motor de workflow.

Campos presentes em todo record:
- asctime, level, logger, message
- service, correlation_id (injetados pelo ServiceContextFilter)

Campos estruturados passados via `extra` (ex: transition, state)
são serializados junto pelo JsonFormatter.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos base emitidos em todo log
BASE_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "service",
    "correlation_id",
)

# levelname → level, name → logger
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter com os campos base e renomeações padrão.

    Exemplo de output:
        {
            "asctime": "2026-10-18 10:30:00,123",
            "level": "INFO",
            "logger": "workflow.manager.engine",
            "message": "Transition rejected",
            "service": "workflow",
            "correlation_id": "",
            "transition": "complete",
            "state": "archived"
        }
    """
    fmt = " ".join(f"%({name})s" for name in BASE_LOG_FIELDS)
    return JsonFormatter(fmt, rename_fields=FIELD_RENAME_MAP)

"""Logging estruturado em JSON.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="orders")
    logger = get_logger(__name__)
"""

from config.logging.config import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)
from config.logging.filters import ServiceContextFilter
from config.logging.formatters import (
    BASE_LOG_FIELDS,
    FIELD_RENAME_MAP,
    create_json_formatter,
)

__all__ = [
    "BASE_LOG_FIELDS",
    "FIELD_RENAME_MAP",
    "ServiceContextFilter",
    "configure_logging",
    "configure_logging_from_settings",
    "create_json_formatter",
    "get_logger",
]

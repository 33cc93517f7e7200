"""Configuração centralizada de logging estruturado (JSON).

O pacote `workflow` nunca configura logging ao ser importado; apenas
obtém loggers via `get_logger(__name__)`. Cabe à aplicação host chamar
`configure_logging` uma vez na inicialização.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="DEBUG", service_name="orders")
    logger = get_logger(__name__)
    logger.info("Workflow pronto", extra={"transitions": 4})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import ServiceContextFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "workflow"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala um único handler JSON no root logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (case insensitive).
        service_name: Valor do campo `service` em todos os logs.
        correlation_id_getter: Função opcional para o campo `correlation_id`.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    normalized = level.upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(normalized)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(ServiceContextFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(normalized)
    # Substitui handlers existentes para evitar logs duplicados
    root.handlers = [handler]


def configure_logging_from_settings() -> None:
    """Configura logging a partir de WorkflowSettings (variáveis de ambiente)."""
    from config.settings import get_workflow_settings

    settings = get_workflow_settings()
    errors = settings.validate()
    if errors:
        raise ValueError(f"WorkflowSettings inválidas: {'; '.join(errors)}")
    configure_logging(level=settings.log_level, service_name=settings.service_name)


def get_logger(name: str) -> logging.Logger:
    """Retorna o logger do módulo (geralmente `__name__`)."""
    return logging.getLogger(name)

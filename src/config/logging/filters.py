"""Filter que injeta contexto do serviço em cada record de log."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class ServiceContextFilter(logging.Filter):
    """Adiciona `service` e `correlation_id` aos records.

    Args:
        service_name: Nome do serviço que embarca o motor.
        correlation_id_getter: Função opcional que devolve o correlation_id
            do contexto atual (ex: lido de uma ContextVar do host).
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self.service_name = service_name
        self._correlation_id_getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta."""
        if not getattr(record, "correlation_id", None):
            getter = self._correlation_id_getter
            record.correlation_id = getter() if getter else ""
        record.service = self.service_name
        return True

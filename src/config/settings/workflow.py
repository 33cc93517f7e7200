"""Settings do motor de workflow.

Defaults aplicados pelas factories quando o chamador não informa
opções explícitas. Lidos de variáveis de ambiente uma única vez.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

_TRUE_VALUES = ("true", "1", "yes")


@dataclass(frozen=True)
class WorkflowSettings:
    """Configurações do motor de workflow.

    Attributes:
        detect_unexpected_state: Default do guard de estado inesperado
        log_level: Nível de log usado por configure_logging_from_settings
        service_name: Nome do serviço nos logs estruturados
    """

    detect_unexpected_state: bool = False
    log_level: str = "INFO"
    service_name: str = "workflow"

    def validate(self) -> list[str]:
        """Valida as configurações.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level.upper() not in valid_levels:
            errors.append(f"WORKFLOW_LOG_LEVEL inválido: {self.log_level}")

        if not self.service_name:
            errors.append("WORKFLOW_SERVICE_NAME não pode ser vazio")

        return errors


def _load_workflow_from_env() -> WorkflowSettings:
    """Carrega WorkflowSettings de variáveis de ambiente."""
    detect = os.getenv("WORKFLOW_DETECT_UNEXPECTED_STATE", "false").lower()
    return WorkflowSettings(
        detect_unexpected_state=detect in _TRUE_VALUES,
        log_level=os.getenv("WORKFLOW_LOG_LEVEL", "INFO"),
        service_name=os.getenv("WORKFLOW_SERVICE_NAME", "workflow"),
    )


@lru_cache(maxsize=1)
def get_workflow_settings() -> WorkflowSettings:
    """Retorna instância cacheada de WorkflowSettings."""
    return _load_workflow_from_env()

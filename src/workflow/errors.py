"""Exceções do motor de workflow.

Todas as falhas são terminais do ponto de vista do motor: nada é
re-tentado internamente e o chamador decide o que fazer.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


def format_state(state: Any) -> str:
    """Representação literal de um estado para mensagens de erro.

    Membros de Enum usam o `.value` (ex: IntEnum 2 → "2").
    """
    if isinstance(state, Enum):
        return str(state.value)
    return str(state)


class WorkflowError(Exception):
    """Base para erros do motor de workflow."""


class TransitionNotFoundError(WorkflowError, LookupError):
    """Nenhuma transição registrada com o nome informado."""

    def __init__(self, transition_name: str) -> None:
        self.transition_name = transition_name
        super().__init__(f"Transition '{transition_name}' not found.")


class UnexpectedStateError(WorkflowError, ValueError):
    """Estado atual ausente do conjunto de estados conhecidos."""

    def __init__(self, state: Any) -> None:
        self.state = state
        super().__init__(
            f"The instance has an unexpected state '{format_state(state)}'"
        )


class TransitionRejectedError(WorkflowError, ValueError):
    """Transição não pode ser aplicada a partir do estado atual."""

    def __init__(self, transition_name: str, state: Any) -> None:
        self.transition_name = transition_name
        self.state = state
        super().__init__(
            f"Can't apply transition '{transition_name}' "
            f"to current state '{format_state(state)}'"
        )


class InvalidConfigurationError(WorkflowError, ValueError):
    """Configuração do motor ou de uma transição é inválida."""

"""
Opções de construção dos motores de workflow.

Estruturas explícitas com campos nomeados e defaults documentados,
em vez de argumentos posicionais soltos.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from workflow.types.state import State


@dataclass(frozen=True, slots=True)
class WorkflowOptions:
    """
    Opções comuns a todos os motores.

    Attributes:
        detect_unexpected_state: Ativa o guard de estado inesperado (default False)
        known_states: Estados esperados pelo workflow (default vazio)
    """

    detect_unexpected_state: bool = False
    known_states: Iterable[State] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "known_states", frozenset(self.known_states))


@dataclass(frozen=True, slots=True)
class ClassWorkflowOptions:
    """
    Opções do motor ligado a uma classe de entidade.

    Attributes:
        entity: Classe da entidade (construível sem argumentos)
        state_property: Nome do atributo que guarda o estado
        detect_unexpected_state: Ativa o guard de estado inesperado (default False)
        known_states: Estados esperados pelo workflow (default vazio)
    """

    entity: type
    state_property: str
    detect_unexpected_state: bool = False
    known_states: Iterable[State] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "known_states", frozenset(self.known_states))

    def base_options(self) -> WorkflowOptions:
        """Recorta as opções comuns."""
        return WorkflowOptions(
            detect_unexpected_state=self.detect_unexpected_state,
            known_states=self.known_states,
        )

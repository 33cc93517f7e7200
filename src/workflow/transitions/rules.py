"""
Regras de transição: origem única e múltiplas origens.

Cada regra mapeia um (ou vários) estados de origem para um único
estado de destino. A resolução é pura e pode ser chamada de forma
repetida e concorrente.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from workflow.errors import InvalidConfigurationError
from workflow.types.state import State


@dataclass(frozen=True, slots=True)
class Transition:
    """
    Transição de origem única.

    Attributes:
        origin: Estado a partir do qual a transição dispara
        destination: Estado alcançado quando a transição dispara
    """

    origin: State
    destination: State

    def resolve(self, state: State) -> State | None:
        """Retorna destination se state == origin, senão None."""
        if state == self.origin:
            return self.destination
        return None


@dataclass(frozen=True, slots=True)
class MultiOriginTransition:
    """
    Transição com múltiplas origens e um único destino.

    Attributes:
        origins: Estados de origem (ordem preservada)
        destination: Estado alcançado quando a transição dispara
    """

    origins: Iterable[State]
    destination: State

    def __post_init__(self) -> None:
        """Normaliza origins para tupla e valida que não é vazio."""
        # Aceita list/set/gerador na construção
        normalized = tuple(self.origins)
        if not normalized:
            raise InvalidConfigurationError(
                "MultiOriginTransition requires at least one origin state."
            )
        object.__setattr__(self, "origins", normalized)

    def resolve(self, state: State) -> State | None:
        """Retorna destination se state pertence a origins, senão None."""
        if state in self.origins:
            return self.destination
        return None

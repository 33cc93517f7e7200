"""
Tipos base do motor de workflow.

Este módulo define o que é um estado, o contrato de uma regra de
transição e o acessor que liga o motor ao campo de estado de uma
entidade.

Estados são opacos: qualquer valor hashable comparável por igualdade
(str, int, Enum) serve.
"""

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, runtime_checkable

from workflow.errors import InvalidConfigurationError

State: TypeAlias = Hashable


@runtime_checkable
class TransitionRule(Protocol):
    """
    Protocolo de uma regra de transição.

    Uma regra recebe o estado atual e devolve o estado de destino,
    ou None se não pode disparar a partir dele. Deve ser pura.
    """

    def resolve(self, state: State) -> State | None:
        """Resolve o próximo estado (ou None)."""
        ...


@dataclass(frozen=True, slots=True)
class StateAccessor:
    """
    Par leitura/escrita do campo de estado de uma entidade.

    Attributes:
        state_property: Nome do atributo ligado
        read: Função que lê o estado atual da entidade
        write: Função que grava o novo estado na entidade
    """

    state_property: str
    read: Callable[[Any], State]
    write: Callable[[Any, State], None]

    @classmethod
    def for_attribute(cls, entity_type: type, state_property: str) -> "StateAccessor":
        """
        Cria acessor para um atributo, validado numa instância default.

        Args:
            entity_type: Classe da entidade (deve aceitar construção sem args)
            state_property: Nome do atributo de estado

        Returns:
            StateAccessor pronto para uso

        Raises:
            InvalidConfigurationError: Se a entidade não pode ser construída
                ou se o atributo não existe nela
        """
        if not state_property:
            raise InvalidConfigurationError("state_property não pode ser vazio")

        try:
            instance = entity_type()
        except Exception as exc:
            raise InvalidConfigurationError(
                f"Entity {entity_type.__name__} must be constructible without arguments: {exc}"
            ) from exc

        if not hasattr(instance, state_property):
            raise InvalidConfigurationError(
                f"Property '{state_property}' does not exist in the provided entity."
            )

        def _read(entity: Any) -> State:
            return getattr(entity, state_property)

        def _write(entity: Any, value: State) -> None:
            setattr(entity, state_property, value)

        return cls(state_property=state_property, read=_read, write=_write)

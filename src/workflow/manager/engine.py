"""
Motores de workflow: registro de transições nomeadas + consulta/aplicação.

Dois sabores:
    - Workflow: recebe o estado diretamente (token) e devolve o próximo estado
    - ClassWorkflow: ligado ao atributo de estado de uma classe de entidade,
      lê e grava o estado na instância recebida

Convenções de retorno de `can`:
    - Workflow.can → próximo estado concreto, ou None
    - ClassWorkflow.can → True/False (use next_state para o valor concreto)

Não há sincronização interna: o registro é read-mostly e pode ser
consultado por várias threads após o fim do registro.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from config.logging import get_logger
from workflow.errors import (
    InvalidConfigurationError,
    TransitionNotFoundError,
    TransitionRejectedError,
    UnexpectedStateError,
    format_state,
)
from workflow.manager.options import ClassWorkflowOptions, WorkflowOptions
from workflow.types.state import State, StateAccessor, TransitionRule

logger = get_logger(__name__)


class BaseWorkflow:
    """
    Registro de transições e guard de estado inesperado.

    Attributes:
        transitions: Visão somente-leitura do registro nome → regra
        known_states: Estados esperados (usados apenas pelo guard)
        detect_unexpected_state: Se o guard está ativo
    """

    __slots__ = ("_detect_unexpected_state", "_states", "_transitions")

    kind = "base"

    def __init__(self, options: WorkflowOptions | None = None) -> None:
        """
        Inicializa o registro vazio.

        Args:
            options: Opções do motor (usa WorkflowOptions() se None)
        """
        opts = options or WorkflowOptions()
        self._transitions: dict[str, TransitionRule] = {}
        self._detect_unexpected_state = opts.detect_unexpected_state
        self._states: set[State] = set(opts.known_states)

    @property
    def transitions(self) -> Mapping[str, TransitionRule]:
        """Registro nome → regra (somente leitura)."""
        return MappingProxyType(self._transitions)

    @property
    def known_states(self) -> frozenset[State]:
        """Estados declarados como esperados."""
        return frozenset(self._states)

    @property
    def detect_unexpected_state(self) -> bool:
        """Se o guard de estado inesperado está ativo."""
        return self._detect_unexpected_state

    def __contains__(self, name: object) -> bool:
        return name in self._transitions

    def __len__(self) -> int:
        return len(self._transitions)

    def add_transition(self, name: str, transition: TransitionRule) -> None:
        """
        Registra uma transição sob `name`.

        Se o nome já estiver em uso, não faz nada: a primeira
        registração vence (idempotente para setup executado várias vezes).

        Raises:
            InvalidConfigurationError: Se `transition` não implementa resolve()
        """
        if not isinstance(transition, TransitionRule):
            raise InvalidConfigurationError(
                f"Transition '{name}' must implement resolve(state)."
            )

        if name in self._transitions:
            logger.debug(
                "Duplicate transition registration ignored",
                extra={"transition": name},
            )
            return

        self._transitions[name] = transition
        logger.debug("Transition registered", extra={"transition": name})

    register_transition = add_transition

    def get_transition(self, name: str) -> TransitionRule:
        """
        Retorna a regra registrada sob `name`.

        Raises:
            TransitionNotFoundError: Se nenhuma regra usa o nome
        """
        transition = self._transitions.get(name)
        if transition is None:
            raise TransitionNotFoundError(name)
        return transition

    def has_transition(self, name: str) -> bool:
        """Verifica se há regra registrada sob `name`."""
        return name in self._transitions

    def transition_names(self) -> list[str]:
        """Nomes registrados, em ordem de registro."""
        return list(self._transitions)

    def add_states(self, *states: State) -> None:
        """Declara estados como esperados pelo workflow."""
        self._states.update(states)

    def get_summary(self) -> dict[str, Any]:
        """
        Retorna resumo do motor para observability.

        Returns:
            Dict seguro para logs estruturados
        """
        return {
            "kind": self.kind,
            "transitions": self.transition_names(),
            "known_states_count": len(self._states),
            "detect_unexpected_state": self._detect_unexpected_state,
        }

    def _resolve(self, name: str, current_state: State) -> State | None:
        return self.get_transition(name).resolve(current_state)

    def _check_unexpected_state(self, current_state: State) -> None:
        # Só é chamado após uma resolução sem sucesso
        if not self._detect_unexpected_state:
            return
        if current_state in self._states:
            return

        logger.warning(
            "Unexpected state detected",
            extra={"state": format_state(current_state)},
        )
        raise UnexpectedStateError(current_state)

    def _available_from(self, current_state: State) -> list[str]:
        return [
            name
            for name, transition in self._transitions.items()
            if transition.resolve(current_state) is not None
        ]

    def _rejected(self, name: str, current_state: State) -> TransitionRejectedError:
        logger.info(
            "Transition rejected",
            extra={"transition": name, "state": format_state(current_state)},
        )
        return TransitionRejectedError(name, current_state)


class Workflow(BaseWorkflow):
    """
    Motor baseado em token: o próprio estado é passado a cada chamada.

    `can` devolve o próximo estado concreto (ou None), permitindo
    encadear ou exibir o estado pendente.
    """

    __slots__ = ()

    kind = "token"

    def can(self, name: str, current_state: State) -> State | None:
        """
        Consulta se a transição pode disparar a partir de `current_state`.

        Args:
            name: Nome da transição
            current_state: Estado atual

        Returns:
            Próximo estado, ou None se a transição não se aplica

        Raises:
            TransitionNotFoundError: Se `name` não está registrado
            UnexpectedStateError: Se o guard está ativo e o estado é desconhecido
        """
        next_state = self._resolve(name, current_state)
        if next_state is not None:
            return next_state

        self._check_unexpected_state(current_state)
        return None

    def apply(self, name: str, current_state: State) -> State:
        """
        Aplica a transição e devolve o novo estado.

        Raises:
            TransitionNotFoundError: Se `name` não está registrado
            TransitionRejectedError: Se a transição não se aplica ao estado
        """
        next_state = self._resolve(name, current_state)
        if next_state is None:
            raise self._rejected(name, current_state)

        logger.debug(
            "Transition applied",
            extra={
                "transition": name,
                "from_state": format_state(current_state),
                "to_state": format_state(next_state),
            },
        )
        return next_state

    def available_transitions(self, current_state: State) -> list[str]:
        """Nomes das transições que disparam a partir de `current_state`."""
        return self._available_from(current_state)


class ClassWorkflow(BaseWorkflow):
    """
    Motor ligado ao atributo de estado de uma classe de entidade.

    O atributo é validado na construção numa instância default da
    entidade; se não existir, a construção falha imediatamente.
    """

    __slots__ = ("_accessor", "_entity")

    kind = "entity"

    def __init__(self, options: ClassWorkflowOptions) -> None:
        """
        Inicializa o motor e valida o atributo de estado.

        Args:
            options: Entidade, atributo de estado e opções comuns

        Raises:
            InvalidConfigurationError: Se o atributo não existe na entidade
        """
        super().__init__(options.base_options())
        self._entity = options.entity
        self._accessor = StateAccessor.for_attribute(
            options.entity, options.state_property
        )

    @property
    def entity_type(self) -> type:
        """Classe da entidade ligada."""
        return self._entity

    @property
    def state_property(self) -> str:
        """Nome do atributo de estado."""
        return self._accessor.state_property

    def can(self, name: str, instance: Any) -> bool:
        """
        Consulta se a transição pode disparar para a entidade.

        Returns:
            True se pode, False caso contrário

        Raises:
            TransitionNotFoundError: Se `name` não está registrado
            UnexpectedStateError: Se o guard está ativo e o estado é desconhecido
        """
        return self.next_state(name, instance) is not None

    def next_state(self, name: str, instance: Any) -> State | None:
        """Próximo estado da entidade pela transição, ou None."""
        transition = self.get_transition(name)
        current_state = self._accessor.read(instance)
        next_state = transition.resolve(current_state)
        if next_state is not None:
            return next_state

        self._check_unexpected_state(current_state)
        return None

    def apply(self, name: str, instance: Any) -> None:
        """
        Aplica a transição gravando o destino no atributo da entidade.

        O guard de estado inesperado não é avaliado aqui: qualquer
        rejeição é reportada diretamente. Em caso de erro o atributo
        permanece inalterado.

        Raises:
            TransitionNotFoundError: Se `name` não está registrado
            TransitionRejectedError: Se a transição não se aplica ao estado
        """
        transition = self.get_transition(name)
        current_state = self._accessor.read(instance)
        next_state = transition.resolve(current_state)
        if next_state is None:
            raise self._rejected(name, current_state)

        self._accessor.write(instance, next_state)
        logger.debug(
            "Transition applied",
            extra={
                "transition": name,
                "entity": self._entity.__name__,
                "from_state": format_state(current_state),
                "to_state": format_state(next_state),
            },
        )

    def available_transitions(self, instance: Any) -> list[str]:
        """Nomes das transições que disparam a partir do estado da entidade."""
        return self._available_from(self._accessor.read(instance))

    def get_summary(self) -> dict[str, Any]:
        summary = super().get_summary()
        summary["entity"] = self._entity.__name__
        summary["state_property"] = self.state_property
        return summary

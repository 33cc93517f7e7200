"""
Factories para criar motores com defaults vindos de WorkflowSettings.
"""

from collections.abc import Iterable

from config.settings import get_workflow_settings
from workflow.manager.engine import ClassWorkflow, Workflow
from workflow.manager.options import ClassWorkflowOptions, WorkflowOptions
from workflow.types.state import State


def _default_detect_unexpected_state(value: bool | None) -> bool:
    if value is not None:
        return value
    return get_workflow_settings().detect_unexpected_state


def create_workflow(
    *,
    detect_unexpected_state: bool | None = None,
    known_states: Iterable[State] = (),
) -> Workflow:
    """
    Factory function para criar um Workflow baseado em token.

    Args:
        detect_unexpected_state: Ativa o guard (usa WorkflowSettings se None)
        known_states: Estados esperados

    Returns:
        Workflow sem transições registradas
    """
    return Workflow(
        WorkflowOptions(
            detect_unexpected_state=_default_detect_unexpected_state(
                detect_unexpected_state
            ),
            known_states=known_states,
        )
    )


def create_class_workflow(
    entity: type,
    state_property: str,
    *,
    detect_unexpected_state: bool | None = None,
    known_states: Iterable[State] = (),
) -> ClassWorkflow:
    """
    Factory function para criar um ClassWorkflow.

    Args:
        entity: Classe da entidade
        state_property: Nome do atributo de estado
        detect_unexpected_state: Ativa o guard (usa WorkflowSettings se None)
        known_states: Estados esperados

    Returns:
        ClassWorkflow validado e sem transições registradas

    Raises:
        InvalidConfigurationError: Se o atributo não existe na entidade
    """
    return ClassWorkflow(
        ClassWorkflowOptions(
            entity=entity,
            state_property=state_property,
            detect_unexpected_state=_default_detect_unexpected_state(
                detect_unexpected_state
            ),
            known_states=known_states,
        )
    )

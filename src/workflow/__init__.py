"""
Módulo workflow — motor reutilizável de transições de estado.

Dado um conjunto de transições nomeadas (uma ou várias origens → um
destino), responde se a transição pode disparar a partir de um estado
e, opcionalmente, aplica-a gravando o novo estado numa entidade.

Estrutura:
    - types/: State, TransitionRule, StateAccessor
    - transitions/: Transition, MultiOriginTransition
    - manager/: Workflow, ClassWorkflow, opções e factories
    - definitions/: definições declarativas em YAML
    - errors: exceções do motor
"""

from workflow.definitions import (
    TransitionDefinition,
    WorkflowDefinition,
    build_workflow,
    load_workflow,
    load_workflow_definition,
    parse_workflow_definition,
)
from workflow.errors import (
    InvalidConfigurationError,
    TransitionNotFoundError,
    TransitionRejectedError,
    UnexpectedStateError,
    WorkflowError,
)
from workflow.manager import (
    BaseWorkflow,
    ClassWorkflow,
    ClassWorkflowOptions,
    Workflow,
    WorkflowOptions,
    create_class_workflow,
    create_workflow,
)
from workflow.transitions import MultiOriginTransition, Transition
from workflow.types import State, StateAccessor, TransitionRule

__all__ = [
    "BaseWorkflow",
    "ClassWorkflow",
    "ClassWorkflowOptions",
    "InvalidConfigurationError",
    "MultiOriginTransition",
    "State",
    "StateAccessor",
    "Transition",
    "TransitionDefinition",
    "TransitionNotFoundError",
    "TransitionRejectedError",
    "TransitionRule",
    "UnexpectedStateError",
    "Workflow",
    "WorkflowDefinition",
    "WorkflowError",
    "WorkflowOptions",
    "build_workflow",
    "create_class_workflow",
    "create_workflow",
    "load_workflow",
    "load_workflow_definition",
    "parse_workflow_definition",
]

"""
Exports públicos do módulo workflow/definitions.

Definições declarativas (YAML) de workflows.
"""

from workflow.definitions.loader import (
    build_workflow,
    load_workflow,
    load_workflow_definition,
    parse_workflow_definition,
)
from workflow.definitions.models import TransitionDefinition, WorkflowDefinition

__all__ = [
    "TransitionDefinition",
    "WorkflowDefinition",
    "build_workflow",
    "load_workflow",
    "load_workflow_definition",
    "parse_workflow_definition",
]

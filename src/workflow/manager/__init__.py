"""
Exports públicos do módulo workflow/manager.

Motores (Workflow, ClassWorkflow), opções e factories.
"""

from workflow.manager.engine import BaseWorkflow, ClassWorkflow, Workflow
from workflow.manager.factory import create_class_workflow, create_workflow
from workflow.manager.options import ClassWorkflowOptions, WorkflowOptions

__all__ = [
    "BaseWorkflow",
    "ClassWorkflow",
    "ClassWorkflowOptions",
    "Workflow",
    "WorkflowOptions",
    "create_class_workflow",
    "create_workflow",
]

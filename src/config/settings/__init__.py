"""Settings do projeto, lidas de variáveis de ambiente."""

from __future__ import annotations

from config.settings.workflow import WorkflowSettings, get_workflow_settings

__all__ = [
    "WorkflowSettings",
    "get_workflow_settings",
]

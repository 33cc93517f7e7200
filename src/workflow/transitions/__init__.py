"""
Exports públicos do módulo workflow/transitions.

Regras de transição de origem única e múltipla.
"""

from workflow.transitions.rules import MultiOriginTransition, Transition

__all__ = [
    "MultiOriginTransition",
    "Transition",
]

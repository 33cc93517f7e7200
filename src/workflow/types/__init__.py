"""
Exports públicos do módulo workflow/types.

Tipos base: State, TransitionRule e StateAccessor.
"""

from workflow.types.state import State, StateAccessor, TransitionRule

__all__ = [
    "State",
    "StateAccessor",
    "TransitionRule",
]

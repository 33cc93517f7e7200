"""Schema (pydantic) de definições declarativas de workflow."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

# Strict: booleans do YAML (yes/true) não viram 1
StateValue = StrictStr | StrictInt


class TransitionDefinition(BaseModel):
    """Uma transição declarada: `from` (um ou vários estados) → `to`."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    origins: StateValue | list[StateValue] = Field(alias="from")
    destination: StateValue = Field(alias="to")

    @field_validator("origins")
    @classmethod
    def _origins_not_empty(
        cls, value: StateValue | list[StateValue]
    ) -> StateValue | list[StateValue]:
        if isinstance(value, list) and not value:
            raise ValueError("from must list at least one state")
        return value

    @property
    def is_multi_origin(self) -> bool:
        """True quando `from` foi declarado como lista."""
        return isinstance(self.origins, list)


class WorkflowDefinition(BaseModel):
    """Workflow declarado: estados conhecidos + transições nomeadas."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = "workflow"
    detect_unexpected_state: bool = False
    states: list[StateValue] = Field(default_factory=list)
    transitions: dict[str, TransitionDefinition] = Field(default_factory=dict)

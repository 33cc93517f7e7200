"""Loader de definições de workflow em YAML.

Formato:

    name: post
    detect_unexpected_state: true
    states: [draft, published, aborted, completed, archived]
    transitions:
      publish: {from: draft, to: published}
      archive: {from: [aborted, completed], to: archived}

Uma transição com `from` escalar vira Transition; com lista, vira
MultiOriginTransition. As transições são registradas na ordem do arquivo.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from config.logging import get_logger
from workflow.definitions.models import TransitionDefinition, WorkflowDefinition
from workflow.errors import InvalidConfigurationError
from workflow.manager.engine import Workflow
from workflow.manager.options import WorkflowOptions
from workflow.transitions.rules import MultiOriginTransition, Transition
from workflow.types.state import TransitionRule

logger = get_logger(__name__)


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader que rejeita chaves duplicadas em qualquer mapping.

    O PyYAML mantém a última ocorrência; no registro vale a primeira.
    """

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict:
        self.flatten_mapping(node)
        seen: set[Any] = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            try:
                duplicate = key in seen
            except TypeError:
                # Chave não-hashable: o SafeLoader reporta o erro
                continue
            if duplicate:
                raise InvalidConfigurationError(
                    f"Duplicate key '{key}' in workflow definition "
                    f"(line {key_node.start_mark.line + 1})"
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def parse_workflow_definition(data: Any) -> WorkflowDefinition:
    """Valida um dict (já carregado) contra o schema.

    Raises:
        InvalidConfigurationError: Se o conteúdo não respeita o schema
    """
    if not isinstance(data, dict):
        raise InvalidConfigurationError("Workflow definition must be a mapping.")

    try:
        return WorkflowDefinition.model_validate(data)
    except ValidationError as exc:
        raise InvalidConfigurationError(
            f"Invalid workflow definition: {exc.error_count()} error(s)"
        ) from exc


def load_workflow_definition(path: str | Path) -> WorkflowDefinition:
    """Carrega e valida uma definição de workflow de um arquivo YAML.

    Args:
        path: Caminho do arquivo YAML

    Returns:
        WorkflowDefinition validada

    Raises:
        FileNotFoundError: Se o arquivo não existe
        InvalidConfigurationError: Se o YAML é malformado ou inválido
    """
    yaml_path = Path(path)
    if not yaml_path.is_file():
        raise FileNotFoundError(f"Definição de workflow não encontrada: {yaml_path}")

    with yaml_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.load(f, Loader=_UniqueKeyLoader)  # noqa: S506
        except yaml.YAMLError as exc:
            raise InvalidConfigurationError(
                f"Malformed workflow definition: {yaml_path.name}"
            ) from exc

    definition = parse_workflow_definition(data)
    logger.debug(
        "Workflow definition loaded",
        extra={
            "workflow": definition.name,
            "transitions": len(definition.transitions),
        },
    )
    return definition


def _build_rule(definition: TransitionDefinition) -> TransitionRule:
    if definition.is_multi_origin:
        return MultiOriginTransition(definition.origins, definition.destination)
    return Transition(definition.origins, definition.destination)


def build_workflow(definition: WorkflowDefinition) -> Workflow:
    """Cria um Workflow (token) a partir de uma definição validada."""
    workflow = Workflow(
        WorkflowOptions(
            detect_unexpected_state=definition.detect_unexpected_state,
            known_states=definition.states,
        )
    )
    for name, transition in definition.transitions.items():
        workflow.add_transition(name, _build_rule(transition))
    return workflow


def load_workflow(path: str | Path) -> Workflow:
    """Atalho: carrega o YAML e monta o Workflow."""
    return build_workflow(load_workflow_definition(path))

"""Flow loader — builds validator trees from declarative JSON definitions.

A flow file names one validation flow (e.g. "user") and describes its tree:

    {"flow": "user",
     "root": {"kind": "sequence", "children": [
         {"rule": "required", "params": {"field": "email"}},
         {"kind": "composite", "children": [...]}]}}

Group nodes become Sequence/Composite combinators, rule nodes are looked up
in the RULES registry.
"""

import json
import re
from pathlib import Path
from typing import Any, Literal, Optional, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError as SchemaError

from validflow.config import get_settings
from validflow.validators.base import BaseValidator
from validflow.validators.composite import Composite
from validflow.validators.errors import UnknownRuleError, ValidatorConfigurationError
from validflow.validators.rules import RULES
from validflow.validators.sequence import Sequence

logger = structlog.get_logger()

FLOWS_DIR = Path(__file__).parent


class RuleNode(BaseModel):
    """Leaf node: one registered rule and its constructor params."""

    model_config = ConfigDict(extra="forbid")

    rule: str
    params: dict[str, Any] = Field(default_factory=dict)


class GroupNode(BaseModel):
    """Combinator node owning an ordered list of children."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["sequence", "composite"]
    name: Optional[str] = None
    children: list["TreeNode"] = Field(default_factory=list)


TreeNode = Union[GroupNode, RuleNode]
GroupNode.model_rebuild()


class FlowDefinition(BaseModel):
    """A named validation flow, as stored in a JSON file."""

    model_config = ConfigDict(extra="forbid")

    flow: str
    description: str = ""
    root: TreeNode


_GROUPS = {"sequence": Sequence, "composite": Composite}


def build_tree(node: Union[TreeNode, dict]) -> BaseValidator:
    """Turn a node definition into a validator.

    Raises:
        UnknownRuleError: a rule node names an unregistered rule
        ValidatorConfigurationError: the node is malformed or its params don't fit the rule
    """
    if isinstance(node, dict):
        try:
            node = FlowDefinition.model_validate({"flow": "_", "root": node}).root
        except SchemaError as e:
            raise ValidatorConfigurationError(f"Invalid tree node: {e}") from e

    if isinstance(node, GroupNode):
        group = _GROUPS[node.kind]
        children = [build_tree(child) for child in node.children]
        return group(*children, name=node.name or group.__name__)

    rule_cls = RULES.get(node.rule)
    if rule_cls is None:
        raise UnknownRuleError(
            f"Unknown rule '{node.rule}'. Available: {', '.join(sorted(RULES))}"
        )
    try:
        return rule_cls(**node.params)
    except (TypeError, ValueError, re.error) as e:
        raise ValidatorConfigurationError(f"Bad params for rule '{node.rule}': {e}") from e


def _flow_files(directory: Optional[Path]) -> list[Path]:
    dirs = [FLOWS_DIR]
    extra = directory if directory is not None else get_settings().FLOWS_DIR
    if extra:
        dirs.append(Path(extra))
    files = []
    for d in dirs:
        files.extend(sorted(d.glob("*.json")))
    return files


def load_flows(directory: Optional[Union[str, Path]] = None) -> dict[str, BaseValidator]:
    """Load the bundled flow definitions plus any in ``directory``.

    ``directory`` defaults to the FLOWS_DIR setting. A later file with the
    same flow name replaces an earlier one. Unreadable or malformed files
    are logged and skipped. Unknown keys make a file malformed.
    """
    flows: dict[str, BaseValidator] = {}

    for json_file in _flow_files(Path(directory) if directory else None):
        try:
            data = json.loads(json_file.read_text(encoding="utf-8"))
            definition = FlowDefinition.model_validate(data)
            flows[definition.flow] = build_tree(definition.root)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, SchemaError, ValidatorConfigurationError) as e:
            logger.warning("flow_file_invalid", path=str(json_file), error=str(e))
            continue

    return flows

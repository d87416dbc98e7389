"""
Node-type classification for ESTree trees.

Groups node types by the capability that decides how snippets are
extracted and spliced for them. The map does not have to be complete:
types missing from it are still wrapped and walked, but support no
replace/prefix/suffix/wrap operations.
"""

import re
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from jsgraft.exceptions import ConfigError


class Capability(str, Enum):
    EXPRESSION = "Expression"
    STATEMENT = "Statement"
    BLOCK_CONTAINER = "BlockContainer"
    NONE = "None"


SYNTAX_MAP: Dict[str, List[str]] = {
    # Nodes that contain lists of statements
    "BlockContainer": [
        "Program",
        "BlockStatement",
    ],
    "Statement": [
        "EmptyStatement",
        "ExpressionStatement",
        "IfStatement",
        "LabeledStatement",
        "BreakStatement",
        "ContinueStatement",
        "WithStatement",
        "SwitchStatement",
        "ReturnStatement",
        "ThrowStatement",
        "TryStatement",
        "WhileStatement",
        "DoWhileStatement",
        "ForStatement",
        "ForInStatement",
        "ForOfStatement",
        "DebuggerStatement",
        "FunctionDeclaration",
        "ClassDeclaration",
        "VariableDeclaration",
        "VariableDeclarator",
    ],
    "Expression": [
        "ThisExpression",
        "ArrayExpression",
        "ObjectExpression",
        "FunctionExpression",
        "ArrowFunctionExpression",
        "ClassExpression",
        "SequenceExpression",
        "UnaryExpression",
        "BinaryExpression",
        "AssignmentExpression",
        "UpdateExpression",
        "LogicalExpression",
        "ConditionalExpression",
        "NewExpression",
        "CallExpression",
        "MemberExpression",
        "YieldExpression",
        "TemplateLiteral",
        "TaggedTemplateExpression",
        "Literal",
        "Identifier",
    ],
}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def snake_case(type_name: str) -> str:
    """Convert an ESTree type name such as ``ForInStatement`` to ``for_in_statement``."""
    return _CAMEL_BOUNDARY.sub("_", type_name).lower()


def validate_syntax_map(syntax_map: Mapping[str, Iterable[str]]) -> None:
    """
    Validate a classification map.

    Args:
        syntax_map: Capability name -> node type names

    Raises:
        ConfigError: If a capability name is unknown or a type is listed twice.
    """
    valid = {c.value for c in Capability if c is not Capability.NONE}
    seen: Dict[str, str] = {}

    for capability, node_types in syntax_map.items():
        if capability not in valid:
            raise ConfigError(
                f"Unknown capability '{capability}'. Valid capabilities: {', '.join(sorted(valid))}"
            )
        for node_type in node_types:
            if not isinstance(node_type, str) or not node_type:
                raise ConfigError(f"Capability '{capability}' lists an invalid node type: {node_type!r}")
            if node_type in seen:
                raise ConfigError(
                    f"Node type '{node_type}' is listed under both '{seen[node_type]}' and '{capability}'"
                )
            seen[node_type] = capability


class SyntaxTable:
    """
    Immutable lookup from node type name to capability.

    Built once from a classification map and handed to tree builders,
    classification is a pure function of the type name.
    """

    def __init__(self, syntax_map: Mapping[str, Iterable[str]] = SYNTAX_MAP):
        validate_syntax_map(syntax_map)
        lookup = {}
        for capability, node_types in syntax_map.items():
            for node_type in node_types:
                lookup[node_type] = Capability(capability)
        self._lookup = MappingProxyType(lookup)

    def classify(self, type_name: str) -> Capability:
        """Return the capability of a node type, Capability.NONE when unknown."""
        return self._lookup.get(type_name, Capability.NONE)

    def known_types(self) -> Tuple[str, ...]:
        return tuple(self._lookup.keys())

    def __contains__(self, type_name: str) -> bool:
        return type_name in self._lookup

    def __len__(self) -> int:
        return len(self._lookup)


DEFAULT_SYNTAX_TABLE = SyntaxTable()

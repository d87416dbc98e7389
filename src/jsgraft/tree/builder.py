"""
TreeBuilder: Turn raw ESTree trees into owned trees of wrapped nodes.
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from jsgraft.exceptions import GraftError
from jsgraft.logging_config import logger
from jsgraft.syntax.config import DEFAULT_SYNTAX_TABLE, SyntaxTable
from jsgraft.syntax.parser import JavaScriptParser, to_raw_tree
from .node import WrappedNode, install_type_predicates, node_class_for


def is_structured_node(value: Any) -> bool:
    """True for raw ESTree nodes; lists, scalars and metadata mappings are not."""
    return isinstance(value, Mapping) and "type" in value


class TreeBuilder:
    """
    Wrap raw trees, parsing source text first when needed.

    The builder is shared by every node it produces so later snippet
    re-parsing goes through the same parser and classification table.
    """

    def __init__(
        self,
        parser: Optional[JavaScriptParser] = None,
        table: Optional[SyntaxTable] = None,
    ):
        """
        Initialize builder.

        Args:
            parser: Parser for source text (defaults to JavaScriptParser())
            table: Node classification (defaults to DEFAULT_SYNTAX_TABLE)
        """
        self.parser = parser or JavaScriptParser()
        self.table = table or DEFAULT_SYNTAX_TABLE
        install_type_predicates(self.table)

    def build(self, code_or_tree: Union[str, Any]) -> WrappedNode:
        """
        Wrap source text or an already-parsed tree.

        Args:
            code_or_tree: JavaScript source, an ESTree dict, or an esprima node

        Returns:
            The wrapped root

        Raises:
            GraftError: If the input is neither source text nor an ESTree node
        """
        if isinstance(code_or_tree, str):
            raw = self.parser.parse(code_or_tree)
        else:
            raw = to_raw_tree(code_or_tree)

        if not is_structured_node(raw):
            raise GraftError(f"Expected source text or an ESTree node, got {type(raw).__name__}")

        root = self.wrap(raw)
        logger.debug(f"Built wrapped tree rooted at {root.type}")
        return root

    def wrap(
        self,
        raw: Any,
        parent: Optional[WrappedNode] = None,
        parent_key: Optional[str] = None,
        index: Optional[int] = None,
    ) -> Any:
        """
        Recursively wrap a raw value.

        Lists are wrapped element-wise with each element's position recorded.
        Values that are not ESTree nodes are returned unchanged.
        """
        if isinstance(raw, (list, tuple)):
            return [self.wrap(item, parent, parent_key, i) for i, item in enumerate(raw)]
        if not is_structured_node(raw):
            return raw

        # The shell must exist before its children so they can point at it
        node = node_class_for(raw["type"], self.table)(self, parent, parent_key, index)
        node.data = {key: self.wrap(value, node, key) for key, value in raw.items()}
        return node


def graft(code_or_tree: Union[str, Any], builder: Optional[TreeBuilder] = None) -> WrappedNode:
    """
    Wrap JavaScript source or a raw ESTree tree for editing.

    Example:
        >>> graft("1 + 1").deparse()
        '1 + 1'

    Args:
        code_or_tree: Source text, an ESTree dict, or an esprima node
        builder: Optional builder (a default one is created otherwise)

    Returns:
        The wrapped Program node
    """
    return (builder or TreeBuilder()).build(code_or_tree)

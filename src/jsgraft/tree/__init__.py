"""
Tree package: wrapped ESTree nodes and the splice operations on them.
"""

from .builder import TreeBuilder, graft, is_structured_node
from .node import (
    WrappedNode,
    ExpressionNode,
    StatementNode,
    BlockContainerNode,
    NODE_ACCESSORS,
    install_type_predicates,
    node_class_for,
)
from .extraction import extract_expression, extract_statement, extract_block
from .template import SnippetTemplate, compile_template, render_template
from .config import GRAFT_CONFIG

__all__ = [
    # Entry points
    "graft",
    "TreeBuilder",

    # Nodes
    "WrappedNode",
    "ExpressionNode",
    "StatementNode",
    "BlockContainerNode",
    "NODE_ACCESSORS",
    "install_type_predicates",
    "node_class_for",
    "is_structured_node",

    # Extraction
    "extract_expression",
    "extract_statement",
    "extract_block",

    # Templates
    "SnippetTemplate",
    "compile_template",
    "render_template",

    # Configuration
    "GRAFT_CONFIG",
]

"""
Snippet extraction: turn source text into the one node it represents.

Every splice operation re-parses caller-supplied text and needs a single
node of the kind it is replacing or inserting. Each capability has its own
way of getting there; these functions are kept free of splice logic so
they can be exercised on their own.
"""

from typing import TYPE_CHECKING, Optional

from jsgraft.exceptions import ExtractionArityError, UnsupportedParentError
from jsgraft.logging_config import logger
from .config import GRAFT_CONFIG
from .template import render_template

if TYPE_CHECKING:
    from .builder import TreeBuilder
    from .node import WrappedNode


def extract_statement(snippet: str, builder: "TreeBuilder") -> "WrappedNode":
    """
    Parse a snippet that must hold exactly one top-level statement.

    Args:
        snippet: JavaScript source
        builder: Builder used to parse and wrap the snippet

    Returns:
        The wrapped statement, whatever its concrete kind

    Raises:
        ExtractionArityError: If the snippet holds zero or several statements
    """
    body = builder.build(snippet).body
    if not body:
        raise ExtractionArityError(snippet, 0, "Expected a single statement and found nothing")
    if len(body) > 1:
        raise ExtractionArityError(
            snippet, len(body), f"Expected a single statement and got {len(body)}"
        )
    return body[0]


def extract_expression(snippet: str, builder: "TreeBuilder") -> "WrappedNode":
    """
    Parse a snippet that must be exactly one expression statement.

    Returns:
        The statement's wrapped expression

    Raises:
        ExtractionArityError: If the snippet is not a single expression statement
    """
    statement = extract_statement(snippet, builder)
    if not statement.is_expression_statement():
        raise ExtractionArityError(
            snippet, 1, f"Expected a single expression and got a {statement.type}"
        )
    return statement.expression


def extract_block(snippet: str, parent: Optional["WrappedNode"], builder: "TreeBuilder") -> "WrappedNode":
    """
    Parse a snippet as the body block of a function.

    A bare block does not parse on its own, so the snippet is placed inside
    a synthetic function declaration and that function's body is returned.
    A snippet that brings its own braces would end up as a block inside the
    body block; that extra level is unwrapped.

    Args:
        snippet: Statements of the block, with or without enclosing braces
        parent: Parent of the block being replaced
        builder: Builder used to parse and wrap the snippet

    Returns:
        The wrapped BlockStatement

    Raises:
        UnsupportedParentError: If parent is not a function declaration or expression
    """
    if parent is None or not (parent.is_function_declaration() or parent.is_function_expression()):
        raise UnsupportedParentError(parent.type if parent is not None else None)

    source = render_template(GRAFT_CONFIG["block_wrapper"], snippet, slot="code")
    declaration = builder.build(source).body[0]
    outer_block = declaration.data["body"]

    statements = outer_block.data.get("body")
    if isinstance(statements, list) and len(statements) == 1 and statements[0].is_block_statement():
        logger.debug("Unwrapping caller-supplied braces around block snippet")
        return statements[0]
    return outer_block

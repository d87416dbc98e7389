"""
JavaScript parser adapter.

Parses source text with esprima and hands back plain ESTree dictionaries,
the raw-tree shape the tree builder and escodegen work with.
"""

from typing import Any, Dict, Optional

import esprima
from esprima.error_handler import Error as ParserSyntaxError

from jsgraft.logging_config import logger

# Options forwarded to esprima.parseScript. Location data stays off so the
# raw tree only holds syntax.
PARSER_OPTIONS: Dict[str, Any] = {
    "tolerant": False,
}

__all__ = ["PARSER_OPTIONS", "ParserSyntaxError", "JavaScriptParser", "to_raw_tree"]


def to_raw_tree(tree: Any) -> Any:
    """
    Convert an esprima node object into a plain ESTree dict.

    Dicts and other values are returned as they are.
    """
    if hasattr(tree, "toDict"):
        return tree.toDict()
    return tree


class JavaScriptParser:
    """
    Parse JavaScript source into raw ESTree trees.

    Syntax errors raised by esprima propagate unchanged.
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        """
        Initialize parser with optional option overrides.

        Args:
            options: Optional overrides (merges with PARSER_OPTIONS)
        """
        self.options = {**PARSER_OPTIONS, **(options or {})}

    def parse(self, code: str) -> Dict[str, Any]:
        """
        Parse a script.

        Args:
            code: JavaScript source text

        Returns:
            The raw `Program` tree as a dict

        Raises:
            ParserSyntaxError: If the source is not valid JavaScript
        """
        logger.debug(f"Parsing {len(code)} characters of JavaScript")
        program = esprima.parseScript(code, dict(self.options))
        return to_raw_tree(program)

"""
Syntax package: node classification, the esprima parser adapter and the
escodegen printer adapter.
"""

from .config import Capability, SyntaxTable, SYNTAX_MAP, DEFAULT_SYNTAX_TABLE, validate_syntax_map
from .parser import JavaScriptParser, ParserSyntaxError, PARSER_OPTIONS
from .printer import escodegen_options, generate

__all__ = [
    "Capability",
    "SyntaxTable",
    "SYNTAX_MAP",
    "DEFAULT_SYNTAX_TABLE",
    "validate_syntax_map",
    "JavaScriptParser",
    "ParserSyntaxError",
    "PARSER_OPTIONS",
    "escodegen_options",
    "generate",
]

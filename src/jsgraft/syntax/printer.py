"""
Printer adapter.

Validates format options with the schema models and hands ESTree trees
to escodegen. Errors raised by escodegen propagate unchanged.
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional, Union

import escodegen

from jsgraft.exceptions import GenerationError
from jsgraft.schemas import GenerateOptions, coerce_generate_options

__all__ = ["escodegen_options", "generate"]


def escodegen_options(options: Optional[Union[GenerateOptions, Dict[str, Any]]]) -> Dict[str, Any]:
    """
    Validate printer options and convert them to escodegen's nested dict.

    Only the settings the caller gave are passed on; escodegen supplies
    its own defaults for the rest.
    """
    return coerce_generate_options(options).model_dump(exclude_unset=True)


def generate(tree: Any, options: Optional[Union[GenerateOptions, Dict[str, Any]]] = None) -> str:
    """
    Print an ESTree tree as JavaScript source.

    Args:
        tree: ESTree dict (any statement- or expression-level node)
        options: Format options, see GenerateOptions

    Returns:
        Generated source text

    Raises:
        GenerationError: If tree is not an ESTree node
    """
    if not isinstance(tree, Mapping) or "type" not in tree:
        raise GenerationError(type(tree).__name__, f"Expected an ESTree node, got {tree!r}")
    return escodegen.generate(tree, escodegen_options(options))

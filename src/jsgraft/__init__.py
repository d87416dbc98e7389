"""
jsgraft - Surgical JavaScript tree editing

Wraps esprima syntax trees so they can be walked, inspected and edited
with plain source snippets.
"""

__version__ = "0.1.0"

# Core exports
from jsgraft.tree import TreeBuilder, WrappedNode, graft
from jsgraft.schemas import GenerateOptions, FormatOptions, IndentOptions
from jsgraft.syntax import Capability, SyntaxTable, generate
from jsgraft.exceptions import (
    GraftError,
    ExtractionArityError,
    UnsupportedParentError,
    StructuralPreconditionError,
    MissingCapabilityError,
    TemplateError,
    GenerationError,
    ConfigError,
)

__all__ = [
    "__version__",
    "graft",
    "TreeBuilder",
    "WrappedNode",
    "GenerateOptions",
    "FormatOptions",
    "IndentOptions",
    "Capability",
    "SyntaxTable",
    "generate",
    "GraftError",
    "ExtractionArityError",
    "UnsupportedParentError",
    "StructuralPreconditionError",
    "MissingCapabilityError",
    "TemplateError",
    "GenerationError",
    "ConfigError",
]

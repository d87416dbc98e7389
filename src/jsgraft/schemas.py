from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Literal, Optional, Union


class IndentOptions(BaseModel):
    """
    Indentation settings for generated code.
    """
    style: str = "    "
    base: int = 0  # Number of indent units every line starts with


class FormatOptions(BaseModel):
    """
    Formatting settings forwarded to escodegen.

    `compact` overrides indentation, newlines and optional spaces with
    empty strings. With `semicolons` disabled the terminator of the last
    statement in a program or block is left out.
    """
    model_config = ConfigDict(extra="allow")  # Other escodegen format settings pass through

    indent: IndentOptions = Field(default_factory=IndentOptions)
    newline: str = "\n"
    space: str = " "
    quotes: Literal["single", "double", "auto"] = "single"
    compact: bool = False
    semicolons: bool = True
    parentheses: bool = True  # Keep `()` on argument-less `new` expressions


class GenerateOptions(BaseModel):
    """
    Top-level options accepted by `deparse` and `generate`.
    """
    model_config = ConfigDict(extra="allow")

    format: FormatOptions = Field(default_factory=FormatOptions)


def coerce_generate_options(
    options: Optional[Union[GenerateOptions, Dict[str, Any]]]
) -> GenerateOptions:
    """
    Normalise caller-supplied options into a GenerateOptions model.

    Args:
        options: None, a plain nested dict, or an existing model

    Returns:
        Validated GenerateOptions
    """
    if options is None:
        return GenerateOptions()
    if isinstance(options, GenerateOptions):
        return options
    return GenerateOptions.model_validate(options)

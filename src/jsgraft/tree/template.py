"""
Snippet templates for wrapping nodes.

A template holds one `${node}` placeholder that receives the printed text
of the node being wrapped, e.g. `f(${node})` or
`try { ${node} } catch (e) {}`.
"""

from functools import lru_cache
from string import Template
from typing import Callable, Optional, Union

from jsgraft.exceptions import TemplateError
from .config import GRAFT_CONFIG


class SnippetTemplate(Template):
    """
    A `string.Template` that only recognises the braced `${name}` form.

    Bare `$` characters are common in JavaScript identifiers and are left
    untouched; `$${` produces a literal `${`.
    """

    pattern = r"""
    \$(?:
      (?P<escaped>\$(?=\{)) |
      (?P<named>(?!)) |
      {(?P<braced>[_a-z][_a-z0-9]*)} |
      (?P<invalid>(?!))
    )
    """


TemplateLike = Union[str, Template, Callable[..., str]]


@lru_cache(maxsize=GRAFT_CONFIG["template_cache_size"])
def compile_template(source: str) -> SnippetTemplate:
    """Compile a template source string, cached by source text."""
    return SnippetTemplate(source)


def render_template(template: TemplateLike, text: str, slot: Optional[str] = None) -> str:
    """
    Substitute text into a template's slot.

    Args:
        template: Template source, compiled Template, or a callable that
            accepts the slot as a keyword argument
        text: Text for the slot
        slot: Slot name (defaults to GRAFT_CONFIG["template_slot"])

    Returns:
        Rendered snippet

    Raises:
        TemplateError: If the template names other placeholders or is of
            an unsupported type
    """
    slot = slot or GRAFT_CONFIG["template_slot"]
    if isinstance(template, str):
        template = compile_template(template)

    if isinstance(template, Template):
        try:
            return template.substitute({slot: text})
        except KeyError as e:
            raise TemplateError(f"Template references unknown placeholder {e}; only '{slot}' is provided") from e
        except ValueError as e:
            raise TemplateError(f"Invalid template: {e}") from e

    if callable(template):
        return template(**{slot: text})

    raise TemplateError(f"Unsupported template type: {type(template).__name__}")

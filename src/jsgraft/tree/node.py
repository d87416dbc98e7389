"""
Wrapped ESTree nodes.

WrappedNode carries the traversal, printing and splice API shared by every
node. The capability classes add snippet extraction and statement
insertion for expression, statement and block-container node types.
Accessor mixins for a few node types are layered on whichever capability
class the builder's table picks.
"""

from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional, TYPE_CHECKING

from jsgraft.exceptions import MissingCapabilityError, StructuralPreconditionError
from jsgraft.logging_config import logger
from jsgraft.syntax.config import Capability, DEFAULT_SYNTAX_TABLE, SyntaxTable, snake_case
from jsgraft.syntax.printer import generate
from .config import GRAFT_CONFIG
from .extraction import extract_block, extract_expression, extract_statement
from .template import TemplateLike, render_template

if TYPE_CHECKING:
    from .builder import TreeBuilder


Visitor = Callable[["WrappedNode"], Any]


def unwrap_value(value: Any) -> Any:
    """Project a wrapped value back to the plain ESTree shape."""
    if isinstance(value, list):
        return [unwrap_value(item) for item in value]
    if isinstance(value, WrappedNode):
        return value.unwrap()
    return value


def _walk_value(value: Any, visitor: Visitor) -> None:
    if isinstance(value, list):
        for item in value:
            _walk_value(item, visitor)
    elif isinstance(value, WrappedNode):
        visitor(value)
        # The visitor may have replaced this node; descend into whatever
        # occupies the slot now.
        node = value.current()
        for key in list(node.data):
            _walk_value(node.data.get(key), visitor)


def _reindex(sequence: List[Any]) -> None:
    for position, item in enumerate(sequence):
        if isinstance(item, WrappedNode):
            item.parent_index = position


def _in_statement_list(node: "WrappedNode") -> bool:
    return node.parent_key in GRAFT_CONFIG["statement_list_fields"]


class WrappedNode:
    """
    A node of the owned tree.

    Attributes:
        data: Field name -> wrapped child, list of wrapped children, or leaf value
        parent: Owning node, None for the root
        parent_key: Field of the parent's data holding this node
        parent_index: Position in the parent's list, None when not sequence-held
        builder: TreeBuilder used to re-parse snippets for this tree
    """

    capability = Capability.NONE

    def __init__(
        self,
        builder: "TreeBuilder",
        parent: Optional["WrappedNode"] = None,
        parent_key: Optional[str] = None,
        parent_index: Optional[int] = None,
    ):
        self.builder = builder
        self.parent = parent
        self.parent_key = parent_key
        self.parent_index = parent_index
        self.data: Dict[str, Any] = {}

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} type={self.type!r} "
            f"key={self.parent_key!r} index={self.parent_index!r}>"
        )

    @property
    def type(self) -> Optional[str]:
        return self.data.get("type")

    @property
    def is_sequence_held(self) -> bool:
        return self.parent_index is not None

    def is_expression(self) -> bool:
        return self.capability is Capability.EXPRESSION

    def is_statement(self) -> bool:
        return self.capability is Capability.STATEMENT

    def is_block_container(self) -> bool:
        return self.capability is Capability.BLOCK_CONTAINER

    def current(self) -> "WrappedNode":
        """
        Return the node that now occupies this node's slot.

        This is the node itself unless the slot has been overwritten by a
        splice. The root is always returned as-is.
        """
        if self.parent is None:
            return self
        slot = self.parent.data[self.parent_key]
        if self.parent_index is None:
            return slot
        return slot[self.parent_index]

    # ------------------------------------------------------------------
    # Traversal and printing
    # ------------------------------------------------------------------

    def unwrap(self) -> Dict[str, Any]:
        """Return the plain ESTree dict for this subtree."""
        return {key: unwrap_value(value) for key, value in self.data.items()}

    def walk(self, visitor: Visitor) -> "WrappedNode":
        """
        Visit this subtree depth-first, pre-order.

        Lists are traversed but never passed to the visitor. The visitor
        may splice the node it receives; the walk continues into the
        node that replaced it.

        Returns:
            This node, for chaining
        """
        _walk_value(self, visitor)
        return self

    def map(self, visitor: Callable[["WrappedNode"], Optional[str]]) -> "WrappedNode":
        """
        Walk the tree, replacing nodes with the snippets visitor(node) returns.

        Falsy results leave the node alone so the tree is not rebuilt
        needlessly.
        """
        def replace_with_result(node):
            snippet = visitor(node)
            if snippet:
                node.replace(snippet)

        return self.walk(replace_with_result)

    def reduce(self, initial: Any, visitor: Callable[[Any, "WrappedNode"], Any]) -> Any:
        """
        Fold the tree down to a single value.

        Args:
            initial: Starting accumulator
            visitor: Called as visitor(accumulator, node), returns the new accumulator

        Returns:
            The final accumulator
        """
        accumulator = initial

        def accumulate(node):
            nonlocal accumulator
            accumulator = visitor(accumulator, node)

        self.walk(accumulate)
        return accumulator

    def deparse(self, options: Optional[Any] = None) -> str:
        """
        Print this subtree as JavaScript.

        Args:
            options: Printer options (dict or GenerateOptions). Defaults to
                GRAFT_CONFIG["default_deparse_options"].
        """
        if options is None:
            options = GRAFT_CONFIG["default_deparse_options"]
        return generate(self.unwrap(), options)

    # ------------------------------------------------------------------
    # Splicing
    # ------------------------------------------------------------------

    def extract_corresponding(self, snippet: str) -> "WrappedNode":
        """Parse snippet into a node that can take this node's place."""
        raise MissingCapabilityError(self.type, "snippet extraction")

    def replace(self, snippet: str) -> "WrappedNode":
        """
        Replace this node with the node parsed from snippet.

        Returns:
            The node now occupying this node's slot

        Raises:
            StructuralPreconditionError: If this node is the root
        """
        if self.parent is None:
            raise StructuralPreconditionError("Cannot replace the root node")

        new_node = self.extract_corresponding(snippet)

        new_node.parent = self.parent
        new_node.parent_key = self.parent_key
        new_node.parent_index = self.parent_index
        if self.parent_index is None:
            self.parent.data[self.parent_key] = new_node
        else:
            self.parent.data[self.parent_key][self.parent_index] = new_node

        logger.debug(f"Replaced {self.type} at {self.parent.type}.{self.parent_key} with {new_node.type}")
        return new_node

    def affix(self, snippet: str, before: bool = False) -> "WrappedNode":
        """Insert a statement parsed from snippet next to this node."""
        raise MissingCapabilityError(self.type, "statement insertion")

    def prefix(self, snippet: str) -> "WrappedNode":
        """Insert a statement before this node."""
        return self.affix(snippet, before=True)

    def suffix(self, snippet: str) -> "WrappedNode":
        """Insert a statement after this node."""
        return self.affix(snippet, before=False)

    def wrap(self, template: TemplateLike) -> "WrappedNode":
        """
        Replace this node with a template rendered around its own source.

        Example:
            node.wrap("f(${node})")

        Every `${name}` in a template string is a placeholder, including
        JavaScript template literal substitutions. Write `$${` for a
        literal `${`, e.g. "log(`$${x}`, ${node})", or pass a callable.

        Args:
            template: Template source, compiled template, or callable
        """
        return self.replace(render_template(template, self.deparse()))


class ExpressionNode(WrappedNode):
    capability = Capability.EXPRESSION

    def extract_corresponding(self, snippet: str) -> WrappedNode:
        return extract_expression(snippet, self.builder)

    def affix(self, snippet: str, before: bool = False) -> WrappedNode:
        """
        Insert a statement next to the statement enclosing this expression.

        Only statements held in a statement list qualify, so an expression
        inside `var x = f()` inserts next to the declaration, not the
        declarator.

        Raises:
            StructuralPreconditionError: If no statement encloses this expression
        """
        ancestor = self.parent
        while ancestor is not None and not (ancestor.is_statement() and _in_statement_list(ancestor)):
            ancestor = ancestor.parent
        if ancestor is None:
            raise StructuralPreconditionError(f"Reached root while affixing {self.type}")
        return ancestor.affix(snippet, before)


class StatementNode(WrappedNode):
    capability = Capability.STATEMENT

    def extract_corresponding(self, snippet: str) -> WrappedNode:
        return extract_statement(snippet, self.builder)

    def affix(self, snippet: str, before: bool = False) -> WrappedNode:
        """
        Insert a statement parsed from snippet before or after this one.

        Every sibling that moves gets its recorded position updated so later
        edits on it still address the right slot.

        Args:
            snippet: Source of exactly one statement
            before: Insert before this node instead of after it

        Returns:
            The inserted node

        Raises:
            StructuralPreconditionError: If this node is not held in a statement list
        """
        if self.parent_index is None or not _in_statement_list(self):
            raise StructuralPreconditionError(
                f"Cannot insert relative to a {self.type} that is not part of a statement list"
            )

        new_node = self.extract_corresponding(snippet)
        position = self.parent_index if before else self.parent_index + 1
        siblings = self.parent.data[self.parent_key]
        spliced = siblings[:position] + [new_node] + siblings[position:]

        new_node.parent = self.parent
        new_node.parent_key = self.parent_key
        _reindex(spliced)
        self.parent.data[self.parent_key] = spliced

        logger.debug(
            f"Inserted {new_node.type} at {self.parent.type}.{self.parent_key}[{position}]"
        )
        return new_node


class BlockContainerNode(WrappedNode):
    capability = Capability.BLOCK_CONTAINER

    def extract_corresponding(self, snippet: str) -> WrappedNode:
        return extract_block(snippet, self.parent, self.builder)

    def wrap(self, template: TemplateLike) -> WrappedNode:
        """
        Replace this block with a template rendered around its body.

        The block prints with its own braces while block templates bring
        theirs, so exactly the outermost pair is stripped before rendering.

        Example:
            body.wrap("try { ${node} } catch (e) {}")

        As with WrappedNode.wrap, a JavaScript `${` in the template must be
        written `$${`.
        """
        text = self.deparse()
        if text.startswith("{") and text.endswith("}"):
            text = text[1:-1]
        return self.replace(render_template(template, text))


# ----------------------------------------------------------------------
# Type accessors
# ----------------------------------------------------------------------
# Accessors depend only on the node type; capability comes from the
# builder's table. node_class_for combines the two.

class StatementListAccessors:
    @property
    def body(self) -> List[WrappedNode]:
        return self.data["body"]


class ExpressionStatementAccessors:
    @property
    def expression(self) -> WrappedNode:
        return self.data["expression"]


class CallExpressionAccessors:
    @property
    def callee_name(self) -> Optional[str]:
        """Name of the callee when it is a plain identifier, else None."""
        callee = self.data.get("callee")
        if isinstance(callee, WrappedNode) and callee.is_identifier():
            return callee.name
        return None

    @property
    def arguments(self) -> List[WrappedNode]:
        return self.data["arguments"]


class IdentifierAccessors:
    @property
    def name(self) -> str:
        return self.data["name"]


class LiteralAccessors:
    @property
    def value(self) -> Any:
        return self.data.get("value")

    @value.setter
    def value(self, new_value: Any) -> None:
        self.data["value"] = new_value
        # Source text and regex metadata no longer describe the value
        self.data.pop("raw", None)
        self.data.pop("regex", None)

    @property
    def is_regex(self) -> bool:
        return self.data.get("regex") is not None


NODE_ACCESSORS = {
    "Program": StatementListAccessors,
    "BlockStatement": StatementListAccessors,
    "ExpressionStatement": ExpressionStatementAccessors,
    "CallExpression": CallExpressionAccessors,
    "Identifier": IdentifierAccessors,
    "Literal": LiteralAccessors,
}

CAPABILITY_CLASSES = {
    Capability.EXPRESSION: ExpressionNode,
    Capability.STATEMENT: StatementNode,
    Capability.BLOCK_CONTAINER: BlockContainerNode,
    Capability.NONE: WrappedNode,
}


@lru_cache(maxsize=None)
def _accessor_class(type_name: str, accessors: type, base: type) -> type:
    return type(f"{type_name}Node", (accessors, base), {})


def node_class_for(type_name: str, table: SyntaxTable = DEFAULT_SYNTAX_TABLE) -> type:
    """
    Pick the class a node of the given type is wrapped in.

    The table decides the capability class. Types with accessors get a
    subclass of it that mixes them in, e.g. `LiteralNode`.
    """
    base = CAPABILITY_CLASSES[table.classify(type_name)]
    accessors = NODE_ACCESSORS.get(type_name)
    if accessors is None:
        return base
    return _accessor_class(type_name, accessors, base)


def _type_predicate(type_name: str):
    def predicate(self) -> bool:
        return self.type == type_name

    predicate.__name__ = f"is_{snake_case(type_name)}"
    predicate.__doc__ = f"Return True if this is a {type_name} node."
    return predicate


def install_type_predicates(table: SyntaxTable) -> None:
    """Add an is_<type>() predicate to WrappedNode for each type the table knows."""
    for type_name in table.known_types():
        attribute = f"is_{snake_case(type_name)}"
        if not hasattr(WrappedNode, attribute):
            setattr(WrappedNode, attribute, _type_predicate(type_name))


install_type_predicates(DEFAULT_SYNTAX_TABLE)

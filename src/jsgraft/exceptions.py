# Custom exceptions for jsgraft

class GraftError(Exception):
    """Base exception for all application-specific errors."""
    pass


class ConfigError(GraftError):
    """Raised for configuration-related problems."""
    pass


class ExtractionArityError(GraftError):
    """Raised when a snippet does not parse to exactly one usable statement."""
    def __init__(self, snippet: str, count: int, message: str):
        self.snippet = snippet
        self.count = count
        super().__init__(message)


class UnsupportedParentError(GraftError):
    """Raised when a block is extracted under a parent that is not a function."""
    def __init__(self, parent_type):
        self.parent_type = parent_type
        super().__init__(
            f"Cannot extract a block container under a {parent_type or 'missing'} parent; "
            "only function declarations and function expressions are supported"
        )


class StructuralPreconditionError(GraftError):
    """Raised when a node's position in the tree does not allow the requested edit."""
    pass


class MissingCapabilityError(GraftError):
    """Raised when a node type has no capability for the requested operation."""
    def __init__(self, node_type: str, operation: str):
        self.node_type = node_type
        self.operation = operation
        super().__init__(f"'{node_type}' nodes do not support {operation}")


class TemplateError(GraftError):
    """Raised when a snippet template cannot be rendered."""
    pass


class GenerationError(GraftError):
    """Raised when a value handed to the printer is not an ESTree node."""
    def __init__(self, node_type, message: str = ""):
        self.node_type = node_type
        super().__init__(message or f"Cannot print node type '{node_type}'")

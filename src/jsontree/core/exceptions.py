"""
Exception hierarchy for jsontree.

Core functions raise these; the session boundary catches them and turns
them into user-facing messages.
"""

from typing import Optional


class JsonTreeError(Exception):
    """
    Base class for all jsontree errors.

    Attributes:
        message: Human-readable error message.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ParseError(JsonTreeError):
    """
    Raised when input text is not valid JSON.

    Attributes:
        message: The underlying parser's diagnostic.
        line: 1-based line of the failure, when known.
        column: 1-based column of the failure, when known.
        position: 0-based character offset of the failure, when known.
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        position: Optional[int] = None,
    ):
        self.line = line
        self.column = column
        self.position = position
        super().__init__(message)

    def __str__(self) -> str:
        if self.line is not None and self.column is not None:
            return f"{self.message} (line {self.line}, column {self.column})"
        return self.message


class QueryError(JsonTreeError):
    """
    Raised when a path query cannot be parsed or evaluated.

    Attributes:
        query: The offending query string.
        message: The underlying parser's diagnostic.
    """

    def __init__(self, query: str, message: str):
        self.query = query
        super().__init__(message)


class NodeNotFoundError(JsonTreeError):
    """Raised when a node ID does not exist in the current graph."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node not found: {node_id}")


class GraphNotGeneratedError(JsonTreeError):
    """Raised when an action needs a graph but none has been generated."""

    def __init__(self, action: str = "search"):
        self.action = action
        super().__init__(f"Cannot {action}: generate a tree first")

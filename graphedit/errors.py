"""Errors raised by graph operations."""


class GraphError(Exception):
    """Base class for recoverable graph errors."""


class VertexAlreadyExists(GraphError):
    pass


class VertexNotFound(GraphError):
    pass


class EdgeAlreadyExists(GraphError):
    pass


class EdgeNotFound(GraphError):
    pass


class InvalidInput(GraphError):
    """A value was rejected before it could reach the graph."""


class InvalidVertex(InvalidInput):
    pass


class InvalidFile(InvalidInput):
    """A graph file or name list has the wrong shape."""


class FileUnavailable(GraphError):
    """A file could not be opened."""


class NoGraph(GraphError):
    """An edit was requested before any graph exists."""

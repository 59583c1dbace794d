class CellError(Exception):
    """Base class for all errors raised while building or rendering cells."""


class TypeMismatch(CellError, TypeError):
    """A cell field was given a value of the wrong kind."""


class OutOfRange(CellError, ValueError):
    """A numeric field is negative, or content is wider than its cell."""


class AbstractInstantiation(CellError, TypeError):
    """An abstract cell type was constructed directly."""

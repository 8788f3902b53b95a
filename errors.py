class HullError(Exception):
    """Base class for errors raised while computing or reading a hull."""


class InvalidInputError(HullError, ValueError):
    """The point collection cannot have a hull (it is empty)."""


class MalformedSourceError(HullError):
    """A point source holds something other than pairs of numbers."""


class SourceIOError(HullError):
    """A point source could not be opened or read."""

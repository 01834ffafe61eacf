"""pathscrub domain exceptions."""


class PathScrubError(Exception):
    """Base exception for all pathscrub errors."""


class InvalidArgumentError(PathScrubError, ValueError):
    """Raised when a name or path cannot be sanitized."""


class PathTraversalError(InvalidArgumentError):
    """Raised when a composed path still contains a traversal sequence."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Path contains a path traversal sequence: '{path}'")


class MissingAnnotationError(PathScrubError, LookupError):
    """Raised when a flag value has no (column, flag value) annotation."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"No multi-flag annotation for {value!r}")


class FlagColumnOutOfRangeError(PathScrubError, IndexError):
    """Raised when an annotation points past the supplied bit fields."""

    def __init__(self, column: int, size: int) -> None:
        self.column = column
        self.size = size
        super().__init__(f"Flag column {column} is out of range for {size} bit field(s)")

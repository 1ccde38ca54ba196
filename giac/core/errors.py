"""Error types for the GIAC domain.

Resolution misses are reported as ``None`` by the resolution functions; these
exceptions exist for the load path and for callers that want a raising variant.
"""


class SpecValidationError(Exception):
    """Raised when a specification document cannot be read or validated."""

    pass


class AxisNotFoundError(LookupError):
    """Raised when an axis identifier does not match any axis in the spec."""

    def __init__(self, axis: str):
        super().__init__(f"Axis not found: {axis!r}")
        self.axis = axis


class InvalidLevelError(ValueError):
    """Raised when a level value is not defined on the target axis."""

    def __init__(self, axis: str, value: object):
        super().__init__(f"Invalid level for axis {axis!r}: {value!r}")
        self.axis = axis
        self.value = value

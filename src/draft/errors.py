"""Exceptions raised by draft.

The scheme builder itself never raises: absent examples are skipped and
lookups report a miss with ``None``. Errors come from cataloguing example
values and from loading a scheme by name for the CLI.
"""


class DraftError(Exception):
    """Base exception for draft."""

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class ReflectError(DraftError):
    """Raised when an example value cannot be catalogued."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot catalogue '{path}': {reason}")


class CycleError(ReflectError):
    """The example value refers back to itself."""

    def __init__(self, path: str):
        super().__init__(path, "value contains a reference cycle")


class UnsupportedValueError(ReflectError):
    """The example value is a callable, class or module rather than data."""

    def __init__(self, path: str, value: object):
        self.value_type = type(value).__name__
        super().__init__(path, f"unsupported value of type {self.value_type}")


class SchemeLoadError(DraftError):
    """Raised when a ``module:attribute`` target does not name a Scheme."""

    def __init__(self, target: str, reason: str):
        self.target = target
        self.reason = reason
        super().__init__(f"Cannot load scheme '{target}': {reason}")

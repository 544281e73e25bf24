"""
Exceptions raised by the data object engine.
"""
from typing import Optional


class DataObjectError(Exception):
    """Base exception for data object compare/copy errors."""
    pass


class MissingTargetPropertyError(DataObjectError):
    """No writable target property corresponds to a source property.

    Raised while planning a copy, before anything is written.
    """

    def __init__(self, source_name: str, target_name: Optional[str] = None):
        self.source_name = source_name
        self.target_name = target_name or source_name
        super().__init__(
            f"Can't find a matching target property '{self.target_name}' for the "
            f"source property '{source_name}'. The copy operation got canceled."
        )


class ConversionError(DataObjectError):
    """A mapping's converter raised while copying.

    The target object may already be partially updated and must be discarded.
    The converter's exception is chained as ``__cause__``.
    """

    def __init__(self, source_name: str, target_name: str):
        self.source_name = source_name
        self.target_name = target_name
        super().__init__(
            f"Conversion from the source property '{source_name}' to the target "
            f"property '{target_name}' failed. Discard the target object because it "
            f"might already be in a corrupted state."
        )


class PropertyAssignmentError(DataObjectError):
    """Writing a value to a target property failed while copying.

    Same partial-update semantics as ConversionError.
    """

    def __init__(self, source_name: str, target_name: str):
        self.source_name = source_name
        self.target_name = target_name
        super().__init__(
            f"Assigning the value of the source property '{source_name}' to the "
            f"target property '{target_name}' failed. Discard the target object "
            f"because it might already be in a corrupted state."
        )


class UnsupportedValueError(DataObjectError, TypeError):
    """A value outside the recognized scalar set reached the digest builder."""

    def __init__(self, value: object):
        self.value_type = type(value)
        super().__init__(
            f"Values of type '{self.value_type.__qualname__}' can't be used in a "
            f"data object hash"
        )

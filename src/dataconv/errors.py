"""Exceptions and warnings raised by the dataconv codecs."""


class ConversionError(Exception):
    """Base class for every conversion failure."""
    pass


class ParseError(ConversionError):
    """Raised when CSV, JSON, YAML or XML text cannot be parsed."""
    pass


class MalformedRowError(ParseError):
    """Raised when a CSV data row does not match the header length."""

    def __init__(self, line_number: int, expected: int, actual: int):
        self.line_number = line_number
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row on line {line_number} has {actual} fields, header has {expected}"
        )


class UnsupportedShapeError(ConversionError):
    """Raised when a value does not have the shape a target format needs."""
    pass


class InvalidTagNameError(ConversionError):
    """Raised when a key cannot be used as an XML element or attribute name."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Invalid XML name: {name!r}")


class UninitializedSlotError(ConversionError):
    """Raised when a converter slot is read before it was ever set."""

    def __init__(self, slot: str):
        self.slot = slot
        super().__init__(f"No {slot} has been set on this converter")


class LossyConversionWarning(UserWarning):
    """Emitted when a value will not survive a round trip unchanged."""
    pass


__all__ = [
    "ConversionError",
    "ParseError",
    "MalformedRowError",
    "UnsupportedShapeError",
    "InvalidTagNameError",
    "UninitializedSlotError",
    "LossyConversionWarning",
]

"""
dataconv - structured data interconversion.

Moves one dataset between five representations:

    - array   : the generic nested value (dict / list / scalar / None)
    - CSV     : delimited flat records
    - JSON    : JSON text
    - object  : DataObject keyed objects
    - XML     : single-root XML 1.0 text

plus YAML text. Every conversion funnels through the array form except
object -> JSON and the XML encoder, which have direct paths.

The codec modules are pure functions. DataConverter is a thin stateful
facade that stages one value per representation.
"""

__version__ = "2025.02.10"

from .errors import (
    ConversionError,
    ParseError,
    MalformedRowError,
    UnsupportedShapeError,
    InvalidTagNameError,
    UninitializedSlotError,
    LossyConversionWarning,
)
from .values import ValueKind, kind_of
from .objects import DataObject
from .converter import DataConverter

__all__ = [
    "__version__",
    "ConversionError",
    "ParseError",
    "MalformedRowError",
    "UnsupportedShapeError",
    "InvalidTagNameError",
    "UninitializedSlotError",
    "LossyConversionWarning",
    "ValueKind",
    "kind_of",
    "DataObject",
    "DataConverter",
]

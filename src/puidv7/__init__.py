"""
puidv7 - Prefixed UUID Encoding

Encodes UUIDs as a 3-letter namespace prefix followed by the Crockford
Base32 encoding of the UUID bytes, and decodes them back.
"""

from puidv7 import base32
from puidv7.codec import PuidCodec
from puidv7.config import Settings
from puidv7.exceptions import (
    FormatError,
    InvalidPrefixError,
    InvalidPuidFormatError,
    InvalidUUIDError,
    InvalidUUIDFormatError,
    PrefixMismatchError,
    Puidv7Error,
)
from puidv7.puid import PuidComponents, decode, encode, parse, validate, validate_prefix
from puidv7.validator import PuidValidator, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "base32",
    "encode",
    "decode",
    "parse",
    "validate",
    "validate_prefix",
    "PuidCodec",
    "PuidComponents",
    "PuidValidator",
    "ValidationResult",
    "Settings",
    "Puidv7Error",
    "FormatError",
    "InvalidPrefixError",
    "InvalidUUIDFormatError",
    "InvalidPuidFormatError",
    "PrefixMismatchError",
    "InvalidUUIDError",
]

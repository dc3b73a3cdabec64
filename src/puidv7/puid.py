"""Prefixed UUID (puidv7) encoding and decoding.

Format: {prefix:3}{base32:26}
Example:
    0195c62c-8f2c-7f47-bbc7-bf347ca146b9  (UUID)
    abc06awcb4f5hzmfey7qwt7s8a6q4         (puidv7, prefix 'abc')

Components:
    prefix: 3 lowercase a-z characters naming the namespace
    base32: Crockford Base32 encoding of the 16 UUID bytes
"""

import re
from dataclasses import dataclass
from uuid import UUID

from puidv7 import base32
from puidv7.exceptions import (
    InvalidPrefixError,
    InvalidPuidFormatError,
    InvalidUUIDError,
    InvalidUUIDFormatError,
    PrefixMismatchError,
)

PREFIX_LENGTH = 3
PUID_LENGTH = 29

PREFIX_REGEX = re.compile(r"[a-z]{3}")
UUID_HEX_REGEX = re.compile(r"[0-9a-f]{32}")
# Canonical alphabet only: lookalikes (i, l, o) are not accepted here
PUID_REGEX = re.compile(r"[a-z]{3}[0-9a-hj-km-np-tv-z]{26}")


@dataclass(frozen=True)
class PuidComponents:
    """Parsed puidv7 components."""

    raw_puid: str
    puid: str
    prefix: str
    uuid: str

    def as_uuid(self) -> UUID:
        """Return the decoded value as a ``uuid.UUID``."""
        return UUID(self.uuid)


def normalize(text: str) -> str:
    """Strip whitespace, remove spaces and hyphens, lowercase."""
    return text.strip().replace(" ", "").replace("-", "").lower()


def validate_prefix(prefix: str) -> str:
    """Validate a puidv7 prefix.

    The prefix is not case-folded: 'ABC' is rejected.

    Args:
        prefix: Prefix to validate

    Returns:
        The prefix unchanged

    Raises:
        InvalidPrefixError: If prefix is not exactly 3 lowercase a-z letters
    """
    if not isinstance(prefix, str) or not PREFIX_REGEX.fullmatch(prefix):
        raise InvalidPrefixError(str(prefix))
    return prefix


def encode(uuid: str | UUID, prefix: str) -> str:
    """Encode a UUID into a prefixed Crockford Base32 string.

    Args:
        uuid: UUID text in any common hyphenation, case or spacing, or a
            ``uuid.UUID`` instance
        prefix: 3 lowercase a-z characters

    Returns:
        29-character puidv7 string

    Raises:
        InvalidPrefixError: If prefix is invalid
        InvalidUUIDFormatError: If uuid does not contain exactly 32 hex digits

    Example:
        >>> encode("0195c62c-8f2c-7f47-bbc7-bf347ca146b9", "abc")
        'abc06awcb4f5hzmfey7qwt7s8a6q4'
    """
    validate_prefix(prefix)

    text = str(uuid) if isinstance(uuid, UUID) else uuid
    hex_str = normalize(text)
    if not UUID_HEX_REGEX.fullmatch(hex_str):
        raise InvalidUUIDFormatError(text)

    try:
        raw = bytes.fromhex(hex_str)
    except ValueError as e:
        raise InvalidUUIDFormatError(text) from e

    return prefix + base32.encode(raw)


def validate(puid: str, expected_prefix: str = "") -> str:
    """Validate a puidv7 string without decoding it.

    Args:
        puid: puidv7 text (whitespace, hyphens and case are ignored)
        expected_prefix: Required prefix, or "" to accept any prefix

    Returns:
        Normalized puidv7 string

    Raises:
        InvalidPuidFormatError: If puid does not match the fixed format
        PrefixMismatchError: If expected_prefix is set and does not match
    """
    normalized = normalize(puid)
    if not PUID_REGEX.fullmatch(normalized):
        raise InvalidPuidFormatError(puid)

    if expected_prefix and normalized[:PREFIX_LENGTH] != expected_prefix:
        raise PrefixMismatchError(expected_prefix, normalized)

    return normalized


def decode(puid: str, expected_prefix: str = "") -> str:
    """Decode a puidv7 string into canonical UUID text.

    Args:
        puid: puidv7 text (whitespace, hyphens and case are ignored)
        expected_prefix: Required prefix, or "" to accept any prefix

    Returns:
        Lowercase hyphenated UUID string

    Raises:
        InvalidPuidFormatError: If puid does not match the fixed format
        PrefixMismatchError: If expected_prefix is set and does not match
        FormatError: If the Base32 payload cannot be decoded
        InvalidUUIDError: If the payload does not decode to 16 bytes

    Example:
        >>> decode("abc06awcb4f5hzmfey7qwt7s8a6q4")
        '0195c62c-8f2c-7f47-bbc7-bf347ca146b9'
    """
    normalized = validate(puid, expected_prefix)

    hex_str = base32.decode(normalized[PREFIX_LENGTH:]).hex()
    if not UUID_HEX_REGEX.fullmatch(hex_str):
        raise InvalidUUIDError(hex_str)

    return "-".join(
        [hex_str[0:8], hex_str[8:12], hex_str[12:16], hex_str[16:20], hex_str[20:32]]
    )


def parse(puid: str, expected_prefix: str = "") -> PuidComponents:
    """Decode a puidv7 string into its components.

    Args:
        puid: puidv7 text
        expected_prefix: Required prefix, or "" to accept any prefix

    Returns:
        Parsed components
    """
    uuid = decode(puid, expected_prefix)
    normalized = normalize(puid)
    return PuidComponents(
        raw_puid=puid,
        puid=normalized,
        prefix=normalized[:PREFIX_LENGTH],
        uuid=uuid,
    )

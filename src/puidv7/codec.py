"""Prefix-bound puidv7 codec."""

from collections.abc import Iterable
from uuid import UUID

from puidv7 import puid
from puidv7.puid import PuidComponents


class PuidCodec:
    """puidv7 encoder/decoder for a single namespace prefix."""

    def __init__(self, prefix: str):
        """Initialize codec.

        Args:
            prefix: 3 lowercase a-z characters

        Raises:
            InvalidPrefixError: If prefix is invalid
        """
        self.prefix = puid.validate_prefix(prefix)

    def encode(self, uuid: str | UUID) -> str:
        """Encode a UUID with this codec's prefix.

        Args:
            uuid: UUID string or ``uuid.UUID``

        Returns:
            puidv7 string
        """
        return puid.encode(uuid, self.prefix)

    def encode_batch(self, uuids: Iterable[str | UUID]) -> list[str]:
        """Encode several UUIDs.

        Args:
            uuids: UUID strings or ``uuid.UUID`` instances

        Returns:
            List of puidv7 strings, in input order
        """
        return [self.encode(uuid) for uuid in uuids]

    def decode(self, value: str) -> str:
        """Decode a puidv7 string, requiring this codec's prefix.

        Args:
            value: puidv7 string

        Returns:
            Canonical UUID string
        """
        return puid.decode(value, self.prefix)

    def parse(self, value: str) -> PuidComponents:
        """Decode a puidv7 string into components, requiring this codec's prefix."""
        return puid.parse(value, self.prefix)

    def __repr__(self) -> str:
        return f"PuidCodec(prefix={self.prefix!r})"

"""Custom exceptions with helpful error messages."""


class Puidv7Error(ValueError):
    """Base exception for puidv7 errors."""

    pass


class FormatError(Puidv7Error):
    """Text is not valid Crockford Base32."""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid Base32 string {value!r}: {reason}")


class InvalidPrefixError(Puidv7Error):
    """Prefix is not exactly three lowercase letters."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        super().__init__(
            f"Invalid prefix {prefix!r}: must be 3 lowercase a-z characters.\n\n"
            f"Suggestions:\n"
            f"1. Use a short namespace such as 'usr' or 'acc'\n"
            f"2. Prefixes are case-sensitive: pass '{prefix.lower()}' if you meant it"
        )


class InvalidUUIDFormatError(Puidv7Error):
    """UUID text does not normalize to 32 hex digits."""

    def __init__(self, uuid: str):
        self.uuid = uuid
        super().__init__(f"Invalid UUID format: {uuid!r}")


class InvalidPuidFormatError(Puidv7Error):
    """Puid text does not match the 3-letter prefix + 26 Base32 character pattern."""

    def __init__(self, puid: str):
        self.puid = puid
        super().__init__(
            f"Invalid puidv7 format: {puid!r} "
            f"(expected 3 lowercase letters followed by 26 Crockford Base32 characters)"
        )


class PrefixMismatchError(Puidv7Error):
    """Puid prefix differs from the expected prefix."""

    def __init__(self, expected: str, puid: str):
        self.expected = expected
        self.actual = puid[:3]
        self.puid = puid
        super().__init__(
            f"Prefix mismatch: expected '{expected}', got '{self.actual}' in {puid!r}.\n\n"
            f"Suggestions:\n"
            f"1. Check the identifier belongs to the '{expected}' namespace\n"
            f"2. Pass an empty expected prefix to accept any namespace"
        )


class InvalidUUIDError(Puidv7Error):
    """Decoded value is not a 16-byte UUID."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"puidv7 does not decode to a valid UUID: {value!r}")

"""Crockford Base32 encoding/decoding.

Alphabet: "0123456789abcdefghjkmnpqrstvwxyz", 32 symbols omitting
i, l, o, u (https://www.crockford.com/base32.html).

Bits are grouped 5 at a time from the most significant bit of the first
byte, as in RFC 4648. No padding is emitted or accepted.

Output length: ceil(n*8/5) characters for n input bytes.
  16 bytes (UUID) -> 26 chars

Decoding is lenient about how people write identifiers down: surrounding
whitespace, hyphens and spaces are ignored, case is folded, and the
lookalikes i/l and o are read as 1 and 0.
"""

from puidv7.exceptions import FormatError

ALPHABET = "0123456789abcdefghjkmnpqrstvwxyz"
_DECODE_MAP = {c: i for i, c in enumerate(ALPHABET)}

# u has no mapping and stays invalid
_LOOKALIKES = str.maketrans({"i": "1", "l": "1", "o": "0"})


def encode(data: bytes) -> str:
    """Encode bytes to Crockford Base32.

    The final partial group, if any, is padded with zero bits on the right.
    """
    result = []
    buffer = 0
    bits = 0
    for byte in data:
        buffer = (buffer << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            result.append(ALPHABET[(buffer >> bits) & 0x1F])
        buffer &= (1 << bits) - 1
    if bits:
        result.append(ALPHABET[(buffer << (5 - bits)) & 0x1F])
    return "".join(result)


def normalize(text: str) -> str:
    """Fold human-entered Base32 text into the canonical alphabet.

    Strips surrounding whitespace, removes every hyphen and space, lowercases
    and maps lookalike characters. Does not validate.
    """
    text = text.strip().replace("-", "").replace(" ", "").lower()
    return text.translate(_LOOKALIKES)


def decode(text: str) -> bytes:
    """Decode Crockford Base32 text to bytes.

    Raises:
        FormatError: If the text is empty after normalization, contains a
            character outside the alphabet, or has a length no byte sequence
            encodes to.
    """
    normalized = normalize(text)
    if not normalized:
        raise FormatError(text, "empty string")
    return _decode_strict(text, normalized)


def _decode_strict(text: str, normalized: str) -> bytes:
    values = []
    for position, ch in enumerate(normalized):
        value = _DECODE_MAP.get(ch)
        if value is None:
            raise FormatError(text, f"invalid character {ch!r} at position {position}")
        values.append(value)

    # 5+ leftover bits means a whole symbol that belongs to no byte
    if len(values) * 5 % 8 >= 5:
        raise FormatError(text, f"invalid length {len(values)}")

    result = bytearray()
    buffer = 0
    bits = 0
    for value in values:
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            result.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1

    if not result:
        raise FormatError(text, "decodes to zero bytes")
    return bytes(result)

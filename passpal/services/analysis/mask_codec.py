"""
Hashcat-style mask classification and its compact byte encoding.

A mask is a string over the alphabet L (lower), U (upper), D (digit) and
S (symbol), one symbol per character of the classified word.

Byte layout: each symbol takes 2 bits (L=0, U=1, D=2, S=3) and a byte holds
four symbols, most significant pair first. Full groups of four come first,
followed by a single trailer byte carrying the remaining 0-3 symbols in its
top six bits (right-padded with L) and the number of real symbols in its two
low bits. A mask whose length is a multiple of 4 therefore ends with the
all-zero byte, and the empty mask encodes to ``b"\\x00"``.
"""

from collections import Counter
from typing import ClassVar

from passpal.core.exceptions import MaskCodecError
from passpal.services.analysis.charsets import (
    MASK_SYMBOLS,
    PRIMITIVE_ALPHABETS,
    classify_char,
)


class MaskCodec:
    """Encode, decode and measure {L,U,D,S} masks."""

    ALPHABET: ClassVar[str] = "LUDS"
    SYMBOLS_PER_BYTE: ClassVar[int] = 4

    HASHCAT_TOKENS: ClassVar[dict[str, str]] = {
        "L": "?l",
        "U": "?u",
        "D": "?d",
        "S": "?s",
    }

    # Size of the character class behind each symbol
    KEYSPACE: ClassVar[dict[str, int]] = {
        symbol: len(PRIMITIVE_ALPHABETS[name])
        for name, symbol in MASK_SYMBOLS.items()
    }

    _values: ClassVar[dict[str, int]] = {symbol: value for value, symbol in enumerate("LUDS")}

    @classmethod
    def classify(cls, word: str) -> str | None:
        """
        Classify every character of a word.

        Returns:
            The mask string, or None if any character falls outside the
            four classes.
        """
        symbols = []
        for char in word:
            primitive = classify_char(char)
            if primitive is None:
                return None
            symbols.append(MASK_SYMBOLS[primitive])
        return "".join(symbols)

    @classmethod
    def encode(cls, mask: str) -> bytes:
        """
        Pack a mask into bytes.

        Args:
            mask: String over {L, U, D, S}

        Returns:
            Encoded mask, always ending with a trailer byte
        """
        try:
            values = [cls._values[symbol] for symbol in mask]
        except KeyError as e:
            raise MaskCodecError(
                f"Invalid mask symbol {e.args[0]!r}",
                {"mask": mask},
            ) from None

        full = len(values) - len(values) % cls.SYMBOLS_PER_BYTE
        out = bytearray()
        for start in range(0, full, cls.SYMBOLS_PER_BYTE):
            byte = 0
            for value in values[start:start + cls.SYMBOLS_PER_BYTE]:
                byte = (byte << 2) | value
            out.append(byte)

        tail = values[full:]
        trailer = 0
        for value in tail + [0] * (cls.SYMBOLS_PER_BYTE - 1 - len(tail)):
            trailer = (trailer << 2) | value
        out.append((trailer << 2) | len(tail))
        return bytes(out)

    @classmethod
    def decode(cls, code: bytes) -> str:
        """
        Expand an encoded mask back into its symbol string.

        Args:
            code: Bytes produced by encode()

        Returns:
            The original mask string
        """
        if not code:
            raise MaskCodecError("Encoded mask is empty; a trailer byte is required")

        symbols = []
        for byte in code[:-1]:
            symbols.extend(cls._unpack(byte, cls.SYMBOLS_PER_BYTE))

        trailer = code[-1]
        count = trailer & 0b11
        symbols.extend(cls._unpack(trailer >> 2, cls.SYMBOLS_PER_BYTE - 1)[:count])
        return "".join(symbols)

    @classmethod
    def _unpack(cls, byte: int, width: int) -> list[str]:
        """Split the low 2*width bits of byte into symbols, high bits first."""
        return [
            cls.ALPHABET[(byte >> (2 * shift)) & 0b11]
            for shift in range(width - 1, -1, -1)
        ]

    @classmethod
    def keyspace(cls, mask: str) -> int:
        """Number of candidates a mask can produce."""
        counts = Counter(mask)
        result = 1
        for symbol, size in cls.KEYSPACE.items():
            result *= size ** counts.get(symbol, 0)
        return result

    @classmethod
    def to_hashcat(cls, mask: str) -> str:
        """Render a mask the way hashcat spells it, e.g. ?u?l?d."""
        return "".join(cls.HASHCAT_TOKENS[symbol] for symbol in mask)

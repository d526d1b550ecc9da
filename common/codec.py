"""Hex wire codec for chunk payloads exchanged with the storage contract."""

from typing import List, Optional, Sequence, Union

from common.constants import BYTES_PREFIX, WORD_SIZE_BYTES

RawChunk = Union[str, Sequence[str]]


def add_bytes_prefix(hex_string: str) -> str:
    """Prepend the 0x wire marker unless it is already present."""
    if hex_string.startswith(BYTES_PREFIX):
        return hex_string
    return BYTES_PREFIX + hex_string


def strip_bytes_prefix(hex_string: str) -> str:
    """Drop a leading 0x wire marker, if any."""
    if hex_string.startswith(BYTES_PREFIX):
        return hex_string[len(BYTES_PREFIX):]
    return hex_string


def bytes_to_hex(data: bytes) -> str:
    """
    Encode bytes as lowercase hex, two characters per byte, no separators.

    Args:
        data: Raw bytes

    Returns:
        Unprefixed hex string
    """
    return bytes(data).hex()


def hex_to_bytes(hex_string: str, length: Optional[int] = None) -> bytes:
    """
    Decode a hex string back into bytes.

    Args:
        hex_string: Hex string, optionally 0x-prefixed
        length: When given, only the first ``length`` bytes are decoded and
            any trailing padding is discarded

    Returns:
        Decoded bytes

    Raises:
        ValueError: If the string is not valid hex or is shorter than
            the requested length
    """
    digits = strip_bytes_prefix(hex_string)
    if length is not None:
        if len(digits) < 2 * length:
            raise ValueError(
                f"Hex payload has {len(digits) // 2} bytes, expected at least {length}"
            )
        digits = digits[:2 * length]
    return bytes.fromhex(digits)


def concat_words(raw: RawChunk, hex_length: int) -> str:
    """
    Join word-aligned read-back data into one hex string of exact length.

    The contract returns chunk data as an array of 32-byte words whose last
    word is zero-padded. A plain hex string is accepted as a one-word array.

    Args:
        raw: Hex string or sequence of hex words, each optionally prefixed
        hex_length: Number of hex characters to keep

    Returns:
        Unprefixed hex string truncated to ``hex_length``
    """
    if isinstance(raw, str):
        words = [raw]
    else:
        words = raw
    return "".join(strip_bytes_prefix(word) for word in words)[:hex_length]


def split_words(data: bytes) -> List[str]:
    """
    Encode bytes into 0x-prefixed 32-byte words, zero-padding the last one.

    Args:
        data: Raw bytes

    Returns:
        List of words, empty for empty input
    """
    words = []
    for start in range(0, len(data), WORD_SIZE_BYTES):
        word = data[start:start + WORD_SIZE_BYTES].ljust(WORD_SIZE_BYTES, b"\x00")
        words.append(add_bytes_prefix(word.hex()))
    return words


def decode_chunk(raw: RawChunk, length: int) -> bytes:
    """Decode one read-back chunk into exactly ``length`` bytes."""
    return hex_to_bytes(concat_words(raw, 2 * length), length)

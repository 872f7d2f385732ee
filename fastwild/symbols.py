"""Decoding, encoding and case folding of matcher input."""

from typing import Union


BytesLike = Union[bytes, bytearray, memoryview]


def to_units(data: Union[str, BytesLike], encoding: str = "utf-8") -> bytes:
    """Return the storage units of data as bytes.

    Text is encoded first, so a multi-byte character becomes several units.
    """
    if isinstance(data, str):
        return data.encode(encoding)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected str or bytes-like input, got {type(data).__name__}")


def to_scalars(data: Union[str, BytesLike], encoding: str = "utf-8", errors: str = "strict") -> str:
    """Return data as a str holding one item per Unicode scalar value.

    Malformed bytes raise UnicodeDecodeError under errors="strict" and are
    replaced with U+FFFD under errors="replace". A str holding a lone
    surrogate is rejected with ValueError.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).decode(encoding, errors)
    if isinstance(data, str):
        for index, char in enumerate(data):
            if "\ud800" <= char <= "\udfff":
                raise ValueError(f"Lone surrogate U+{ord(char):04X} at position {index}")
        return data
    raise TypeError(f"Expected str or bytes-like input, got {type(data).__name__}")


def _lower_char(char: str) -> str:
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def fold_case(data: Union[str, BytesLike]) -> Union[str, bytes]:
    """Map data to lower case one symbol at a time.

    A character whose lower case form is longer than one code point is kept
    as is, so folding never changes the length. Bytes are folded in the
    ASCII range only.
    """
    if isinstance(data, str):
        return "".join(_lower_char(char) for char in data)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).lower()
    raise TypeError(f"Expected str or bytes-like input, got {type(data).__name__}")

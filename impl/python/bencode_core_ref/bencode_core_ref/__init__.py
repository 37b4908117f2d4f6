from .bencode import (
    Array,
    ByteSource,
    Bytes,
    Error,
    Integer,
    InvalidCharacter,
    InvalidLength,
    Object,
    OutOfOrderKey,
    Truncated,
    Value,
    decode,
    decode_from,
    encode,
    encode_to,
)

__all__ = [
    "Array", "ByteSource", "Bytes", "Error", "Integer", "InvalidCharacter",
    "InvalidLength", "Object", "OutOfOrderKey", "Truncated", "Value",
    "decode", "decode_from", "encode", "encode_to",
]

"""
Codec package: exchange string envelope and document mapping.
"""
from .envelope import decode, encode
from .document import (
    select_document,
    load_document,
    parse_document,
    dump_document,
    render_document,
    decode_document,
    encode_document,
)

__all__ = [
    "decode",
    "encode",
    "select_document",
    "load_document",
    "parse_document",
    "dump_document",
    "render_document",
    "decode_document",
    "encode_document",
]

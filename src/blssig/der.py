"""Minimal strict DER for single-field containers.

Only the shapes used by the key files are supported:

    SEQUENCE { INTEGER }        -- private key scalar
    SEQUENCE { OCTET STRING }   -- compressed public key point

Decoding is strict: definite minimal lengths, minimal INTEGER content,
and no bytes left over at either nesting level. Any violation raises
FormatError.
"""
from __future__ import annotations

from typing import Tuple

from .errors import FormatError

TAG_INTEGER = 0x02
TAG_OCTET_STRING = 0x04
TAG_SEQUENCE = 0x30


def _encode_length(n: int) -> bytes:
    if n < 0x80:
        return bytes([n])
    body = n.to_bytes((n.bit_length() + 7) // 8, "big")
    return bytes([0x80 | len(body)]) + body


def _tlv(tag: int, content: bytes) -> bytes:
    return bytes([tag]) + _encode_length(len(content)) + content


def _read_tlv(buf: bytes, offset: int) -> Tuple[int, bytes, int]:
    """Parse one TLV at offset. Returns (tag, content, next_offset)."""
    if offset >= len(buf):
        raise FormatError("truncated DER: missing tag")
    tag = buf[offset]
    offset += 1
    if offset >= len(buf):
        raise FormatError("truncated DER: missing length")
    first = buf[offset]
    offset += 1
    if first < 0x80:
        length = first
    else:
        n = first & 0x7F
        if n == 0:
            raise FormatError("indefinite length is not DER")
        if n > 4:
            raise FormatError("DER length too large")
        raw = buf[offset:offset + n]
        if len(raw) != n:
            raise FormatError("truncated DER: length bytes")
        if raw[0] == 0:
            raise FormatError("non-minimal DER length")
        length = int.from_bytes(raw, "big")
        if length < 0x80:
            raise FormatError("non-minimal DER length")
        offset += n
    end = offset + length
    if end > len(buf):
        raise FormatError("truncated DER: content shorter than declared length")
    return tag, buf[offset:end], end


def _encode_integer_content(value: int) -> bytes:
    n = (value.bit_length() + 8) // 8  # room for the sign bit
    return value.to_bytes(n, "big", signed=True)


def _decode_integer_content(content: bytes) -> int:
    if not content:
        raise FormatError("empty DER INTEGER")
    if len(content) > 1:
        if content[0] == 0x00 and content[1] < 0x80:
            raise FormatError("non-minimal DER INTEGER")
        if content[0] == 0xFF and content[1] >= 0x80:
            raise FormatError("non-minimal DER INTEGER")
    return int.from_bytes(content, "big", signed=True)


def encode_single(tag: int, content: bytes) -> bytes:
    return _tlv(TAG_SEQUENCE, _tlv(tag, content))


def decode_single(data: bytes, expected_tag: int) -> bytes:
    """Return the content of the sole element of a SEQUENCE."""
    tag, body, end = _read_tlv(data, 0)
    if tag != TAG_SEQUENCE:
        raise FormatError(f"expected SEQUENCE, got tag 0x{tag:02x}")
    if end != len(data):
        raise FormatError(f"{len(data) - end} trailing byte(s) after SEQUENCE")
    if not body:
        raise FormatError("empty SEQUENCE")
    inner_tag, content, inner_end = _read_tlv(body, 0)
    if inner_tag != expected_tag:
        raise FormatError(f"expected tag 0x{expected_tag:02x}, got 0x{inner_tag:02x}")
    if inner_end != len(body):
        raise FormatError("SEQUENCE holds more than one field")
    return content


def encode_integer_sequence(value: int) -> bytes:
    return encode_single(TAG_INTEGER, _encode_integer_content(value))


def decode_integer_sequence(data: bytes) -> int:
    return _decode_integer_content(decode_single(data, TAG_INTEGER))


def encode_octets_sequence(value: bytes) -> bytes:
    return encode_single(TAG_OCTET_STRING, bytes(value))


def decode_octets_sequence(data: bytes) -> bytes:
    return decode_single(data, TAG_OCTET_STRING)

"""PEM-style armor: base64 body between labeled BEGIN/END lines."""
from __future__ import annotations

import base64
import binascii
import re
from typing import Union

from .errors import FormatError

LINE_WIDTH = 64

_BLOCK_RE = re.compile(
    r"-----BEGIN (?P<label>[A-Z0-9 ]+)-----\n"
    r"(?P<body>[A-Za-z0-9+/=\n]*?)\n"
    r"-----END (?P<end>[A-Z0-9 ]+)-----"
)


def armor(label: str, payload: bytes) -> bytes:
    b64 = base64.b64encode(payload).decode("ascii")
    lines = [b64[i:i + LINE_WIDTH] for i in range(0, len(b64), LINE_WIDTH)]
    text = "\n".join([f"-----BEGIN {label}-----", *lines, f"-----END {label}-----"])
    return (text + "\n").encode("ascii")


def unarmor(data: Union[bytes, str], label: str) -> bytes:
    """Strip the armor and return the decoded payload.

    The input must hold exactly one block (surrounding whitespace allowed),
    both markers must name `label`, and the body must be strict base64.
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            text = bytes(data).decode("ascii")
        except UnicodeDecodeError as exc:
            raise FormatError("armored data is not ASCII") from exc
    else:
        text = data
    text = text.replace("\r\n", "\n").strip()

    m = _BLOCK_RE.fullmatch(text)
    if m is None:
        raise FormatError("no armored block found")
    if m.group("label") != m.group("end"):
        raise FormatError(
            f"BEGIN/END labels differ: {m.group('label')!r} vs {m.group('end')!r}"
        )
    if m.group("label") != label:
        raise FormatError(f"expected {label!r} block, got {m.group('label')!r}")

    body = m.group("body").replace("\n", "")
    if not body:
        raise FormatError("empty armored body")
    try:
        return base64.b64decode(body, validate=True)
    except binascii.Error as exc:
        raise FormatError(f"invalid base64 body: {exc}") from exc

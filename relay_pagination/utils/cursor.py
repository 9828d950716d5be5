"""Opaque cursor encoding for integer offsets."""

from __future__ import annotations

import base64
import binascii

from relay_pagination.exceptions import InvalidArgumentError, MalformedCursorError

CURSOR_PREFIX = "arrayconnection:"


def encode_cursor(offset: int) -> str:
    """Encode a zero-based integer offset into an opaque cursor string."""
    if offset < 0:
        msg = "Offset must be non-negative"
        raise InvalidArgumentError(msg, context={"argument": "offset", "value": offset})
    raw = f"{CURSOR_PREFIX}{offset}".encode()
    return base64.urlsafe_b64encode(raw).decode("utf-8").rstrip("=")


def decode_cursor(cursor: str) -> int:
    """Decode an opaque cursor string into an integer offset.

    Only tokens produced by :func:`encode_cursor` are accepted; anything
    else raises :class:`MalformedCursorError`.
    """
    if not cursor:
        msg = "Cursor cannot be empty"
        raise MalformedCursorError(msg, context={"cursor": cursor})

    padding = "=" * (-len(cursor) % 4)
    try:
        decoded = base64.urlsafe_b64decode((cursor + padding).encode("utf-8")).decode("utf-8")
    except (binascii.Error, ValueError, UnicodeError) as exc:
        msg = "Cursor is not valid base64"
        raise MalformedCursorError(msg, context={"cursor": cursor}) from exc

    if not decoded.startswith(CURSOR_PREFIX):
        msg = "Cursor format is invalid"
        raise MalformedCursorError(msg, context={"cursor": cursor})

    try:
        offset = int(decoded[len(CURSOR_PREFIX):])
    except ValueError as exc:
        msg = "Cursor offset is invalid"
        raise MalformedCursorError(msg, context={"cursor": cursor}) from exc

    if offset < 0:
        msg = "Cursor offset must be non-negative"
        raise MalformedCursorError(msg, context={"cursor": cursor})

    # int() tolerates signs, padding and whitespace; only the canonical form is ours
    if encode_cursor(offset) != cursor:
        msg = "Cursor is not in canonical form"
        raise MalformedCursorError(msg, context={"cursor": cursor})

    return offset

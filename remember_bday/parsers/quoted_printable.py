"""
Quoted-printable decoding for vCard name fields.

Only the subset emitted by phone exports is handled: the value is a run
of ``=XX`` escapes, one per UTF-8 byte, e.g. ``=54=C3=A4=73=74`` for
``Täst``. Anything before the first ``=`` is discarded, so a value with
no ``=`` at all decodes to the empty string.
"""

from __future__ import annotations

import re

from remember_bday.exceptions import DecodeError

_HEX_BYTE = re.compile(r"[0-9A-Fa-f]{2}")


def decode_quoted_printable(encoded: str) -> str:
    """Decode ``=XX`` escapes into text.

    Args:
        encoded: The field value after the ``FN;...:`` prefix.

    Returns:
        The decoded text.

    Raises:
        DecodeError: If a token is not exactly two hex digits, or the
            bytes are not valid UTF-8.
    """
    data = bytearray()
    for token in encoded.split("=")[1:]:
        if not _HEX_BYTE.fullmatch(token):
            raise DecodeError(f"invalid escape sequence '={token}'")
        data.append(int(token, 16))

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"decoded bytes are not valid UTF-8 ({exc.reason})") from exc

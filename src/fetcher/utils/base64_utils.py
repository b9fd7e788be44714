# src/fetcher/utils/base64_utils.py
import base64
import binascii

from readme_api.exceptions import DecodeError


def strip_newlines(encoded: str) -> str:
    """GitHub wraps base64 payloads at 60 columns; drop the line breaks."""
    return encoded.replace("\r", "").replace("\n", "")


def decode_base64_text(encoded: str, encoding: str = "utf-8") -> str:
    """
    Decodes newline-wrapped base64 into text.

    Raises:
        DecodeError: If the payload is not valid base64.
    """
    try:
        raw = base64.b64decode(strip_newlines(encoded), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"error decoding base64: {e}") from e
    return raw.decode(encoding, errors="replace")

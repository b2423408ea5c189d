#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/utils/encoding.py
"""Character encoding detection and input sizing utilities.

Wikitext arrives as bytes from files, streams or standard input. This module
turns those bytes into text: UTF-8 first, then whatever chardet detects with
enough confidence, then latin-1 (which accepts any byte sequence).
"""

from __future__ import annotations

import logging
from typing import IO, Optional

import chardet

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ("utf-8", "utf-8-sig")
LAST_RESORT_ENCODING = "latin-1"


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = 0.7,
) -> str | None:
    """Detect character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of bytes to sample for detection (uses first N bytes)
    confidence_threshold : float, default 0.7
        Minimum confidence level (0.0-1.0) required to trust detection

    Returns
    -------
    str | None
        Detected encoding name, or None when nothing was detected with
        enough confidence

    """
    result = chardet.detect(data[:sample_size])
    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet: no encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")
    if confidence < confidence_threshold:
        logger.debug(f"chardet confidence {confidence:.2f} below threshold {confidence_threshold}")
        return None
    return encoding


def decode_bytes(data: bytes, encoding: Optional[str] = None) -> str:
    """Decode wikitext bytes to text.

    Parameters
    ----------
    data : bytes
        Raw document bytes
    encoding : str, optional
        Known encoding. Undecodable bytes are replaced and a warning is
        logged. When None the encoding is detected.

    Returns
    -------
    str
        Decoded document

    Raises
    ------
    LookupError
        If ``encoding`` names an unknown codec

    """
    if encoding is not None:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as e:
            logger.warning(f"Input is not valid {encoding} ({e}); undecodable bytes were replaced")
            return data.decode(encoding, errors="replace")

    for candidate in DEFAULT_FALLBACK_ENCODINGS:
        try:
            return data.decode(candidate)
        except UnicodeDecodeError:
            continue

    detected = detect_encoding(data)
    if detected:
        try:
            text = data.decode(detected)
            logger.debug(f"Decoded input with detected encoding: {detected}")
            return text
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode with detected encoding {detected}: {e}")

    logger.warning(f"Could not determine input encoding, decoding as {LAST_RESORT_ENCODING}")
    return data.decode(LAST_RESORT_ENCODING)


def truncate_utf8(data: bytes, max_size: int) -> bytes:
    """Cut ``data`` to at most ``max_size`` bytes without splitting a UTF-8 sequence.

    Parameters
    ----------
    data : bytes
        Raw document bytes
    max_size : int
        Maximum number of bytes to keep

    Returns
    -------
    bytes
        ``data`` itself when it fits, else the longest prefix that fits and
        does not end inside a multi-byte character

    """
    if len(data) <= max_size:
        return data
    end = max_size
    # Back off over continuation bytes (10xxxxxx) to the start of the cut character
    while end > 0 and (data[end] & 0xC0) == 0x80:
        end -= 1
    return data[:end]


def read_stream_bytes(stream: IO[bytes] | IO[str], encoding: str = "utf-8") -> bytes:
    """Read a binary or text stream to the end and return its content as bytes.

    Raises
    ------
    TypeError
        If ``stream.read()`` returns something other than bytes or str

    """
    content = stream.read()
    if isinstance(content, bytes):
        return content
    if isinstance(content, str):
        return content.encode(encoding)
    raise TypeError(f"Stream read() returned unexpected type {type(content).__name__}. Expected bytes or str.")

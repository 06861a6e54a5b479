#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/tinymark/utils/encoding.py
"""Decoding of raw source bytes into text."""

from __future__ import annotations

import logging

import chardet

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ("utf-8", "utf-8-sig", "latin-1")


def detect_encoding(data: bytes, sample_size: int = 8192, confidence_threshold: float = 0.7) -> str | None:
    """Detect the character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of leading bytes handed to the detector
    confidence_threshold : float, default 0.7
        Minimum confidence (0.0-1.0) required to trust the detection

    Returns
    -------
    str or None
        Detected encoding name, or None when nothing was detected with
        sufficient confidence

    """
    result = chardet.detect(data[:sample_size])
    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet: no encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")
    if confidence < confidence_threshold:
        return None
    return encoding


def read_text_with_encoding_detection(
    data: bytes,
    fallback_encodings: tuple[str, ...] = DEFAULT_FALLBACK_ENCODINGS,
    use_chardet: bool = True,
) -> str:
    """Decode binary data as text.

    Input that is valid UTF-8 is decoded as UTF-8, and chardet is
    only consulted otherwise. The chardet guess is tried, then each fallback
    encoding in order. A single leading byte order mark is removed.

    Parameters
    ----------
    data : bytes
        Binary data to decode
    fallback_encodings : tuple of str
        Encodings to try when detection fails or is disabled
    use_chardet : bool, default True
        Attempt chardet-based detection first

    Returns
    -------
    str
        Decoded text

    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.debug("Input is not valid UTF-8, detecting encoding")

    candidates: list[str] = []
    if use_chardet:
        detected = detect_encoding(data)
        if detected:
            candidates.append(detected)
    candidates.extend(fallback_encodings)

    for encoding in candidates:
        try:
            text = data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode with {encoding}: {e}")
            continue
        logger.debug(f"Decoded input with encoding: {encoding}")
        return text.removeprefix("\ufeff")

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")

"""Encoding detection utilities"""

from pathlib import Path

import chardet

FALLBACK_ENCODINGS = ['utf-8', 'utf-8-sig', 'cp1252', 'latin-1']


def detect_encoding(file_path: Path) -> str:
    """
    Detect text file encoding

    Args:
        file_path: Path to file

    Returns:
        Detected encoding string
    """
    with open(file_path, 'rb') as f:
        raw_sample = f.read(8192)

    # BOM wins over statistical detection
    if raw_sample.startswith(b'\xef\xbb\xbf'):
        return 'utf-8-sig'

    result = chardet.detect(raw_sample)
    if result['encoding'] and result['confidence'] > 0.7:
        return result['encoding']

    for encoding in FALLBACK_ENCODINGS:
        try:
            raw_sample.decode(encoding)
            return encoding
        except (UnicodeDecodeError, LookupError):
            continue

    return 'latin-1'

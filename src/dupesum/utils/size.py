"""Byte size formatting and parsing with binary (powers of 1024) units."""

import re

BINARY_UNITS = ['B', 'KiB', 'MiB', 'GiB', 'TiB', 'PiB', 'EiB']

_SIZE_PATTERN = re.compile(r'^\s*(\d+(?:\.\d+)?)\s*([kmgtpe]?)(?:i?b)?\s*$', re.IGNORECASE)


def format_size(size_bytes: int) -> str:
    """Format byte size in human-readable binary units.

    Args:
        size_bytes: Size in bytes

    Returns:
        Human-readable size string (e.g., "100 MiB", "1.5 GiB", "512 B")
    """
    size: float = float(size_bytes)
    index = 0
    while size >= 1024.0 and index < len(BINARY_UNITS) - 1:
        size /= 1024.0
        index += 1

    if index == 0:
        return f"{int(size)} B"

    # Rounding may carry into the next unit (1048575 bytes is "1 MiB", not "1024 KiB")
    if round(size, 1) >= 1024.0 and index < len(BINARY_UNITS) - 1:
        size /= 1024.0
        index += 1

    text = f"{size:.1f}"
    if text.endswith('.0'):
        text = text[:-2]
    return f"{text} {BINARY_UNITS[index]}"


def parse_size(text: str | int) -> int:
    """Parse a size such as "10MiB", "10M", "512k" or "1048576" into bytes.

    Suffixes are always binary: "10M", "10MB" and "10MiB" all mean 10 * 1024 * 1024.

    Raises:
        ValueError: The text is not a recognizable size
    """
    if isinstance(text, bool):
        raise ValueError(f"invalid size: {text!r}")
    if isinstance(text, int):
        if text < 0:
            raise ValueError(f"size must not be negative: {text}")
        return text
    if not isinstance(text, str):
        raise ValueError(f"invalid size: {text!r}")

    match = _SIZE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"invalid size: {text!r}")

    number, prefix = match.groups()
    exponent = ' KMGTPE'.index(prefix.upper()) if prefix else 0
    return int(float(number) * 1024 ** exponent)

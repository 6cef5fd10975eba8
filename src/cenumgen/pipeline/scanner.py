"""Header scanner for #define constant names."""

import logging
import re
from typing import Pattern

from .models import RawEntry, ScanResult

logger = logging.getLogger(__name__)

# #define NAME ... at the start of a line, or after a ';' on the same line.
# The value is never parsed.
DEFINE_PATTERN: Pattern = re.compile(
    r"(?:^|;)[ \t]*#define[ \t]+([A-Za-z_][A-Za-z0-9_]*)\b", re.MULTILINE
)


def scan_header(text: str) -> ScanResult:
    """
    Extract distinct #define names from header text.

    Only the first definition of a name is kept. Every later definition adds
    a warning and is otherwise ignored.

    Args:
        text: Raw header source

    Returns:
        ScanResult with entries in first-occurrence order
    """
    # Treat \r\n and bare \r as line breaks too
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    seen: set[str] = set()
    entries: list[RawEntry] = []
    warnings: list[str] = []

    for match in DEFINE_PATTERN.finditer(text):
        name = match.group(1)
        if name in seen:
            message = f"Duplicate #define {name} found; keeping first occurrence"
            logger.debug(message)
            warnings.append(message)
            continue
        seen.add(name)
        entries.append(RawEntry(source_name=name))

    logger.debug(f"Scanned {len(entries)} distinct #define names")
    return ScanResult(entries=entries, warnings=warnings)

"""Header comment extraction and conversion to/from metadata records.

A header comment is the structured comment block at the very start of a
WordPress plugin (PHP) or theme (CSS) file, e.g.::

    <?php
    /**
    * Plugin Name: My Plugin
    * Version: 1.0.0
    */

or::

    /*!
    Theme Name: My Theme
    Version: 1.0.0
    */
"""

import re
from typing import Optional

from .exceptions import HeaderNotFoundError
from .logger import get_logger
from .models import HeaderComment, HeaderDialect, MetadataRecord

logger = get_logger()

PHP_OPEN_TAG = "<?php"

HEADER_PATTERNS = {
    HeaderDialect.PHP: re.compile(r"<\?php\n/\*\*\n(\*.*\n)*\*/"),
    HeaderDialect.BLOCK: re.compile(r"/\*!?\n(.*\n)*?\*/"),
}

STRUCTURAL_LINES = {"<?php", "/**", "*/", "*", "/*!"}
ANNOTATION_PREFIX = "* @"
KEY_VALUE_SEPARATOR = ": "

_PHP_LINE_PREFIX = re.compile(r"^\s*\*\s?")


def detect_dialect(content: str) -> HeaderDialect:
    """Select the header dialect from the first bytes of the content."""
    return HeaderDialect.PHP if content.startswith(PHP_OPEN_TAG) else HeaderDialect.BLOCK


def extract_header(content: str, source: Optional[str] = None) -> HeaderComment:
    """Extract the header comment located at offset 0 of the content.

    The dialect is sniffed once via the ``<?php`` prefix. There is no
    fallback to the other dialect if the selected pattern does not match.

    Args:
        content: Normalized (LF-only) file content.
        source: Name of the file, used in error messages.

    Returns:
        HeaderComment with the exact matched text and its span.

    Raises:
        HeaderNotFoundError: If the content is empty or does not start
            with a well-formed header comment.
    """
    if not content:
        raise HeaderNotFoundError(f"File content is empty or invalid: {source or '<unknown>'}")

    dialect = detect_dialect(content)
    match = HEADER_PATTERNS[dialect].match(content)

    if match is None:
        raise HeaderNotFoundError(
            f"Header comment not found or malformed in {source or '<unknown>'}. Check the header format."
        )

    logger.debug(f"Extracted {dialect.value} header ({match.end()} chars) from {source}")
    return HeaderComment(text=match.group(0), dialect=dialect, start=match.start(), end=match.end())


def to_kebab_case(key: str) -> str:
    """Normalize a header key: lowercase, spaces replaced by underscores.

    Example:
        >>> to_kebab_case("Plugin Name")
        'plugin_name'
    """
    return key.replace(" ", "_").lower()


def _is_structural(line: str) -> bool:
    stripped = line.strip()
    return stripped in STRUCTURAL_LINES or stripped.startswith(ANNOTATION_PREFIX) or stripped == ""


def decode_header(header: HeaderComment) -> MetadataRecord:
    """Convert a header comment into an ordered metadata record.

    Delimiter lines, blank lines and ``* @`` annotation lines are skipped.
    Every other line is split at the first ``": "``; lines with an empty
    key or value are ignored. Later duplicate keys overwrite earlier ones.

    Args:
        header: Extracted header comment.

    Returns:
        Mapping of normalized keys to values, in header line order.
    """
    record: MetadataRecord = {}

    for line in header.text.split("\n"):
        if _is_structural(line):
            continue

        if header.dialect is HeaderDialect.PHP:
            line = _PHP_LINE_PREFIX.sub("", line, count=1)

        key, sep, value = line.partition(KEY_VALUE_SEPARATOR)
        if not sep:
            continue

        key = key.strip()
        value = value.strip()
        if key and value:
            record[to_kebab_case(key)] = value

    return record


def encode_header(record: MetadataRecord, dialect: HeaderDialect) -> str:
    """Serialize a metadata record into a header comment.

    Args:
        record: Ordered key/value mapping.
        dialect: PHP emits a leading ``<?php`` line, BLOCK does not.

    Returns:
        Header comment text joined with LF.
    """
    lines = []
    if dialect is HeaderDialect.PHP:
        lines.append(PHP_OPEN_TAG)
    lines.append("/**")
    for key, value in record.items():
        lines.append(f"* {key}: {value}")
    lines.append("*/")
    return "\n".join(lines)


def splice_header(content: str, old: HeaderComment, new: HeaderComment) -> str:
    """Replace the exact span of ``old`` in ``content`` with ``new.text``.

    Raises:
        HeaderNotFoundError: If the span does not hold the old header text.
    """
    if content[old.start:old.end] != old.text:
        raise HeaderNotFoundError("Header span does not match the file content")
    return content[:old.start] + new.text + content[old.end:]

"""Text sanitization utilities for user-provided content.

Handles control characters, zero-width characters, encoding issues and
whitespace so titles, descriptions, comments, tags and usernames are stored
in a predictable form.
"""
import re
import unicodedata
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

ZERO_WIDTH_CHARS = (
    '\u200b',  # Zero width space
    '\u200c',  # Zero width non-joiner
    '\u200d',  # Zero width joiner
    '\ufeff',  # Zero width no-break space (BOM)
    '\u2060',  # Word joiner
)


def sanitize_text(
    text: str,
    max_length: Optional[int] = None,
    remove_control_chars: bool = True,
    normalize_unicode: bool = True,
    preserve_newlines: bool = True
) -> str:
    """
    Sanitize text input to handle special characters and encoding issues.

    Args:
        text: Input text to sanitize
        max_length: Optional maximum length (truncates if exceeded)
        remove_control_chars: Remove control characters (except newlines/tabs)
        normalize_unicode: Normalize unicode to NFC form
        preserve_newlines: Keep newline characters

    Returns:
        Sanitized text string

    Examples:
        >>> sanitize_text("Hello\\x00World")
        'HelloWorld'
        >>> sanitize_text("  many   spaces  ")
        'many spaces'
    """
    if not text or not isinstance(text, str):
        return ""

    # Re-encode to drop lone surrogates and similar encoding debris
    text = text.encode('utf-8', errors='ignore').decode('utf-8')

    if normalize_unicode:
        text = unicodedata.normalize('NFC', text)

    text = remove_zero_width_chars(text)

    if remove_control_chars:
        # Keep \n, \r, \t so the whitespace pass below can turn them into spaces
        text = ''.join(
            char for char in text
            if unicodedata.category(char)[0] != 'C' or char in '\n\r\t'
        )

    if preserve_newlines:
        text = text.replace('\r\n', '\n').replace('\r', '\n')
        lines = text.split('\n')
        text = '\n'.join(' '.join(line.split()) for line in lines)
        # Collapse runs of blank lines to a single paragraph break
        text = re.sub(r'\n{3,}', '\n\n', text)
    else:
        text = ' '.join(text.split())

    text = text.strip()

    if max_length and len(text) > max_length:
        original_length = len(text)
        text = text[:max_length].rstrip()
        logger.warning(f"Text truncated from {original_length} to {max_length} characters")

    return text


def remove_zero_width_chars(text: str) -> str:
    """
    Remove zero-width characters that can cause issues.

    Args:
        text: Input text

    Returns:
        Text without zero-width characters
    """
    for char in ZERO_WIDTH_CHARS:
        text = text.replace(char, '')
    return text


def clean_single_line(text: str, max_length: int = 200) -> str:
    """Sanitize text that must fit on one line (titles, usernames, tags)."""
    return sanitize_text(text, max_length=max_length, preserve_newlines=False)


def clean_multiline(text: str, max_length: int = 5000) -> str:
    """Sanitize free-form text (descriptions, comments)."""
    return sanitize_text(text, max_length=max_length, preserve_newlines=True)


def parse_tags(raw: Optional[str], max_tags: int = 30, max_tag_length: int = 50) -> List[str]:
    """
    Split a comma-separated tag string.

    Tags are trimmed, empty entries dropped and duplicates removed while
    keeping the first occurrence.

    Args:
        raw: Comma-separated input, e.g. "gaming, review, tech"
        max_tags: Maximum number of tags kept
        max_tag_length: Maximum length of a single tag

    Returns:
        List of tags in input order
    """
    if not raw:
        return []

    tags: List[str] = []
    seen = set()
    for part in raw.split(','):
        tag = clean_single_line(part, max_length=max_tag_length)
        if tag and tag.lower() not in seen:
            seen.add(tag.lower())
            tags.append(tag)
        if len(tags) >= max_tags:
            break
    return tags

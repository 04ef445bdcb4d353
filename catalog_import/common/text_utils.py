"""
Text Utilities

Helper functions for cleaning text exported by commerce platforms.
"""

import re

_BR_TAG = re.compile(r'<br\s*/?>', re.IGNORECASE)
_ANY_TAG = re.compile(r'<[^>]*>')

# Only the entities the supported exports actually emit
_ENTITIES = (
    ('&amp;', '&'),
    ('&lt;', '<'),
    ('&gt;', '>'),
    ('&nbsp;', ' '),
    ('&quot;', '"'),
    ('&#39;', "'"),
)


def strip_html(html: str) -> str:
    """
    Convert an exported HTML description to plain text.

    Line breaks become newlines, every other tag is removed and the
    common named entities are decoded. This is not a full HTML parser.

    Args:
        html: HTML fragment (e.g. Shopify "Body (HTML)")

    Returns:
        Trimmed plain text
    """
    if not html:
        return ''

    text = _BR_TAG.sub('\n', html)
    text = _ANY_TAG.sub('', text)
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)

    return text.strip()


def split_list(value: str, pattern: str = ',') -> list:
    """
    Split a delimited cell into trimmed, non-empty parts.

    Args:
        value: Raw cell value
        pattern: Regex of separator characters

    Returns:
        List of parts in their original order
    """
    if not value:
        return []
    return [part.strip() for part in re.split(pattern, value) if part.strip()]

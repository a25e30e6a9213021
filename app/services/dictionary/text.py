"""Canonicalization of text fragments pulled out of HTML."""

import re
import unicodedata
from typing import Any

_ENTITIES = (
    (re.compile(r"&nbsp;", re.IGNORECASE), " "),
    (re.compile(r"&amp;", re.IGNORECASE), "&"),
    (re.compile(r"&lt;", re.IGNORECASE), "<"),
    (re.compile(r"&gt;", re.IGNORECASE), ">"),
    (re.compile(r"&#39;", re.IGNORECASE), "'"),
    (re.compile(r"&quot;", re.IGNORECASE), '"'),
)
_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")
_ZERO_WIDTH_RE = re.compile("[\u200b-\u200d\ufeff]")


def strip_tags(markup: str) -> str:
    """Remove anything that looks like a tag, leaving the text between them."""
    return _TAG_RE.sub("", markup)


def _normalize_once(text: str) -> str:
    for pattern, replacement in _ENTITIES:
        text = pattern.sub(replacement, text)
    text = strip_tags(text)
    text = _WHITESPACE_RE.sub(" ", text)
    text = _ZERO_WIDTH_RE.sub("", text)
    text = unicodedata.normalize("NFKC", text)
    return text.strip()


def clean_text(value: Any) -> str:
    """Normalize a raw text fragment.

    Decodes a small set of HTML entities, strips tags, collapses whitespace,
    drops zero-width characters, applies NFKC and trims. Non-string input
    yields an empty string.

    The steps are repeated until the text stops changing, since one step can
    expose work for an earlier one (``&amp;nbsp;`` decodes to ``&nbsp;``,
    NFKC turns fullwidth ``＆`` into ``&``). This keeps
    ``clean_text(clean_text(x)) == clean_text(x)``.
    """
    if not isinstance(value, str):
        return ""

    previous = None
    text = value
    while text != previous:
        previous = text
        text = _normalize_once(text)
    return text

"""Parser for verb inflection tables on Simple English Wiktionary pages."""

import re

from bs4 import BeautifulSoup, Tag

from app.services.dictionary.base import VerbForm
from app.services.dictionary.text import clean_text, strip_tags

# html.parser serializes line breaks as <br/>, hand-written pages use <br>
_LINE_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)


def _fragment_text(markup: str) -> str:
    """Text of an HTML fragment, falling back to plain tag stripping."""
    text = clean_text(BeautifulSoup(markup, "html.parser").get_text())
    return text or clean_text(strip_tags(markup))


def _split_lines(paragraphs: list[Tag]) -> list[str]:
    text = "".join(p.get_text() for p in paragraphs).strip()
    return [line.strip() for line in text.split("\n") if line.strip()]


def _split_markup(paragraph: Tag) -> tuple[str, str] | None:
    halves = _LINE_BREAK_RE.split(paragraph.decode_contents(), maxsplit=1)
    if len(halves) < 2:
        return None
    return _fragment_text(halves[0]), _fragment_text(halves[1])


def parse_cell(cell: Tag) -> tuple[str, str] | None:
    """
    Read a (type, text) pair such as ("past tense", "ran") from one table cell.

    Two layouts are recognized: a paragraph whose text holds both values on
    separate lines, and a paragraph where they are separated by a <br> tag.
    Returns None when the cell matches neither.
    """
    if not cell.get_text().strip():
        return None

    paragraphs = cell.find_all("p")
    if not paragraphs:
        return None

    lines = _split_lines(paragraphs)
    if len(lines) >= 2:
        pair = (lines[0], lines[1])
    else:
        split = _split_markup(paragraphs[0])
        if split is None:
            return None
        pair = split

    if not pair[0] or not pair[1]:
        return None
    return pair


def parse_inflection_table(html: str) -> list[VerbForm]:
    """Extract verb forms from every cell of the page's inflection table."""
    soup = BeautifulSoup(html, "html.parser")
    forms: list[VerbForm] = []
    for cell in soup.select(".inflection-table tr td"):
        pair = parse_cell(cell)
        if pair is None:
            continue
        form_type, text = pair
        forms.append(VerbForm(id=len(forms), type=form_type, text=text))
    return forms

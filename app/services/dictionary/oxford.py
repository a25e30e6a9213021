"""Parser for Oxford Learner's Dictionaries entry pages."""

import logging
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from app.services.dictionary.base import (
    Definition,
    DictionaryRecord,
    Example,
    Pronunciation,
    WordNotFoundError,
)
from app.services.dictionary.text import clean_text

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_ID = "oxford"

# Examples live either directly under the sense's example list or in
# grouped "x-g" containers; on most pages both selectors hit the same nodes.
EXAMPLE_SELECTORS = (".examples .x", ".x-g .x")


def _first_text(node: Tag, selector: str) -> str:
    element = node.select_one(selector)
    return clean_text(element.get_text()) if element is not None else ""


def _all_text(node: Tag, selector: str) -> str:
    return clean_text("".join(el.get_text() for el in node.select(selector)))


def _audio_url(block: Tag, site_origin: str) -> str:
    """Resolve the audio file for a phonetics block, or "" if there is none."""
    source = block.select_one("audio source[src]")
    src = source.get("src") if source is not None else None
    if not src:
        # Newer page layout: a play button carrying the mp3 location
        button = block.select_one("[data-src-mp3]")
        src = button.get("data-src-mp3") if button is not None else None
    if not src or not isinstance(src, str):
        return ""
    return urljoin(site_origin + "/", src)


def extract_parts_of_speech(soup: BeautifulSoup) -> list[str]:
    """Every part-of-speech label on the page, unique, in first-seen order."""
    seen: dict[str, None] = {}
    for element in soup.select(".pos"):
        label = clean_text(element.get_text())
        if label:
            seen.setdefault(label, None)
    return list(seen)


def extract_pronunciations(soup: BeautifulSoup, site_origin: str) -> list[Pronunciation]:
    pronunciations: list[Pronunciation] = []
    for header in soup.select(".pos-header"):
        section_pos = _first_text(header, ".pos")
        for block in header.select(".phonetics"):
            transcription = _all_text(block, ".phon")
            if not transcription:
                continue
            pronunciations.append(
                Pronunciation(
                    part_of_speech=section_pos,
                    region=_all_text(block, ".geo"),
                    audio_url=_audio_url(block, site_origin),
                    transcription=transcription,
                )
            )
    return pronunciations


def _source_id(entry: Tag | None) -> str:
    """Entry-level source: data-src attribute, then the webtop id, then "oxford"."""
    if entry is None:
        return DEFAULT_SOURCE_ID
    data_src = entry.get("data-src")
    if data_src:
        return str(data_src)
    webtop = entry.select_one(".webtop")
    if webtop is not None and webtop.get("id"):
        return str(webtop.get("id"))
    return DEFAULT_SOURCE_ID


def extract_examples(sense: Tag) -> list[Example]:
    """Collect examples from both container shapes, dropping exact duplicates."""
    texts: list[str] = []
    for selector in EXAMPLE_SELECTORS:
        for element in sense.select(selector):
            text = clean_text(element.get_text())
            if text and text not in texts:
                texts.append(text)
    return [Example(id=i, text=text) for i, text in enumerate(texts)]


def extract_definitions(soup: BeautifulSoup) -> list[Definition]:
    definitions: list[Definition] = []
    for sense in soup.select(".sense"):
        text = _first_text(sense, ".def")
        if not text:
            continue

        entry = sense.find_parent(class_="entry")
        definitions.append(
            Definition(
                id=len(definitions),
                part_of_speech=_first_text(entry, ".pos") if entry is not None else "",
                source_id=_source_id(entry),
                text=text,
                examples=tuple(extract_examples(sense)),
            )
        )
    return definitions


def parse_dictionary_page(html: str, site_origin: str) -> DictionaryRecord:
    """
    Parse an entry page into a DictionaryRecord.

    Args:
        html: Page markup
        site_origin: Scheme and host used to resolve relative audio links

    Returns:
        DictionaryRecord with no verb forms; those come from the inflection page

    Raises:
        WordNotFoundError: if the page has no headword
    """
    soup = BeautifulSoup(html, "html.parser")

    word = _first_text(soup, ".headword")
    if not word:
        raise WordNotFoundError()

    record = DictionaryRecord(
        word=word,
        parts_of_speech=tuple(extract_parts_of_speech(soup)),
        pronunciations=tuple(extract_pronunciations(soup, site_origin)),
        definitions=tuple(extract_definitions(soup)),
    )
    logger.debug(
        f"Parsed '{word}': {len(record.definitions)} definitions, "
        f"{len(record.pronunciations)} pronunciations"
    )
    return record

import html
import re

from bs4 import BeautifulSoup


_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Drop CR/LF, collapse whitespace runs to one space and trim"""
    text = text.replace("\r", " ").replace("\n", " ")
    return _WHITESPACE_RE.sub(" ", text).strip()


def clean_fragment_text(fragment: str) -> str:
    """Inner text of an HTML fragment: tags removed, entities decoded, whitespace normalized"""
    soup = BeautifulSoup(fragment, "html.parser")
    return normalize_whitespace(soup.get_text(" ", strip=True))


def clean_attribute(value: str) -> str:
    """Attribute value as the browser sees it: entities decoded, surrounding space trimmed"""
    return html.unescape(value).strip()

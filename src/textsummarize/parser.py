from __future__ import annotations
from bs4 import BeautifulSoup
from bs4.builder import builder_registry

_HIDDEN_TAGS = ("script", "style", "noscript", "template")


def _soup(html: str) -> BeautifulSoup:
    if builder_registry.lookup("lxml") is not None:
        return BeautifulSoup(html, "lxml")
    return BeautifulSoup(html, "html.parser")


def text_from_html(html: str) -> str:
    """Visible text of an HTML document, block elements separated by spaces."""
    soup = _soup(html)
    for el in soup.find_all(_HIDDEN_TAGS):
        el.decompose()
    return soup.get_text(" ", strip=True).strip()


def is_html_path(name: str) -> bool:
    return name.lower().endswith((".html", ".htm"))

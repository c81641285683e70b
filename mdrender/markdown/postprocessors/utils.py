"""Shared BeautifulSoup tree for postprocessors that run back to back."""

from __future__ import annotations

from bs4 import BeautifulSoup

_SHARED_SOUP_KEY = "__shared_soup"
_SHARED_SOURCE_KEY = "__shared_soup_source"


def get_shared_soup(html: str, context: dict) -> BeautifulSoup:
    """Return the cached soup for ``html``, parsing it only when the HTML changed.

    The parsed tree lives in the rendering context next to the HTML it was
    built from; a postprocessor that hands back different HTML invalidates it.
    """
    soup = context.get(_SHARED_SOUP_KEY)
    if soup is None or context.get(_SHARED_SOURCE_KEY) != html:
        soup = BeautifulSoup(html, "html.parser")
        context[_SHARED_SOUP_KEY] = soup
        context[_SHARED_SOURCE_KEY] = html
    return soup


def soup_to_html(context: dict, soup: BeautifulSoup | None = None) -> str:
    """Serialise the soup and record the result as the cached source."""
    if soup is None:
        soup = context.get(_SHARED_SOUP_KEY)
    html = str(soup) if soup is not None else ""
    context[_SHARED_SOUP_KEY] = soup
    context[_SHARED_SOURCE_KEY] = html
    return html


def clear_shared_soup(context: dict) -> None:
    """Drop the cached soup so the context can be reused for another document."""
    context.pop(_SHARED_SOUP_KEY, None)
    context.pop(_SHARED_SOURCE_KEY, None)

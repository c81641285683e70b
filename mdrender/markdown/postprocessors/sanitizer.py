# mdrender/markdown/postprocessors/sanitizer.py

import logging
from functools import lru_cache

import bleach

logger = logging.getLogger(__name__)

_COMMON_ATTRIBUTES = {"class", "id", "title"}
_COMMON_ATTRIBUTE_PREFIXES = ("data-", "aria-")

# Extra properties fenced blocks may carry ({startFrom=10}); html5lib lowercases names
_CODE_BLOCK_ATTRIBUTES = {"startfrom"}


def _allow_common_attribute(tag, name, value):
    """Allow class/id/title and any data-* or aria-* attribute."""
    return name in _COMMON_ATTRIBUTES or name.startswith(_COMMON_ATTRIBUTE_PREFIXES)


def _allow_code_block_attribute(tag, name, value):
    """Fenced block attributes ({#id .cls key=value}) land on pre, code and div."""
    return _allow_common_attribute(tag, name, value) or name in _CODE_BLOCK_ATTRIBUTES


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            "section",
            "mark",
            "del",
            "sup",
            "sub",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "hr",
            "dl",
            "dt",
            "dd",
            # code blocks and their diagram renderings
            "pre",
            "code",
            "kbd",
            "samp",
            "img",
            "figure",
            "figcaption",
            # tables
            "table",
            "thead",
            "tbody",
            "tr",
            "th",
            "td",
            # task lists
            "input",
            # math (MathJax)
            "math",
            "mrow",
            "mi",
            "mo",
            "mn",
            "msup",
            "msub",
            "mfrac",
            "msqrt",
        }
    )

    allowed_attrs = {
        "*": _allow_common_attribute,
        "a": ["href", "title", "rel", "target"],
        "img": ["src", "alt", "title", "width", "height", "loading"],
        "pre": _allow_code_block_attribute,
        "code": _allow_code_block_attribute,
        "div": _allow_code_block_attribute,
        "th": ["colspan", "rowspan", "scope"],
        "td": ["colspan", "rowspan"],
        "input": ["type", "checked", "disabled"],
        "ol": ["start", "type", "class"],
        "math": ["xmlns", "display", "alttext"],
    }

    allowed_protocols = ["http", "https", "mailto"]

    return allowed_tags, allowed_attrs, allowed_protocols


def sanitize_html(html, context):
    """
    Sanitize HTML output using bleach.
    This is the FIRST post-processor and should run before any other HTML modifications.
    """
    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()

    try:
        return bleach.clean(
            html,
            tags=allowed_tags,
            attributes=allowed_attrs,
            protocols=allowed_protocols,
            strip=False,  # Escape disallowed tags instead of dropping their text
        )
    except Exception as e:
        logger.error(f"Bleach sanitization failed: {e}", exc_info=True)
        # On failure, return original HTML - you may want different behavior
        return html

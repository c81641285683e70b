# mdrender/markdown/codeblocks/parser.py
"""
Fenced code block parser.

Recognises CommonMark-style fences in markdown lines:

    ```python {#example .numbered startFrom="10"}
    print("hello")
    ```

- Fences are 3+ backticks or tildes, indented by at most 3 spaces
- The closing fence uses the same character and is at least as long
- An unclosed fence runs to the end of the document
- The info string's first word becomes ``CodeBlock.info`` and adds the
  ``{info_prefix}{info}`` class
- A trailing ``{...}`` attribute block sets id, classes and properties
- Pandoc raw blocks (```{=html}) are left alone
- Lines may end in "\r" (CRLF input); it is not part of the block text

Only top-level fences are seen. Fences inside blockquotes ("> ```") or
list items indented 4+ spaces are left to Pandoc, which renders them as
plain <pre><code> regardless of their info string.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .models import DEFAULT_INFO_PREFIX, CodeBlock, HtmlAttributes

logger = logging.getLogger(__name__)

_OPENING_FENCE_RE = re.compile(r"^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
_CLOSING_FENCE_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})[ \t\r]*$")

# Tokens inside an attribute block: #id, .class, key=value, key="value", key
_ATTRIBUTE_TOKEN_RE = re.compile(
    r"""
    \#(?P<id>[^\s{}]+)
    | \.(?P<cls>[^\s{}]+)
    | (?P<key>[A-Za-z_:][\w:.-]*)
      (?:=(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\s"'{}]+)))?
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class FencedBlockMatch:
    """A fenced block found in a list of lines; ``end`` is exclusive."""

    start: int
    end: int
    block: CodeBlock


def parse_attributes(text: str) -> HtmlAttributes:
    """
    Parse the inside of an attribute block.

    Example:
        >>> parse_attributes('#intro .wide title="A title"')
        HtmlAttributes(id='intro', classes=('wide',), properties=(('title', 'A title'),))
    """
    element_id = None
    classes: List[str] = []
    properties: List[Tuple[str, Optional[str]]] = []

    for match in _ATTRIBUTE_TOKEN_RE.finditer(text):
        if match.group("id"):
            element_id = match.group("id")
        elif match.group("cls"):
            if match.group("cls") not in classes:
                classes.append(match.group("cls"))
        else:
            value = next(
                (v for v in (match.group("dq"), match.group("sq"), match.group("bare")) if v is not None),
                None,
            )
            properties.append((match.group("key"), value))

    return HtmlAttributes(id=element_id, classes=tuple(classes), properties=tuple(properties))


def _split_info(raw_info: str) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """Split an info string into (info, arguments, attribute text)."""
    raw_info = raw_info.strip()
    attribute_text = None

    if raw_info.endswith("}") and "{" in raw_info:
        brace = raw_info.rfind("{")
        attribute_text = raw_info[brace + 1:-1].strip()
        raw_info = raw_info[:brace].strip()

    if not raw_info:
        return None, None, attribute_text

    parts = raw_info.split(None, 1)
    arguments = parts[1] if len(parts) > 1 else None
    return parts[0], arguments, attribute_text


def _strip_indent(line: str, indent: int) -> str:
    removed = 0
    while removed < indent and removed < len(line) and line[removed] == " ":
        removed += 1
    return line[removed:]


def parse_fenced_blocks(
    lines: Sequence[str], info_prefix: str = DEFAULT_INFO_PREFIX
) -> Iterator[FencedBlockMatch]:
    """
    Yield every fenced code block in ``lines`` in document order.

    Args:
        lines: Markdown source split into lines (without line endings)
        info_prefix: Prefix for the language class built from the info string

    Yields:
        FencedBlockMatch for each block
    """
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    index = 0
    total = len(lines)

    while index < total:
        opening = _OPENING_FENCE_RE.match(lines[index])
        if not opening:
            index += 1
            continue

        fence = opening.group("fence")
        raw_info = opening.group("info")

        # Backtick fences may not carry backticks in their info string
        if fence[0] == "`" and "`" in raw_info:
            index += 1
            continue

        info, arguments, attribute_text = _split_info(raw_info)

        # Pandoc raw blocks pass through to the converter untouched
        if attribute_text is not None and attribute_text.startswith("="):
            index = _skip_block(lines, index, fence)
            continue

        indent = len(opening.group("indent"))
        body: List[str] = []
        end = index + 1
        closed = False
        while end < total:
            if _closes(lines[end], fence):
                closed = True
                end += 1
                break
            body.append(_strip_indent(lines[end], indent))
            end += 1

        if not closed:
            logger.warning(f"Unclosed code fence starting at line {index + 1}; closing at end of document")

        attributes = parse_attributes(attribute_text) if attribute_text else HtmlAttributes()
        if info:
            attributes = attributes.with_class_first(f"{info_prefix}{info}")

        yield FencedBlockMatch(
            start=index,
            end=end,
            block=CodeBlock(
                lines=tuple(body),
                info=info,
                arguments=arguments,
                attributes=attributes,
                info_prefix=info_prefix,
            ),
        )
        index = end


def _closes(line: str, fence: str) -> bool:
    closing = _CLOSING_FENCE_RE.match(line)
    return bool(closing) and closing.group("fence")[0] == fence[0] and len(closing.group("fence")) >= len(fence)


def _skip_block(lines: Sequence[str], index: int, fence: str) -> int:
    """Return the index just past the block opened at ``index``."""
    for end in range(index + 1, len(lines)):
        if _closes(lines[end], fence):
            return end + 1
    return len(lines)

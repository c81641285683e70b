# mdrender/markdown/codeblocks/models.py
"""
Value objects shared by the fenced block parser and the code block renderer.

Everything here is immutable: a parsed block is handed to the renderer as-is
and a single ``CodeBlockConfig`` is shared by every render call.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Tuple

# Prefix the fenced block parser puts in front of the info string to build
# the language class (```python -> class="language-python").
DEFAULT_INFO_PREFIX = "language-"


class BlockKind(Enum):
    """Rendering strategy selected for a code block."""

    DIAGRAM = "diagram"
    DIV = "div"
    DEFAULT = "default"


@dataclass(frozen=True)
class HtmlAttributes:
    """HTML attributes attached to a block: id, classes and other properties."""

    id: Optional[str] = None
    classes: Tuple[str, ...] = ()
    properties: Tuple[Tuple[str, Optional[str]], ...] = ()

    def __bool__(self) -> bool:
        return bool(self.id or self.classes or self.properties)

    def with_class_first(self, cls: str) -> "HtmlAttributes":
        """Return a copy with ``cls`` prepended to the classes (if not already present)."""
        if cls in self.classes:
            return self
        return HtmlAttributes(
            id=self.id,
            classes=(cls,) + self.classes,
            properties=self.properties,
        )


@dataclass(frozen=True)
class CodeBlock:
    """
    A fenced or indented code block as seen by the renderer.

    ``info`` is the first word of the fence info string (None for indented
    blocks or bare fences). ``info_prefix`` is the prefix the parser used for
    the language class; None means the parser did not say.
    """

    lines: Tuple[str, ...] = ()
    info: Optional[str] = None
    arguments: Optional[str] = None
    attributes: HtmlAttributes = field(default_factory=HtmlAttributes)
    info_prefix: Optional[str] = None

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def _normalize_div_infos(infos: Iterable[str]) -> FrozenSet[str]:
    return frozenset(info.lower() for info in infos if info)


@dataclass(frozen=True)
class CodeBlockConfig:
    """
    Setup-time configuration of the code block renderer.

    Args:
        plantuml_server_url: Base URL of the PlantUML server. Empty disables
            diagram rendering.
        blocks_as_div: Info strings rendered as <div> containers (matched
            case-insensitively).
        output_attributes_on_pre: Put block attributes on <pre> instead of <code>.
        info_prefix: Prefix used by the fenced block parser for language classes.
    """

    plantuml_server_url: str = ""
    blocks_as_div: FrozenSet[str] = frozenset()
    output_attributes_on_pre: bool = False
    info_prefix: str = DEFAULT_INFO_PREFIX

    def __post_init__(self):
        object.__setattr__(self, "blocks_as_div", _normalize_div_infos(self.blocks_as_div))

    @property
    def plantuml_enabled(self) -> bool:
        return bool(self.plantuml_server_url)

    def renders_as_div(self, info: Optional[str]) -> bool:
        return bool(info) and info.lower() in self.blocks_as_div

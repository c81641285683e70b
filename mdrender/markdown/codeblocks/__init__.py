# mdrender/markdown/codeblocks/__init__.py

from .models import DEFAULT_INFO_PREFIX, BlockKind, CodeBlock, CodeBlockConfig, HtmlAttributes
from .parser import FencedBlockMatch, parse_attributes, parse_fenced_blocks
from .plantuml import DIAGRAM_LANGUAGE, encode_diagram, plantuml_image_url
from .renderer import CodeBlockRenderer
from .writer import HtmlWriter, escape_html

__all__ = (
    "DEFAULT_INFO_PREFIX",
    "DIAGRAM_LANGUAGE",
    "BlockKind",
    "CodeBlock",
    "CodeBlockConfig",
    "CodeBlockRenderer",
    "FencedBlockMatch",
    "HtmlAttributes",
    "HtmlWriter",
    "encode_diagram",
    "escape_html",
    "parse_attributes",
    "parse_fenced_blocks",
    "plantuml_image_url",
)

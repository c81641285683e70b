# mdrender/markdown/codeblocks/renderer.py
"""
HTML renderer for fenced and indented code blocks.

Each block is rendered one of three ways, first match wins:

1. ``plantuml`` blocks (exact, case-sensitive info match) become an image
   served by the configured PlantUML server:

       <img src="{server}/png/{encoded}>">

   The ``>`` inside the quoted src is kept as-is; existing pages and caches
   depend on these URLs. Without a server URL the block falls through.

2. Blocks whose info is listed in ``blocks_as_div`` (case-insensitive), e.g.
   mermaid, become a container for client-side rendering:

       <div class="mermaid">graph TD; A --> B</div>

   The info prefix is removed from language classes (language-mermaid -> mermaid).

3. Everything else is rendered as ``<pre><code>``, with the block attributes
   on ``<code>`` or on ``<pre>`` depending on ``output_attributes_on_pre``.
"""

import logging
from typing import Callable, Dict, Optional

from .models import DEFAULT_INFO_PREFIX, BlockKind, CodeBlock, CodeBlockConfig
from .plantuml import DIAGRAM_LANGUAGE, plantuml_image_url
from .writer import HtmlWriter

logger = logging.getLogger(__name__)


class CodeBlockRenderer:
    """Render ``CodeBlock`` objects into an ``HtmlWriter``."""

    def __init__(self, config: Optional[CodeBlockConfig] = None):
        self.config = config or CodeBlockConfig()
        self._handlers: Dict[BlockKind, Callable[[HtmlWriter, CodeBlock], None]] = {
            BlockKind.DIAGRAM: self._write_diagram,
            BlockKind.DIV: self._write_div,
            BlockKind.DEFAULT: self._write_default,
        }

    def classify(self, block: CodeBlock) -> BlockKind:
        """Pick the rendering strategy for ``block``."""
        if block.info and block.info == DIAGRAM_LANGUAGE and self.config.plantuml_enabled:
            return BlockKind.DIAGRAM
        if self.config.renders_as_div(block.info):
            return BlockKind.DIV
        return BlockKind.DEFAULT

    def write(self, writer: HtmlWriter, block: CodeBlock) -> BlockKind:
        """
        Render ``block`` into ``writer``.

        Returns:
            The strategy that was used
        """
        writer.ensure_line()

        kind = self.classify(block)
        logger.debug(f"Rendering code block (info={block.info!r}) as {kind.value}")
        self._handlers[kind](writer, block)
        return kind

    def render(self, block: CodeBlock, enable_html: bool = True) -> str:
        """Render a single block to a string."""
        writer = HtmlWriter(enable_html_for_block=enable_html)
        self.write(writer, block)
        return writer.getvalue()

    def _write_diagram(self, writer: HtmlWriter, block: CodeBlock) -> None:
        url = plantuml_image_url(self.config.plantuml_server_url, block.text)
        writer.write_line(f'<img src="{url}>">')

    def _write_div(self, writer: HtmlWriter, block: CodeBlock) -> None:
        info_prefix = block.info_prefix if block.info_prefix is not None else DEFAULT_INFO_PREFIX

        def strip_prefix(cls: str) -> str:
            if info_prefix and cls.startswith(info_prefix):
                return cls[len(info_prefix):]
            return cls

        if writer.enable_html_for_block:
            writer.write("<div").write_attributes(block.attributes, strip_prefix).write(">")

        writer.write_leaf_raw_lines(block.lines, True, True, True)

        if writer.enable_html_for_block:
            writer.write_line("</div>")

    def _write_default(self, writer: HtmlWriter, block: CodeBlock) -> None:
        on_pre = self.config.output_attributes_on_pre

        if writer.enable_html_for_block:
            writer.write("<pre")
            if on_pre:
                writer.write_attributes(block.attributes)
            writer.write("><code")
            if not on_pre:
                writer.write_attributes(block.attributes)
            writer.write(">")

        writer.write_leaf_raw_lines(block.lines, True, True)

        if writer.enable_html_for_block:
            writer.write_line("</code></pre>")

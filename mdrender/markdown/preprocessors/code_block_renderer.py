"""
Preprocessor that renders fenced code blocks before Pandoc sees them.

Converts:
    ```plantuml                 ```{=html}
    Bob -> Alice         →      <img src="{server}/png/{encoded}>">
    ```                         ```

    ```mermaid                  ```{=html}
    graph TD; A --> B    →      <div class="mermaid">graph TD; A --> B
    ```                         </div>
                                ```

Other fenced blocks become <pre><code> markup the same way. Pandoc's
raw_attribute extension copies the rendered HTML to the output unchanged.
"""

import re
from typing import List

from ..codeblocks import CodeBlockRenderer, parse_fenced_blocks
from ..config import get_code_block_config

_LEADING_BACKTICKS_RE = re.compile(r"^ {0,3}(`{3,})", re.MULTILINE)


def _raw_html_block(html: str) -> List[str]:
    """Wrap rendered HTML in a Pandoc raw block fenced longer than any fence inside it."""
    longest = max((len(m.group(1)) for m in _LEADING_BACKTICKS_RE.finditer(html)), default=0)
    fence = "`" * max(3, longest + 1)
    return ["", f"{fence}{{=html}}", html.rstrip("\n"), fence, ""]


def render_code_blocks(text: str, context: dict) -> str:
    """
    Replace fenced code blocks with pre-rendered HTML.

    Args:
        text: Raw markdown text
        context: Processor context. Optional keys:
            - 'code_block_config': CodeBlockConfig overriding Django settings
            - 'enable_html': False renders block text without tags

    Returns:
        Markdown with code blocks replaced by raw HTML blocks
    """
    config = context.get("code_block_config") or get_code_block_config()
    renderer = CodeBlockRenderer(config)
    enable_html = context.get("enable_html", True)

    # Browser form submissions arrive with CRLF line endings
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    output: List[str] = []
    cursor = 0

    for match in parse_fenced_blocks(lines, info_prefix=config.info_prefix):
        output.extend(lines[cursor:match.start])
        html = renderer.render(match.block, enable_html=enable_html)
        output.extend(_raw_html_block(html))
        cursor = match.end

    if cursor == 0:
        return text

    output.extend(lines[cursor:])
    return "\n".join(output)


def code_block_renderer_default(text: str, context: dict) -> str:
    """
    Default configuration for code_block_renderer.

    Register this in PREPROCESSORS.
    """
    return render_code_blocks(text, context)

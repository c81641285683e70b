# mdrender/markdown/postprocessors/code_block_marker.py
"""
Postprocessor that marks rendered code blocks with a "block" class.

Code blocks leave the pipeline in one of three shapes:
- <pre><code>...</code></pre> for ordinary code
- <img src="{PLANTUML_SERVER_URL}/png/..."> for PlantUML diagrams
- <div class="mermaid">...</div> for blocks listed in MARKDOWN_BLOCKS_AS_DIV

Each gets the block class so the stylesheet can space them like the other
discrete blocks in a post. Diagram images also get ``plantuml`` and a
default alt text. Rendering an abstract (``is_abstract``) skips marking.
"""

from typing import List, Optional

from bs4 import Tag

from ..codeblocks import CodeBlockConfig
from ..config import get_code_block_config
from .utils import get_shared_soup, soup_to_html


def _add_classes(element: Tag, classes: List[str]) -> None:
    existing = element.get("class", [])
    if isinstance(existing, str):
        existing = existing.split()
    element["class"] = list(dict.fromkeys(list(existing) + classes))


def code_block_marker(
    html: str,
    context: dict,
    block_class: Optional[List[str]] = None,
    config: Optional[CodeBlockConfig] = None,
) -> str:
    """
    Add a class to rendered code blocks.

    Args:
        html: HTML string to process
        context: Context dictionary (checks 'is_abstract' and 'code_block_config')
        block_class: CSS classes to add (default: ["block"])
        config: Code block configuration (default: from context or settings)

    Returns:
        Processed HTML with code blocks marked
    """
    if context.get("is_abstract", False):
        return html

    block_class = block_class or ["block"]
    config = config or context.get("code_block_config") or get_code_block_config()

    soup = get_shared_soup(html, context)

    for pre in soup.find_all("pre"):
        if pre.find_parent("pre"):
            continue
        _add_classes(pre, block_class)

    if config.plantuml_enabled:
        diagram_prefix = f"{config.plantuml_server_url}/png/"
        for img in soup.find_all("img", src=True):
            if not img["src"].startswith(diagram_prefix):
                continue
            _add_classes(img, ["plantuml"] + block_class)
            if not img.get("alt"):
                img["alt"] = "PlantUML diagram"

    if config.blocks_as_div:
        for div in soup.find_all("div", class_=True):
            classes = div.get("class", [])
            if any(cls.lower() in config.blocks_as_div for cls in classes):
                _add_classes(div, block_class)

    return soup_to_html(context, soup)


def code_block_marker_default(html: str, context: dict) -> str:
    """
    Default configuration for code_block_marker.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return code_block_marker(html, context, block_class=["block"])

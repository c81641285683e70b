# mdrender/markdown/renderer.py

import logging

import pypandoc

from .config import get_pandoc_config
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)


def render_markdown(text, context=None):
    """
    Main rendering function with pre/post processing pipeline using pypandoc

    Args:
        text: Raw markdown text
        context: Optional dict for processors that need additional data
    """
    context = context or {}

    # Pre-processing: fenced code blocks are rendered to raw HTML here
    text = apply_preprocessors(text, context)

    # Markdown conversion using pypandoc
    pandoc_config = get_pandoc_config()

    try:
        html = pypandoc.convert_text(
            text,
            to="html5",
            format="markdown",
            extra_args=pandoc_config["extra_args"],
            filters=pandoc_config.get("filters", []),
        )
    except (RuntimeError, OSError) as e:
        logger.error(f"Pandoc conversion failed: {e}", exc_info=True)
        raise

    # Post-processing: After markdown conversion
    html = apply_postprocessors(html, context)

    return html

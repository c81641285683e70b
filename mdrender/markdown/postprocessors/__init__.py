# mdrender/markdown/postprocessors/__init__.py

from .code_block_marker import code_block_marker_default
from .sanitizer import sanitize_html
from .utils import clear_shared_soup

POSTPROCESSORS = [
    sanitize_html,
    code_block_marker_default,  # Mark rendered code blocks, diagrams and div containers
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    try:
        for processor in POSTPROCESSORS:
            html = processor(html, context)
    finally:
        clear_shared_soup(context)
    return html

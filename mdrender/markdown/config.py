from collections.abc import Iterable

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .codeblocks.models import DEFAULT_INFO_PREFIX, CodeBlockConfig

DEFAULT_BLOCKS_AS_DIV = ("mermaid",)


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Fenced code blocks never reach Pandoc as code: the code block preprocessor
    has already rendered them and handed them over as ```{=html} raw blocks,
    which the raw_attribute extension passes through verbatim.
    """
    return {
        "extra_args": [
            # Enable Pandoc markdown extensions (all in --from argument)
            "--from=markdown+autolink_bare_uris+strikeout+superscript+subscript+task_lists+smart+pipe_tables+definition_lists+footnotes+fenced_code_blocks+fenced_code_attributes+raw_attribute+raw_html+header_attributes+tex_math_dollars",
            # Math rendering with MathJax
            "--mathjax",
        ],
        # Pandoc filters can be added here (Python or Lua filters)
        "filters": [],
    }


def get_code_block_config():
    """
    Build the code block renderer configuration from Django settings.

    Settings:
        PLANTUML_SERVER_URL: PlantUML server base URL ("" disables diagrams)
        MARKDOWN_BLOCKS_AS_DIV: Info strings rendered as <div> containers
        MARKDOWN_CODE_ATTRIBUTES_ON_PRE: Put block attributes on <pre>
        MARKDOWN_CODE_INFO_PREFIX: Language class prefix for fenced blocks

    Raises:
        ImproperlyConfigured: If a setting has the wrong type
    """
    server_url = getattr(settings, "PLANTUML_SERVER_URL", "") or ""
    if not isinstance(server_url, str):
        raise ImproperlyConfigured(
            f"PLANTUML_SERVER_URL must be a string, got {type(server_url).__name__}"
        )

    blocks_as_div = getattr(settings, "MARKDOWN_BLOCKS_AS_DIV", DEFAULT_BLOCKS_AS_DIV)
    if isinstance(blocks_as_div, str) or not isinstance(blocks_as_div, Iterable):
        raise ImproperlyConfigured("MARKDOWN_BLOCKS_AS_DIV must be a list of info strings")
    if not all(isinstance(info, str) for info in blocks_as_div):
        raise ImproperlyConfigured("MARKDOWN_BLOCKS_AS_DIV entries must be strings")

    info_prefix = getattr(settings, "MARKDOWN_CODE_INFO_PREFIX", DEFAULT_INFO_PREFIX)
    if not isinstance(info_prefix, str):
        raise ImproperlyConfigured("MARKDOWN_CODE_INFO_PREFIX must be a string")

    return CodeBlockConfig(
        plantuml_server_url=server_url,
        blocks_as_div=frozenset(blocks_as_div),
        output_attributes_on_pre=bool(getattr(settings, "MARKDOWN_CODE_ATTRIBUTES_ON_PRE", False)),
        info_prefix=info_prefix,
    )

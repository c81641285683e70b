"""Shared test fixtures for mdrender."""

import shutil

import django
import pytest
from django.conf import settings

from mdrender.markdown.codeblocks import CodeBlock, CodeBlockConfig, CodeBlockRenderer, HtmlAttributes

if not settings.configured:
    settings.configure(
        INSTALLED_APPS=["mdrender"],
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "APP_DIRS": True,
            }
        ],
        PLANTUML_SERVER_URL="",
        MARKDOWN_BLOCKS_AS_DIV=["mermaid"],
    )
    django.setup()


def _pandoc_available():
    if shutil.which("pandoc"):
        return True
    try:
        import pypandoc

        pypandoc.get_pandoc_version()
    except OSError:
        return False
    return True


requires_pandoc = pytest.mark.skipif(not _pandoc_available(), reason="pandoc binary not installed")


@pytest.fixture
def plantuml_config():
    return CodeBlockConfig(
        plantuml_server_url="http://plantuml.example",
        blocks_as_div=frozenset({"mermaid", "plantuml"}),
    )


@pytest.fixture
def renderer(plantuml_config):
    return CodeBlockRenderer(plantuml_config)


@pytest.fixture
def mermaid_block():
    return CodeBlock(
        lines=("graph TD", "  A --> B"),
        info="mermaid",
        attributes=HtmlAttributes(classes=("language-mermaid",)),
        info_prefix="language-",
    )

"""Tests for the markdown template tags and filters."""

from django.template import Context, Template
from django.test import override_settings

from mdrender.markdown.codeblocks import encode_diagram
from mdrender.templatetags.markdown_tags import plantuml_url_filter

from .conftest import requires_pandoc


def _render(source, **context):
    return Template("{% load markdown_tags %}" + source).render(Context(context))


class TestPlantumlUrlFilter:
    @override_settings(PLANTUML_SERVER_URL="http://plantuml.example")
    def test_builds_url(self):
        result = _render("{{ src|plantuml_url }}", src="Bob->Alice")
        assert result == f"http://plantuml.example/png/{encode_diagram('Bob->Alice')}"

    @override_settings(PLANTUML_SERVER_URL="")
    def test_empty_without_server(self):
        assert _render("{{ src|plantuml_url }}", src="Bob->Alice") == ""

    @override_settings(PLANTUML_SERVER_URL="http://plantuml.example")
    def test_none_value(self):
        assert plantuml_url_filter(None) == ""


@requires_pandoc
class TestMarkdownFilter:
    @override_settings(PLANTUML_SERVER_URL="http://plantuml.example")
    def test_renders_diagram(self):
        result = _render("{{ body|markdown }}", body="```plantuml\nBob->Alice\n```")
        assert 'src="http://plantuml.example/png/' in result

    def test_abstract_has_no_block_class(self):
        result = _render("{{ body|markdown_abstract }}", body="```\nx\n```")
        assert "<pre>" in result
        assert "block" not in result

    def test_with_context_tag(self):
        result = _render("{% markdown_with_context body %}", body="```python\nx = 1\n```")
        assert 'class="language-python"' in result

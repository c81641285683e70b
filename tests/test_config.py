"""Tests for settings-driven configuration."""

import pytest
from django.apps import apps
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from mdrender.apps import MdrenderConfig
from mdrender.markdown.codeblocks import DEFAULT_INFO_PREFIX, CodeBlockConfig
from mdrender.markdown.config import DEFAULT_BLOCKS_AS_DIV, get_code_block_config, get_pandoc_config


class TestCodeBlockConfig:
    def test_defaults(self):
        config = CodeBlockConfig()
        assert config.plantuml_server_url == ""
        assert config.plantuml_enabled is False
        assert config.blocks_as_div == frozenset()
        assert config.output_attributes_on_pre is False
        assert config.info_prefix == DEFAULT_INFO_PREFIX == "language-"

    def test_div_infos_normalized(self):
        config = CodeBlockConfig(blocks_as_div=["Mermaid", "GRAPHVIZ", ""])
        assert config.blocks_as_div == frozenset({"mermaid", "graphviz"})
        assert config.renders_as_div("mermaid")
        assert config.renders_as_div("Graphviz")
        assert not config.renders_as_div(None)
        assert not config.renders_as_div("")

    def test_frozen(self):
        config = CodeBlockConfig()
        with pytest.raises(AttributeError):
            config.plantuml_server_url = "http://x"


class TestGetCodeBlockConfig:
    @override_settings(
        PLANTUML_SERVER_URL="http://plantuml.example",
        MARKDOWN_BLOCKS_AS_DIV=["mermaid", "Nomnoml"],
        MARKDOWN_CODE_ATTRIBUTES_ON_PRE=True,
        MARKDOWN_CODE_INFO_PREFIX="lang-",
    )
    def test_reads_settings(self):
        config = get_code_block_config()
        assert config.plantuml_server_url == "http://plantuml.example"
        assert config.plantuml_enabled is True
        assert config.blocks_as_div == frozenset({"mermaid", "nomnoml"})
        assert config.output_attributes_on_pre is True
        assert config.info_prefix == "lang-"

    def test_missing_settings_use_defaults(self):
        with override_settings():
            from django.conf import settings

            del settings.PLANTUML_SERVER_URL
            del settings.MARKDOWN_BLOCKS_AS_DIV
            config = get_code_block_config()
        assert config.plantuml_server_url == ""
        assert config.blocks_as_div == frozenset(DEFAULT_BLOCKS_AS_DIV)
        assert config.info_prefix == "language-"

    @override_settings(PLANTUML_SERVER_URL=None)
    def test_none_url_disables_diagrams(self):
        assert get_code_block_config().plantuml_enabled is False

    @override_settings(PLANTUML_SERVER_URL=8080)
    def test_non_string_url_rejected(self):
        with pytest.raises(ImproperlyConfigured):
            get_code_block_config()

    @override_settings(MARKDOWN_BLOCKS_AS_DIV="mermaid")
    def test_string_div_set_rejected(self):
        with pytest.raises(ImproperlyConfigured):
            get_code_block_config()

    @override_settings(MARKDOWN_BLOCKS_AS_DIV=["mermaid", 3])
    def test_non_string_div_entry_rejected(self):
        with pytest.raises(ImproperlyConfigured):
            get_code_block_config()

    @override_settings(MARKDOWN_CODE_INFO_PREFIX=None)
    def test_non_string_prefix_rejected(self):
        with pytest.raises(ImproperlyConfigured):
            get_code_block_config()


class TestPandocConfig:
    def test_raw_blocks_enabled(self):
        from_arg = get_pandoc_config()["extra_args"][0]
        assert from_arg.startswith("--from=markdown")
        assert "+raw_attribute" in from_arg
        assert "+fenced_code_blocks" in from_arg


class TestAppConfig:
    def test_app_config_class(self):
        assert isinstance(apps.get_app_config("mdrender"), MdrenderConfig)

    @override_settings(PLANTUML_SERVER_URL=["not", "a", "url"])
    def test_ready_rejects_bad_settings(self):
        with pytest.raises(ImproperlyConfigured):
            apps.get_app_config("mdrender").ready()

    @override_settings(PLANTUML_SERVER_URL="http://plantuml.example")
    def test_ready_logs_server(self, caplog):
        with caplog.at_level("INFO", logger="mdrender.apps"):
            apps.get_app_config("mdrender").ready()
        assert "http://plantuml.example" in caplog.text

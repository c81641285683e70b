import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class MdrenderConfig(AppConfig):
    name = 'mdrender'

    def ready(self):
        """Validate code block settings when the app loads."""
        from mdrender.markdown.config import get_code_block_config

        config = get_code_block_config()  # Raises ImproperlyConfigured on bad settings
        if config.plantuml_enabled:
            logger.info(f"PlantUML diagrams rendered via {config.plantuml_server_url}")
        else:
            logger.info("PLANTUML_SERVER_URL not set - plantuml blocks render as code")

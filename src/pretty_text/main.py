import logging
import sys

from pretty_text.config import settings
from pretty_text.registry import DisplayNameRegistry, get_registry

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def bootstrap() -> DisplayNameRegistry:
    """Set up logging and return the process-wide display name registry."""
    configure_logging()
    registry = get_registry()
    logger.info(
        "pretty_text ready (preload=%s, level=%s)",
        settings.preload_display_names,
        settings.log_level,
    )
    return registry

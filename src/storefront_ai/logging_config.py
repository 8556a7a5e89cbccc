import sys

from loguru import logger

from storefront_ai import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default sink with a single stderr sink.

    Streamlit re-executes the script on every interaction, so repeated calls
    are no-ops after the first one.
    """
    global _configured
    if _configured:
        return
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=(level or settings.LOG_LEVEL).upper())
    _configured = True

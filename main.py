"""Content Repurposer - HTTP server entry point."""
import logging
import sys

import uvicorn

from agent.errors import MissingCredentialError
from agent.llm import get_llm_client
from config import settings
from web.app import create_app

logging.basicConfig(
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    level=settings.log_level.upper(),
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


def _check_llm_credentials() -> None:
    """Fail fast when the configured provider cannot be built."""
    try:
        get_llm_client()
    except (MissingCredentialError, ValueError) as e:
        logger.error("%s", e)
        sys.exit(1)
    logger.info("LLM provider: %s", settings.llm_provider.lower())


def main() -> None:
    _check_llm_credentials()

    app = create_app()
    logger.info("Listening on %s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

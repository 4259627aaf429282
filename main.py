"""
LunaBot Chat API - entrypoint.

Loads settings, refuses to start without an OpenAI API key and serves the
application with uvicorn.
"""
import logging
import sys

import uvicorn

from chat_proxy.app import create_app
from chat_proxy.config import get_settings, setup_logging
from chat_proxy.errors import ConfigurationError


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)

    try:
        app = create_app(settings)
    except ConfigurationError as e:
        logging.error(str(e))
        sys.exit(1)

    logging.info(f"LunaBot AI backend ({settings.openai_model}) listening on port {settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        proxy_headers=settings.trust_proxy_headers,
        forwarded_allow_ips=settings.forwarded_allow_ips,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

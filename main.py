"""Main entry point for the Argo subscription server.

Usage:
    python main.py
"""

import logging
import sys

from config.settings import load_settings
from subscription.app import start_subscription_server


def setup_logging():
    """Configure logging for the application."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def main():
    """Load settings once and serve until interrupted."""
    setup_logging()
    logger = logging.getLogger(__name__)

    settings = load_settings()
    logger.info(
        f"Argo subscription server starting (sub_path=/{settings.sub_path}, "
        f"argo_port={settings.argo_port})"
    )

    try:
        start_subscription_server(settings)
    except KeyboardInterrupt:
        logger.info("Server stopped by user (Ctrl+C)")
        sys.exit(0)


if __name__ == '__main__':
    main()

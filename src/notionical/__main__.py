"""Entry point for running notionical as a module.

Usage: python -m notionical [path/to/.env]
"""

import logging
import sys

import uvicorn

from notionical.app import create_app
from notionical.config.settings import load_settings
from notionical.exceptions.errors import ConfigurationError


def main():
    """Main entry point for the feed server."""
    env_file = sys.argv[1] if len(sys.argv) > 1 else None
    try:
        settings = load_settings(env_file)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    # Configure logging
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

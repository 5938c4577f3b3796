#!/usr/bin/env python3
"""Send one sample record per common level through the Discord handler.

Usage::

    # Webhook URL from config/settings.yaml
    python scripts/send_test_notification.py

    # Explicit URL and custom config file
    python scripts/send_test_notification.py --config my.yaml --webhook-url https://...
"""

from __future__ import annotations

import argparse
import logging
import sys

import structlog
from pydantic import SecretStr

from loghook.core.config import load_settings
from loghook.core.logging import setup_logging
from loghook.hook.factory import create_hook, install_handler

logger = structlog.get_logger(__name__)

_SAMPLE_FIELDS = {"String": "hi", "Integer": 2, "Boolean": False}


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--config", default=None, help="Path to settings YAML")
    parser.add_argument("--log-level", default="DEBUG", help="Root log level")
    parser.add_argument("--webhook-url", default=None, help="Override discord.webhook_url")
    args = parser.parse_args()

    settings = load_settings(args.config)
    setup_logging(level=args.log_level)

    config = settings.discord
    if args.webhook_url:
        config = config.model_copy(update={"webhook_url": SecretStr(args.webhook_url)})

    try:
        hook = create_hook(config)
    except ValueError as exc:
        logger.error("hook_not_configured", error=str(exc))
        return 1

    handler = install_handler(hook)
    sample = logging.getLogger("sample")
    try:
        for level in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR):
            sample.log(level, "Check this out! Awesome, right?", extra=_SAMPLE_FIELDS)
    finally:
        logging.getLogger().removeHandler(handler)
        handler.close()

    logger.info("test_notifications_sent", min_level=config.min_level.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())

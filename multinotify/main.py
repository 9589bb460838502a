"""multinotify entry point — runs the demonstration sequence."""

from __future__ import annotations

import logging
from typing import TextIO

from multinotify.config import settings
from multinotify.notifications import (
    EmailChannel,
    MultiNotifier,
    Notifier,
    PushChannel,
    SMSChannel,
    WhatsappChannel,
)

logger = logging.getLogger(__name__)


def notify(notifier: Notifier, message: str) -> None:
    """High-level send. Knows nothing about which channel it is talking to."""
    notifier.send(message)


def run_demo(out: TextIO | None = None) -> None:
    """Send the fixed demo messages, writing to ``out`` (stdout if None)."""
    notify(
        MultiNotifier(
            [EmailChannel(out), SMSChannel(out)],
            fail_fast=settings.fanout_fail_fast,
        ),
        "Account created!",
    )
    notify(EmailChannel(out), "New offer")
    notify(PushChannel(out), "Order placed")
    notify(WhatsappChannel(out), "Welcome to our app")


def main() -> None:
    """Configure logging and run the demo."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level,
    )
    logger.info("Running notification demo")
    run_demo()


if __name__ == "__main__":
    main()

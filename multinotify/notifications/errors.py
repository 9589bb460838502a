"""Delivery failures raised by notifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from multinotify.notifications.channels import Notifier


class DeliveryError(Exception):
    """A notifier could not deliver a message."""

    def __init__(self, channel: str, message: str) -> None:
        super().__init__(message)
        self.channel = channel


class FanOutError(DeliveryError):
    """One or more members of a MultiNotifier failed.

    ``failures`` holds ``(notifier, exception)`` pairs in dispatch order.
    """

    def __init__(self, failures: list[tuple[Notifier, Exception]], total: int) -> None:
        super().__init__("Multi", f"{len(failures)} of {total} notifiers failed")
        self.failures = failures

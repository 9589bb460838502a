"""Notifier protocol and the console-backed base for leaf channels."""

from __future__ import annotations

import logging
import sys
from typing import Protocol, TextIO, runtime_checkable

from multinotify.notifications.errors import DeliveryError

logger = logging.getLogger(__name__)


@runtime_checkable
class Notifier(Protocol):
    """Protocol that every channel and every composite must satisfy."""

    def send(self, message: str) -> None:
        """Deliver a plain text message. Raises DeliveryError on failure."""
        ...


class ConsoleChannel:
    """Writes one ``"<Label> Notification: <message>"`` line per send.

    Subclasses only set ``LABEL``; the base itself has none and can't be
    instantiated. When no sink is passed, whatever ``sys.stdout`` is at send
    time is used.
    """

    LABEL = ""

    def __init__(self, out: TextIO | None = None) -> None:
        if not self.LABEL:
            msg = f"{type(self).__name__} must set a non-empty LABEL"
            raise TypeError(msg)
        self._out = out

    @property
    def label(self) -> str:
        return self.LABEL

    @property
    def name(self) -> str:
        return self.LABEL.lower()

    def format(self, message: str) -> str:
        return f"{self.label} Notification: {message}"

    def send(self, message: str) -> None:
        """Write the channel-tagged line to the sink."""
        out = self._out if self._out is not None else sys.stdout
        try:
            out.write(self.format(message) + "\n")
        except (OSError, ValueError) as exc:
            msg = f"{self.label} channel could not write to its sink"
            raise DeliveryError(self.label, msg) from exc
        logger.debug("%s notification sent (%d chars)", self.name, len(message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

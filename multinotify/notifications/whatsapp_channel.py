"""Whatsapp implementation of the Notifier protocol.

Added without touching any other channel or the composite.
"""

from multinotify.notifications.channels import ConsoleChannel


class WhatsappChannel(ConsoleChannel):
    """Sends notifications via Whatsapp (rendered to the console)."""

    LABEL = "Whatsapp"

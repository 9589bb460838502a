"""SMS implementation of the Notifier protocol."""

from multinotify.notifications.channels import ConsoleChannel


class SMSChannel(ConsoleChannel):
    """Sends notifications via SMS (rendered to the console)."""

    LABEL = "SMS"

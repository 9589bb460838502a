"""Email implementation of the Notifier protocol."""

from multinotify.notifications.channels import ConsoleChannel


class EmailChannel(ConsoleChannel):
    """Sends notifications as email (rendered to the console)."""

    LABEL = "Email"

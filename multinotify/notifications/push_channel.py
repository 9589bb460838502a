"""Push implementation of the Notifier protocol."""

from multinotify.notifications.channels import ConsoleChannel


class PushChannel(ConsoleChannel):
    LABEL = "Push"

"""Notification channel abstraction layer."""

from multinotify.notifications.channels import ConsoleChannel, Notifier
from multinotify.notifications.email_channel import EmailChannel
from multinotify.notifications.errors import DeliveryError, FanOutError
from multinotify.notifications.multi import MultiNotifier
from multinotify.notifications.push_channel import PushChannel
from multinotify.notifications.sms_channel import SMSChannel
from multinotify.notifications.whatsapp_channel import WhatsappChannel

__all__ = [
    "ConsoleChannel",
    "DeliveryError",
    "EmailChannel",
    "FanOutError",
    "MultiNotifier",
    "Notifier",
    "PushChannel",
    "SMSChannel",
    "WhatsappChannel",
]

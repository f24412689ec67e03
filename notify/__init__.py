from .notifier import NotificationError, NotificationSink, Notifier
from .telegram import TelegramSink

__all__ = [
    "NotificationError",
    "NotificationSink",
    "Notifier",
    "TelegramSink",
]

from django.contrib import messages

from apps.common import get_logger
from .engine import INFO, SUCCESS, Notice

logger = get_logger(__name__).bind(component="carts", layer="notifier")

MESSAGE_LEVELS = {
    SUCCESS: messages.SUCCESS,
    INFO: messages.INFO,
}


class LogNotifier:
    def __init__(self, log=None):
        self.log = log or logger

    def notify(self, notice: Notice) -> None:
        self.log.info(notice.message, level=notice.level)


class MessagesNotifier:
    """Queue cart notices as django.contrib.messages for the next rendered page."""

    def __init__(self, request):
        self.request = request

    def notify(self, notice: Notice) -> None:
        level = MESSAGE_LEVELS.get(notice.level, messages.INFO)
        messages.add_message(self.request, level, notice.message, fail_silently=True)


class CollectingNotifier:
    """Keeps every notice in memory; handy for API responses and tests."""

    def __init__(self):
        self.notices = []

    def notify(self, notice: Notice) -> None:
        self.notices.append(notice)

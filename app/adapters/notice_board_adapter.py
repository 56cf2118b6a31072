"""
NotifierPort implementations: an in-memory board polled by the admin UI,
and a console printer used by the CLI.
"""

from collections import deque

from app.domain.enums import NoticeLevel
from app.domain.models import Notice
from app.ports.notifier_port import NotifierPort


class NoticeBoardAdapter(NotifierPort):
    """Keeps the most recent notices until a client drains them."""

    def __init__(self, max_notices: int = 50) -> None:
        self._notices: deque[Notice] = deque(maxlen=max_notices)

    def notify(self, notice: Notice) -> None:
        self._notices.append(notice)

    def drain(self) -> list[Notice]:
        pending = list(self._notices)
        self._notices.clear()
        return pending


class ConsoleNotifierAdapter(NotifierPort):
    """Prints notices straight to stdout."""

    _PREFIX = {
        NoticeLevel.SUCCESS: "OK",
        NoticeLevel.ERROR: "FAIL",
        NoticeLevel.VALIDATION: "!!",
    }

    def notify(self, notice: Notice) -> None:
        print(f"  {self._PREFIX[notice.level]} - {notice.message}")

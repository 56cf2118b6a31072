"""
Abstract interface for surfacing acknowledgments to the user.
"""

from abc import ABC, abstractmethod

from app.domain.models import Notice


class NotifierPort(ABC):
    """Port for showing success / failure / validation notices."""

    @abstractmethod
    def notify(self, notice: Notice) -> None:
        ...

    def drain(self) -> list[Notice]:
        """Return and forget pending notices (adapters that buffer override this)."""
        return []

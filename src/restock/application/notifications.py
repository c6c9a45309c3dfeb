"""The single user-facing notification channel of the workflow."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

SUCCESS = "success"
ERROR = "error"


@dataclass(frozen=True)
class Notification:
    level: str
    message: str


class Notifier(ABC):

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Deliver a notification to the user."""

    def success(self, message: str) -> None:
        self.notify(Notification(SUCCESS, message))

    def error(self, message: str) -> None:
        self.notify(Notification(ERROR, message))

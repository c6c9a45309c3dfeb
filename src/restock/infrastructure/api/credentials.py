"""Stored session credential and the signed-in user it belongs to."""

from __future__ import annotations

import base64
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Credential:
    token: str
    user: str | None = None
    role: str | None = None


def basic_token(email: str, password: str) -> str:
    """Encode ``email:password`` for HTTP Basic authentication."""
    return base64.b64encode(f"{email}:{password}".encode("utf-8")).decode("ascii")


class CredentialStore(ABC):

    @abstractmethod
    def get(self) -> Credential | None:
        """Return the stored credential, or None when signed out."""

    @abstractmethod
    def set(self, credential: Credential) -> None:
        """Replace the stored credential."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored credential."""


class InMemoryCredentialStore(CredentialStore):

    def __init__(self, credential: Credential | None = None) -> None:
        self._credential = credential

    def get(self) -> Credential | None:
        return self._credential

    def set(self, credential: Credential) -> None:
        self._credential = credential

    def clear(self) -> None:
        self._credential = None

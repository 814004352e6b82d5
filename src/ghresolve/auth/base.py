"""Auth resolver interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TokenResolver(ABC):
    @abstractmethod
    def resolve(self) -> str | None:
        """Resolve an authentication token, or None when none is available."""

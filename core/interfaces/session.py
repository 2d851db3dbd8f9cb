"""
Session storage interface - where the logged-in player id survives a reload.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ISessionStorage(ABC):
    """Durable key/value store for the session identifier"""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        pass

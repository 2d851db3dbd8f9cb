from core.interfaces.repositories import (
    IPlayerRepository,
    IEventRepository,
    IEventResponseRepository,
    IUtensilRepository,
)
from core.interfaces.session import ISessionStorage

__all__ = [
    # Repositories
    "IPlayerRepository",
    "IEventRepository",
    "IEventResponseRepository",
    "IUtensilRepository",
    # Session
    "ISessionStorage",
]

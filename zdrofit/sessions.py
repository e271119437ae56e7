import threading
import time
from abc import ABC, abstractmethod
from typing import Optional


class SessionStore(ABC):
    """Holds the portal's authentication token per host."""

    @abstractmethod
    def get(self, host: str) -> Optional[str]:
        raise NotImplementedError()

    @abstractmethod
    def set(self, host: str, token: str, expires_at: Optional[float] = None) -> None:
        raise NotImplementedError()


class InMemorySessionStore(SessionStore):
    def __init__(self):
        self._lock = threading.Lock()
        self._tokens: dict[str, tuple[str, Optional[float]]] = {}

    def get(self, host: str) -> Optional[str]:
        with self._lock:
            entry = self._tokens.get(host)
            if entry is None:
                return None
            token, expires_at = entry
            if expires_at is not None and expires_at <= time.time():
                del self._tokens[host]
                return None
            return token

    def set(self, host: str, token: str, expires_at: Optional[float] = None) -> None:
        with self._lock:
            self._tokens[host] = (token, expires_at)

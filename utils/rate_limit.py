"""
Модуль: `utils/rate_limit.py`.
Назначение: Ограничение частоты запросов к API по IP клиента (скользящее окно в памяти).
"""

import time
from collections import deque
from threading import Lock

from flask import request


class InMemoryRateLimiter:
    """Простой in-memory rate limiter (sliding window) с отдельными корзинами на ключ."""

    def __init__(self, window_seconds: int = 600, clock=time.monotonic):
        self.window_seconds = window_seconds
        self._clock = clock
        self._events: dict[str, deque] = {}
        self._last_sweep = clock()
        self._lock = Lock()

    def _drop_stale_keys(self, cutoff: float) -> None:
        """Удаляет ключи, у которых все события вышли за окно."""
        stale = [key for key, events in self._events.items() if not events or events[-1] <= cutoff]
        for key in stale:
            del self._events[key]

    def is_allowed(self, key: str, limit: int) -> bool:
        if limit <= 0 or self.window_seconds <= 0:
            return False

        now = self._clock()
        cutoff = now - self.window_seconds

        with self._lock:
            # Полный обход не чаще одного раза за окно
            if now - self._last_sweep >= self.window_seconds:
                self._drop_stale_keys(cutoff)
                self._last_sweep = now

            events = self._events.setdefault(key, deque())
            while events and events[0] <= cutoff:
                events.popleft()

            if len(events) >= limit:
                return False

            events.append(now)
            return True


def get_client_identifier() -> str:
    """Возвращает IP клиента с учетом X-Forwarded-For."""
    forwarded_for = request.headers.get("X-Forwarded-For", "")
    first_ip = forwarded_for.split(",", 1)[0].strip()
    return first_ip or request.remote_addr or "unknown"

"""
Внутрипроцессная публикация событий.

Слушатели подписываются на конкретный тип события; publish() вызывает их
по порядку подписки. Корутинные слушатели ожидаются (await), обычные
функции вызываются напрямую. Исключение слушателя пробрасывается вызывающему.
"""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, DefaultDict, List, Type, Union

logger = logging.getLogger("events.publisher")

Listener = Callable[[Any], Union[None, Awaitable[None]]]


class EventPublisher:
    """Реестр слушателей + синхронная (в рамках запроса) доставка событий."""

    def __init__(self) -> None:
        self._listeners: DefaultDict[Type[Any], List[Listener]] = defaultdict(list)

    def subscribe(self, event_type: Type[Any], listener: Listener) -> None:
        """Подписать listener на события ровно этого типа."""
        self._listeners[event_type].append(listener)
        logger.debug(
            "subscribed %s to %s",
            getattr(listener, "__name__", repr(listener)),
            event_type.__name__,
        )

    def listeners_for(self, event_type: Type[Any]) -> List[Listener]:
        return list(self._listeners.get(event_type, []))

    async def publish(self, event: Any) -> int:
        """
        Доставить событие всем подписчикам его типа.

        :return: количество вызванных слушателей.
        """
        listeners = self.listeners_for(type(event))
        if not listeners:
            logger.debug("no listeners for %s", type(event).__name__)
            return 0

        for listener in listeners:
            result = listener(event)
            if inspect.isawaitable(result):
                await result
        return len(listeners)

"""A shared pool through which entities raise events for the field scene."""

from __future__ import annotations

import logging
from typing import ClassVar

from remedy.data import FieldEvent

logger = logging.getLogger(__name__)


class FieldEventHandler:
    """Collects raised field events until the scene handles and clears them."""

    _event_pool: ClassVar[list[FieldEvent]] = []

    @classmethod
    def raise_event(cls, event: FieldEvent) -> None:
        cls._event_pool.append(event)

    @classmethod
    def get(cls) -> list[FieldEvent]:
        """Return the live event pool."""
        return cls._event_pool

    @classmethod
    def clear(cls) -> None:
        logger.info("Clearing leftover events from memory.")
        cls._event_pool.clear()
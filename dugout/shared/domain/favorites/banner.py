"""Confirmation banner helpers: message text and the auto-dismiss timer."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from dugout.shared.core.configuration import BannerConfig

from .store import FavoriteAction

logger = logging.getLogger(__name__)


def confirmation_message(action: FavoriteAction, config: Optional[BannerConfig] = None) -> str:
    """Text shown after a favorite was added or removed."""
    config = config or BannerConfig()
    if action == FavoriteAction.ADDED:
        return config.added_message
    return config.removed_message


class DismissTimer:
    """One-shot delayed callback on the running event loop.

    Scheduling again replaces the pending run. The callback runs on the loop
    thread, the same one that applies user intents.
    """

    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self._callback = callback
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self) -> None:
        """Arm the timer, cancelling any run that has not fired yet.

        Raises:
            RuntimeError: when called outside a running event loop
        """
        loop = asyncio.get_running_loop()
        self.cancel()
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        try:
            self._callback()
        except Exception:
            logger.exception("Banner dismiss callback failed")

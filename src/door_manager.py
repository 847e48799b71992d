import asyncio
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional
from src import config
from src.api.exceptions import InvalidRequest
from src.logger import logger


@dataclass
class DoorState:
    is_open: bool = False
    opened_at: Optional[float] = None
    pending_auto_close: Optional[asyncio.TimerHandle] = None


class DoorManager:
    """
    Holds the simulated door state and its auto-close timer.

    Opening the door schedules a callback on the running event loop that
    closes it again after `open_duration` seconds. Every call to
    set_status() cancels the pending callback before touching the state,
    so at most one auto-close is ever alive.
    """

    def __init__(
        self,
        open_duration: float = config.DOOR_OPEN_DURATION,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.open_duration = open_duration
        self._clock = clock
        self._state = DoorState()
        self._lock = asyncio.Lock()

    @property
    def state(self) -> DoorState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    def remaining_time(self) -> Optional[int]:
        """
        Whole seconds left before auto-close, or None while closed.

        Half seconds round up, and the result never drops below zero.
        """
        state = self._state
        if not state.is_open or state.opened_at is None:
            return None
        remaining = self.open_duration - (self._clock() - state.opened_at)
        return max(0, math.floor(remaining + 0.5))

    def get_status(self) -> dict:
        status = {"isOpen": self._state.is_open}
        remaining = self.remaining_time()
        if remaining is not None:
            status["remainingTime"] = remaining
        logger.debug(f"Door status: {status}")
        return status

    async def set_status(self, is_open: bool) -> dict:
        if not isinstance(is_open, bool):
            raise InvalidRequest()

        async with self._lock:
            self._cancel_auto_close()
            state = self._state

            if is_open:
                if not state.is_open:
                    logger.info(f"Door status set to: Open (for {self.open_duration}s)")
                else:
                    logger.info(f"Door re-opened, countdown restarted ({self.open_duration}s)")
                state.is_open = True
                state.opened_at = self._clock()
                state.pending_auto_close = asyncio.get_running_loop().call_later(
                    self.open_duration, self._auto_close
                )
            else:
                if state.is_open:
                    logger.info("Door status set to: Closed")
                state.is_open = False
                state.opened_at = None

            return {"success": True, "isOpen": state.is_open}

    def shutdown(self):
        """Cancel the pending auto-close, if any. Called when the app stops."""
        if self._state.pending_auto_close is not None:
            logger.info("Cancelling pending auto-close on shutdown")
        self._cancel_auto_close()

    def _cancel_auto_close(self):
        handle = self._state.pending_auto_close
        if handle is not None:
            handle.cancel()
            self._state.pending_auto_close = None

    def _auto_close(self):
        logger.info("Auto-closing door after timeout.")
        self._state.is_open = False
        self._state.opened_at = None
        self._state.pending_auto_close = None

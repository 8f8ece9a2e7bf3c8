"""
Capture Service
===============

Drives photo acquisition for every active glasses session:
- short button press takes one photo
- long button press toggles continuous capture
- a per-session ticker takes photos automatically while continuous capture is on

Automatic captures are self-throttled with a lease: before a photo is
requested the next allowed capture time is pushed out by the fallback
window, and pulled back to "now" once the photo arrives. A capture that
hangs therefore blocks automatic captures for at most the fallback window
instead of piling up requests every tick.
"""
import asyncio
import logging
import time
from typing import Callable, Dict, Optional, Set

from ...core.config import get_settings
from ...domain.device_session import ButtonPress, DeviceSession, PressType
from ...infrastructure.cache.session_store import SessionStore
from ..use_cases.capture.cache_photo import CachePhotoUseCase

logger = logging.getLogger(__name__)

PHOTO_NOTICE_TEXT = "Button pressed, about to take photo"


class CaptureService:
    """Handles session lifecycle and button events from the device platform."""

    def __init__(
        self,
        session_store: SessionStore,
        cache_photo_use_case: CachePhotoUseCase,
        tick_seconds: Optional[float] = None,
        fallback_seconds: Optional[float] = None,
        text_wall_duration_ms: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        settings = get_settings()
        self.session_store = session_store
        self.cache_photo_use_case = cache_photo_use_case
        self.tick_seconds = tick_seconds if tick_seconds is not None else settings.capture_tick_seconds
        self.fallback_seconds = (
            fallback_seconds if fallback_seconds is not None else settings.capture_fallback_seconds
        )
        self.text_wall_duration_ms = (
            text_wall_duration_ms if text_wall_duration_ms is not None else settings.text_wall_duration_ms
        )
        self.clock = clock

        self._tickers: Dict[str, asyncio.Task] = {}
        # Strong references so in-flight ticks are not garbage collected
        self._inflight: Set[asyncio.Task] = set()

    async def on_session(self, session: DeviceSession, session_id: str, user_id: str) -> None:
        """Called when a user launches the app on their glasses."""
        logger.info(f"Session started for user {user_id}")

        state = self.session_store.state
        state.set_streaming(user_id, False)
        state.schedule_next(user_id, self.clock())

        previous = self._tickers.pop(session_id, None)
        if previous is not None:
            previous.cancel()
        self._tickers[session_id] = asyncio.create_task(
            self._run_ticker(session, user_id),
            name=f"auto-capture-{session_id}",
        )

    async def on_button_press(self, session: DeviceSession, user_id: str, press: ButtonPress) -> None:
        logger.info(f"Button pressed: {press.button_id}, type: {press.press_type.value}")

        if press.press_type == PressType.LONG:
            streaming = self.session_store.state.toggle_streaming(user_id)
            logger.info(f"Streaming photos for user {user_id} is now {streaming}")
            return

        session.show_text_wall(PHOTO_NOTICE_TEXT, self.text_wall_duration_ms)
        try:
            photo = await session.request_photo()
        except Exception as e:
            logger.error(f"Error taking photo: {e}")
            return

        logger.info(f"Photo taken for user {user_id}, timestamp: {photo.timestamp.isoformat()}")
        await self.cache_photo_use_case.execute(photo, user_id)

    async def auto_capture_tick(self, session: DeviceSession, user_id: str) -> bool:
        """
        Take one automatic photo if continuous capture is on and the lease allows it.

        Returns:
            True if a photo was requested (whether or not it arrived)
        """
        state = self.session_store.state
        if not state.is_streaming(user_id) or not state.due_now(user_id, self.clock()):
            return False

        # Fallback in case the capture below fails or never returns
        state.schedule_next(user_id, self.clock() + self.fallback_seconds)

        try:
            photo = await session.request_photo()
        except Exception as e:
            logger.error(f"Error auto-taking photo: {e}")
            return True

        # The session may have ended while the capture was outstanding
        if user_id in state:
            state.schedule_next(user_id, self.clock())
        await self.cache_photo_use_case.execute(photo, user_id)
        return True

    async def on_stop(self, session_id: str, user_id: str, reason: str) -> None:
        """Called when the user's session ends. In-flight face detection is left to finish."""
        ticker = self._tickers.pop(session_id, None)
        if ticker is not None:
            ticker.cancel()

        self.session_store.state.clear(user_id)
        self.session_store.cleanup_face_results()

        logger.info(f"Session stopped for user {user_id}, reason: {reason}")

    def active_sessions(self) -> Set[str]:
        return set(self._tickers.keys())

    async def shutdown(self) -> None:
        """
        Stop all capture work (application shutdown).

        Cancels every ticker, every in-flight automatic capture and every
        face detection still running, and waits for them to unwind so
        nothing uses the shared HTTP client after it is closed.
        """
        tickers = list(self._tickers.values())
        self._tickers.clear()
        ticks = list(self._inflight)
        detections = self.session_store.faces.pending_tasks()

        pending = tickers + ticks + detections
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        logger.info(
            f"Stopped {len(tickers)} capture ticker(s), {len(ticks)} in-flight capture(s) "
            f"and {len(detections)} face detection(s)"
        )

    async def _run_ticker(self, session: DeviceSession, user_id: str) -> None:
        while True:
            await asyncio.sleep(self.tick_seconds)
            # Ticks are not awaited: a slow capture must not delay the next check
            tick = asyncio.create_task(self.auto_capture_tick(session, user_id))
            self._inflight.add(tick)
            tick.add_done_callback(self._on_tick_done)

    def _on_tick_done(self, tick: asyncio.Task) -> None:
        self._inflight.discard(tick)
        if tick.cancelled():
            return
        error = tick.exception()
        if error is not None:
            logger.error(f"Automatic capture tick failed: {error}", exc_info=error)

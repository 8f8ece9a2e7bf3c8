"""Per-user capture flags: continuous-capture mode and next allowed capture time."""
import logging
from typing import Dict, Optional

from ...domain.models.session_flags import SessionFlags

logger = logging.getLogger(__name__)


class SessionStateStore:
    """
    In-memory store of SessionFlags keyed by user ID.

    Absent users read as streaming off and immediately due for capture.
    """

    def __init__(self) -> None:
        self._flags: Dict[str, SessionFlags] = {}

    def _flags_for(self, user_id: str) -> SessionFlags:
        if user_id not in self._flags:
            self._flags[user_id] = SessionFlags()
        return self._flags[user_id]

    def set_streaming(self, user_id: str, streaming: bool) -> None:
        self._flags_for(user_id).streaming = streaming

    def is_streaming(self, user_id: str) -> bool:
        flags = self._flags.get(user_id)
        return flags.streaming if flags else False

    def toggle_streaming(self, user_id: str) -> bool:
        """
        Flip continuous-capture mode for a user.

        Returns:
            The new streaming state
        """
        flags = self._flags_for(user_id)
        flags.streaming = not flags.streaming
        return flags.streaming

    def schedule_next(self, user_id: str, at: float) -> None:
        self._flags_for(user_id).next_capture_at = at

    def next_capture_at(self, user_id: str) -> Optional[float]:
        flags = self._flags.get(user_id)
        return flags.next_capture_at if flags else None

    def due_now(self, user_id: str, now: float) -> bool:
        """True once `now` is strictly past the scheduled time (unscheduled users are due)."""
        next_at = self.next_capture_at(user_id)
        return now > (next_at if next_at is not None else 0.0)

    def clear(self, user_id: str) -> None:
        """Forget a user's flags and schedule (session ended)."""
        if self._flags.pop(user_id, None) is not None:
            logger.debug(f"Cleared session flags for user {user_id}")

    def __len__(self) -> int:
        return len(self._flags)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._flags

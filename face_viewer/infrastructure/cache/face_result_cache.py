"""Face detection results keyed by capture request ID."""
import asyncio
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ...domain.models.detection import Detection

logger = logging.getLogger(__name__)


class FaceResultCache:
    """
    Write-once store of detection lists per capture request ID.

    An entry starts as a pending asyncio.Task (inference in flight) and
    becomes a resolved, immutable tuple of detections when the task finishes.
    get() returns None for "absent or still computing" and a list (possibly
    empty) once resolved. A task that failed or was cancelled resolves to an
    empty list.
    """

    def __init__(self) -> None:
        self._results: Dict[str, Tuple[Detection, ...]] = {}
        self._pending: Dict[str, asyncio.Task] = {}

    def track(self, request_id: str, task: asyncio.Task) -> None:
        """Register the in-flight detection task for a capture."""
        if request_id in self._results or request_id in self._pending:
            logger.warning(f"Face data for requestId {request_id} already tracked, ignoring new task")
            return
        self._pending[request_id] = task
        task.add_done_callback(lambda done: self._on_task_done(request_id, done))

    def put(self, request_id: str, detections: Iterable[Detection]) -> None:
        """Store a resolved detection list. Later writes for the same ID are ignored."""
        if request_id in self._results:
            logger.warning(f"Face data for requestId {request_id} already stored, ignoring new result")
            return
        self._results[request_id] = tuple(detections)
        self._pending.pop(request_id, None)

    def get(self, request_id: str) -> Optional[List[Detection]]:
        if request_id in self._results:
            return list(self._results[request_id])
        task = self._pending.get(request_id)
        if task is None or not task.done():
            return None
        # Done callbacks run on the next loop iteration; resolve eagerly.
        self.put(request_id, self._resolve(request_id, task))
        return list(self._results[request_id])

    def pending_task(self, request_id: str) -> Optional[asyncio.Task]:
        """The in-flight detection task for an ID, if its result is not stored yet."""
        if request_id in self._results:
            return None
        return self._pending.get(request_id)

    def pending_tasks(self) -> List[asyncio.Task]:
        """Tracked detection tasks that have not finished yet."""
        return [task for task in self._pending.values() if not task.done()]

    def request_ids(self) -> List[str]:
        return list(self._results.keys()) + [rid for rid in self._pending if rid not in self._results]

    def retain_only(self, request_ids: Iterable[str]) -> List[str]:
        """
        Drop every entry whose ID is not in `request_ids`.

        Pending tasks are dropped without cancellation; their result is
        discarded when they finish.

        Returns:
            The dropped request IDs
        """
        keep = set(request_ids)
        dropped = [rid for rid in self.request_ids() if rid not in keep]
        for request_id in dropped:
            self._results.pop(request_id, None)
            self._pending.pop(request_id, None)
            logger.debug(f"Cleaned up face data for old requestId: {request_id}")
        return dropped

    def __len__(self) -> int:
        return len(self.request_ids())

    def _on_task_done(self, request_id: str, task: asyncio.Task) -> None:
        # Already resolved through get(), or dropped by a sweep while in flight
        if self._pending.get(request_id) is not task:
            if request_id not in self._results:
                self._resolve(request_id, task)
                logger.debug(f"Discarded face detection result for dropped requestId {request_id}")
            return
        del self._pending[request_id]
        self._results[request_id] = tuple(self._resolve(request_id, task))

    @staticmethod
    def _resolve(request_id: str, task: asyncio.Task) -> List[Detection]:
        if task.cancelled():
            logger.warning(f"Face detection for requestId {request_id} was cancelled")
            return []
        error = task.exception()
        if error is not None:
            logger.error(f"Face detection task for requestId {request_id} failed: {error}")
            return []
        return list(task.result())

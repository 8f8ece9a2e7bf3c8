# Standard library imports
from dataclasses import dataclass
from typing import Optional


@dataclass
class SessionFlags:
    """
    Per-user capture flags, alive only while the user's session is.

    streaming: continuous-capture mode is on
    next_capture_at: epoch seconds before which no automatic capture may run
    """
    streaming: bool = False
    next_capture_at: Optional[float] = None

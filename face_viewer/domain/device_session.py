# Standard library imports
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

# Local application imports
from .models.photo import PhotoData


class PressType(str, Enum):
    """Button press kinds reported by the glasses."""
    SHORT = "short"
    LONG = "long"


@dataclass(frozen=True)
class ButtonPress:
    """A button event from the device session."""
    button_id: str
    press_type: PressType


class DeviceSession(ABC):
    """Device session interface - the commands this app issues to the glasses"""

    @abstractmethod
    async def request_photo(self) -> PhotoData:
        """Ask the glasses for one photo and wait for it"""
        pass

    @abstractmethod
    def show_text_wall(self, text: str, duration_ms: int) -> None:
        """Display text on the glasses for the given duration"""
        pass

from typing import TYPE_CHECKING
from ...infrastructure.cache.session_store import SessionStore

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CacheProvider:
    """In-memory state provider - one SessionStore shared by the whole process"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the session store as a singleton.
        Photos, face results and session flags all live in it.
        """
        container.register_singleton(SessionStore, SessionStore())

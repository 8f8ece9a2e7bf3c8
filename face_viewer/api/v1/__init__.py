from .photo_controller import router as photo_router


__all__ = ["photo_router"]

class PhotoNotFoundError(ValueError):
    """The user has no photo, or the requested ID is not the user's current photo."""
    pass


class FaceDataPendingError(ValueError):
    """The photo is current but face detection has not produced a result yet."""
    pass

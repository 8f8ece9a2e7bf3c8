# External package imports
import uvicorn

# Local application imports
from .core.config import get_settings


def main() -> None:
    """Run the API with uvicorn on the configured port."""
    settings = get_settings()
    uvicorn.run("face_viewer.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()

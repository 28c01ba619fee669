"""Run the API with uvicorn: ``python -m api``."""
import uvicorn

from core.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "api.main:app",
        host=settings.APP.HOST,
        port=settings.APP.PORT,
        log_level=settings.APP.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()

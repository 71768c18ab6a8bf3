"""Run the OTUI service with uvicorn."""

import uvicorn

from otui.core import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "otui.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

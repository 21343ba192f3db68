"""Process entry point: configure logging and serve the app with uvicorn."""

import logging

import uvicorn

from responder.config import get_settings


def main() -> None:
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # uvicorn exits with status 1 when the port cannot be bound.
    uvicorn.run(
        "responder.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

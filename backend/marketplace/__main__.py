"""`python -m marketplace` — serve the API with uvicorn."""

import uvicorn

from marketplace.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "marketplace.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

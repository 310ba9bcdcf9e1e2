"""
Run the service with uvicorn.

Usage:
    python -m geomarker

uvicorn handles SIGINT/SIGTERM by finishing in-flight requests and running
the application's shutdown, which closes the marker store connection.
"""
import uvicorn

from geomarker.core.config import get_settings
from geomarker.main import create_application


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        create_application(settings),
        host=settings.host,
        port=settings.port,
        server_header=False,
        log_config=None,
    )


if __name__ == "__main__":
    main()

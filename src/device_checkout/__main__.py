"""Run the registry with uvicorn: ``python -m device_checkout``."""

import uvicorn

from device_checkout.config import settings


def main() -> None:
    uvicorn.run(
        "device_checkout.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

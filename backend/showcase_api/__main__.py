# showcase_api/__main__.py
from __future__ import annotations

import uvicorn

from showcase_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "showcase_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.ENV != "production",
        log_level=settings.LOG_LEVEL_UVICORN,
    )


if __name__ == "__main__":
    main()

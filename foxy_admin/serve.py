# File: foxy_admin/serve.py
from __future__ import annotations

import uvicorn

from foxy_admin.core.logging_config import setup_logging
from foxy_admin.core.settings import get_settings
from foxy_admin.main import create_app


def main() -> None:
    settings = get_settings()
    logger = setup_logging(settings.SERVICE_NAME, settings.LOG_LEVEL, settings.LOG_DIR)
    logger.info("%s listening on http://%s:%s", settings.SERVICE_NAME, settings.HOST, settings.PORT)
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()

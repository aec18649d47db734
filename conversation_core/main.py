"""
Main entry point for the conversation service.

Usage:
    python -m conversation_core.main

Or with uvicorn directly:
    uvicorn conversation_core.main:app --host 0.0.0.0 --port 5001 --reload
"""

import uvicorn

from conversation_core.config.logging_config import setup_logging
from conversation_core.config.settings import Config
from conversation_core.fastapi_app import create_fastapi_app
from conversation_core.setup.ioc import create_container

setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

# Created at import time: Dishka adds middleware, which must happen before app starts
container = create_container(Config.STORAGE_BACKEND)
app = create_fastapi_app(container)


if __name__ == "__main__":
    uvicorn.run(
        "conversation_core.main:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=Config.DEBUG,
        log_level="info" if Config.DEBUG else "warning",
    )

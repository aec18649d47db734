"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "on"}

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Persistence: "memory" (in-process store) or "prisma" (PostgreSQL)
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory").lower()

    # Pagination
    MESSAGE_PAGE_LIMIT = int(os.getenv("MESSAGE_PAGE_LIMIT", "50"))
    MESSAGE_PAGE_MAX_LIMIT = int(os.getenv("MESSAGE_PAGE_MAX_LIMIT", "200"))
    CONVERSATION_USER_LIMIT = int(os.getenv("CONVERSATION_USER_LIMIT", "100"))

    # Auth
    SERVICE_AUTH_SECRET = os.getenv("SERVICE_AUTH_SECRET", "")
    SERVICE_AUTH_ISSUER = os.getenv("SERVICE_AUTH_ISSUER", "your_service_name")
    SERVICE_AUTH_AUDIENCE = os.getenv("SERVICE_AUTH_AUDIENCE", "your_service_audience")

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))

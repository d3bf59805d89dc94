"""
Service context for log lines.

Identifies which process wrote a log line, so output from several
workers calling the same use case can be told apart.
"""

import os
from functools import lru_cache

from src.platform.config.core_setting import settings


@lru_cache(maxsize=1)
def get_service_context() -> str:
    return f'{settings.SERVICE_NAME}@{settings.DEPLOY_ENV}:{os.getpid()}'

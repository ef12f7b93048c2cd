"""
로깅 설정
"""

import logging

from inventory_api.core.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """
    애플리케이션 시작 시 루트 로거를 설정합니다.

    Args:
        settings: 애플리케이션 설정 (log_level 사용)
    """
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)

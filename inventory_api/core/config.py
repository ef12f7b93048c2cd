"""
애플리케이션 설정 관리

Pydantic Settings를 사용하여 환경 변수를 로드합니다.
.env 파일 또는 시스템 환경 변수에서 설정을 읽어옵니다.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from inventory_api.core.constants import MAX_STOCK


class Settings(BaseSettings):
    """애플리케이션 설정 클래스"""

    # 데이터베이스 설정
    database_url: str = "sqlite:///./inventory.db"
    database_echo: bool = False

    # 재고 설정
    max_stock: int = MAX_STOCK

    # 페이지네이션 설정
    default_page_size: int = 20
    max_page_size: int = 100

    # 애플리케이션 설정
    app_env: str = "development"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 정의되지 않은 환경 변수 무시
    )

    @property
    def is_sqlite(self) -> bool:
        """SQLite 데이터베이스 사용 여부"""
        return self.database_url.startswith("sqlite")


def get_settings() -> Settings:
    """
    Settings 인스턴스를 반환하는 팩토리 함수
    """
    return Settings()

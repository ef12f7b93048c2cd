"""
SQLAlchemy 데이터베이스 설정

SQLAlchemy 엔진, 세션, Base 클래스와 트랜잭션 경계를 정의합니다.
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from inventory_api.core.config import Settings, get_settings


def create_db_engine(settings: Settings):
    """
    설정에 맞는 SQLAlchemy 엔진 생성

    SQLite 사용 시 check_same_thread 비활성화
    """
    connect_args = {"check_same_thread": False} if settings.is_sqlite else {}
    return create_engine(
        settings.database_url,
        connect_args=connect_args,
        echo=settings.database_echo,
        pool_pre_ping=True,  # connection 유효성 자동 체크
    )


engine = create_db_engine(get_settings())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db() -> Iterator[Session]:
    """
    FastAPI 의존성 주입용 데이터베이스 세션 제너레이터

    사용 예:
        @app.get("/items/")
        def read_items(db: Session = Depends(get_db)):
            return db.query(Item).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    쓰기 작업용 트랜잭션 경계

    블록이 정상 종료되면 commit, 예외가 발생하면 rollback 후 예외를 다시 던집니다.

    사용 예:
        with transaction(db):
            repository.save(product)
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise

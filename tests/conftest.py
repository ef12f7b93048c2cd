"""
pytest 픽스처 정의
"""

import os
from datetime import datetime

# 애플리케이션 lifespan이 파일 DB를 만들지 않도록 import 전에 설정
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from inventory_api.core.config import Settings, get_settings
from inventory_api.db.database import Base, get_db
from inventory_api.main import app
from inventory_api.models import Inventory, Product, ProductStatus

FIXED_NOW = datetime(2025, 1, 22, 10, 30, 0)


@pytest.fixture(scope="session")
def settings():
    """테스트용 설정 객체 픽스처"""
    return Settings(
        database_url="sqlite:///:memory:",
        max_stock=1_000_000,
        default_page_size=20,
        max_page_size=100,
        log_level="DEBUG",
    )


@pytest.fixture(scope="function")
def test_db() -> Session:
    """
    테스트용 in-memory SQLite 데이터베이스 세션 픽스처

    각 테스트 함수마다 새로운 데이터베이스를 생성하고,
    테스트 종료 후 테이블을 삭제하여 격리를 보장합니다.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def test_client(test_db, settings):
    """각 테스트마다 테스트 데이터베이스와 설정을 주입한 TestClient"""

    def override_get_db():
        yield test_db

    def override_get_settings():
        return settings

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = override_get_settings

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def make_product(test_db):
    """상품 레코드를 직접 저장하는 팩토리 픽스처"""

    def _make_product(
        name: str = "Test Product",
        price: float | None = 100.0,
        category: str | None = None,
        description: str | None = None,
        status: ProductStatus = ProductStatus.AVAILABLE,
    ) -> Product:
        product = Product(
            name=name,
            price=price,
            category=category,
            description=description,
            status=status,
        )
        test_db.add(product)
        test_db.commit()
        test_db.refresh(product)
        return product

    return _make_product


@pytest.fixture
def make_inventory(test_db):
    """재고 레코드를 직접 저장하는 팩토리 픽스처"""

    def _make_inventory(product_id: int, current_stock: int = 10) -> Inventory:
        inventory = Inventory(
            product_id=product_id,
            current_stock=current_stock,
            last_updated=FIXED_NOW,
        )
        test_db.add(inventory)
        test_db.commit()
        test_db.refresh(inventory)
        return inventory

    return _make_inventory


@pytest.fixture
def catalogue(make_product):
    """검색 테스트용 상품 목록"""
    return [
        make_product(name="Gaming Laptop", category="Electronics", price=1500.0),
        make_product(
            name="Monitor Arm",
            description="Wireless laptop stand",
            category="Accessories",
            price=45.0,
        ),
        make_product(name="Blender", category="Kitchen", price=120.0),
        make_product(
            name="Office Chair",
            category="Furniture",
            price=300.0,
            status=ProductStatus.NOT_AVAILABLE,
        ),
        make_product(name="Desk Lamp", category="Furniture", price=500.0),
    ]

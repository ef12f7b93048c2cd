import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inventory_api import __version__
from inventory_api.api.routes import inventories, inventory_search, product_search, products
from inventory_api.core.config import get_settings
from inventory_api.core.exceptions import (
    InvalidArgumentException,
    ResourceNotFoundException,
    ValidationException,
)
from inventory_api.core.logging import configure_logging
from inventory_api.db.database import Base, engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 시작/종료 처리"""
    settings = get_settings()
    configure_logging(settings)
    logger.info("Starting up application (env=%s)...", settings.app_env)

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title="Inventory API",
    description="상품 및 재고 관리, 다중 조건 검색 API",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    validation_errors: dict[str, str] | None = None,
) -> JSONResponse:
    content = {
        "timestamp": datetime.now().isoformat(),
        "status": status_code,
        "error": error,
        "message": message,
        "path": request.url.path,
    }
    if validation_errors is not None:
        content["validation_errors"] = validation_errors
    return JSONResponse(status_code=status_code, content=content)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """
    요청 본문/파라미터 파싱 실패를 422 대신 400으로 응답합니다.

    JSON 자체가 깨진 경우와 필드 타입이 맞지 않는 경우를 구분합니다.
    """
    errors = exc.errors()
    if any(error["type"] == "json_invalid" for error in errors):
        logger.error("Exception [InvalidJson] at [%s]: %s", request.url.path, errors)
        return _error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            "Invalid Request Body",
            "Malformed JSON or invalid data format",
        )

    validation_errors = {
        ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0]): error["msg"]
        for error in errors
    }
    logger.error("Exception [RequestValidationError] at [%s]: %s", request.url.path, validation_errors)
    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
        "Input validation failed",
        validation_errors,
    )


@app.exception_handler(ValidationException)
async def validation_exception_handler(request: Request, exc: ValidationException):
    logger.error("Exception [%s] at [%s]: %s", type(exc).__name__, request.url.path, exc.message)
    return _error_response(request, status.HTTP_400_BAD_REQUEST, "Validation Error", exc.message)


@app.exception_handler(InvalidArgumentException)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentException):
    logger.error("Exception [%s] at [%s]: %s", type(exc).__name__, request.url.path, exc.message)
    return _error_response(request, status.HTTP_400_BAD_REQUEST, "Invalid Argument", exc.message)


@app.exception_handler(ResourceNotFoundException)
async def not_found_handler(request: Request, exc: ResourceNotFoundException):
    logger.error("Exception [%s] at [%s]: %s", type(exc).__name__, request.url.path, exc.message)
    return _error_response(request, status.HTTP_404_NOT_FOUND, "Resource Not Found", exc.message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception at [%s]", request.url.path)
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "An unexpected error occurred",
    )


# 라우터 등록 (검색 라우터를 먼저 등록)
app.include_router(product_search.router, prefix="/api/v1/products/search", tags=["product-search"])
app.include_router(products.router, prefix="/api/v1/products", tags=["products"])
app.include_router(
    inventory_search.router, prefix="/api/v1/inventories/search", tags=["inventory-search"]
)
app.include_router(inventories.router, prefix="/api/v1/inventories", tags=["inventories"])


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": "Inventory API",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """헬스체크 엔드포인트"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

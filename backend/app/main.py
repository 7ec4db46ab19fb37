from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware
from .config import settings
from .integrations.supabase_storage import StorageError
import logging
import time
import uuid
from .routers.projects import router as projects_router
from .routers.editorials import router as editorials_router
from .routers.listings import router as listings_router
from .routers.enquiries import router as enquiries_router
from .routers.instagram import router as instagram_router
from .routers.settings import router as settings_router
from .routers.admin import router as admin_router
from .routers.storage import router as storage_router
from .routers.ai import router as ai_router
from .routers.public import router as public_router


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    msg = first.get("msg", "Invalid value")
    return f"{loc}: {msg}" if loc else msg


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(title="EJ Development API", version="0.1.0")
    logger = logging.getLogger(__name__)

    app.add_middleware(SessionMiddleware, secret_key=settings.APP_SECRET)

    @app.middleware("http")
    async def timing_middleware(request: Request, call_next):
        t0 = time.perf_counter()
        req_id = uuid.uuid4().hex[:8]
        response = await call_next(request)
        total = time.perf_counter() - t0
        response.headers["X-Process-Time"] = f"{total:.3f}"
        logger.info(
            "req id=%s method=%s path=%s status=%s total_ms=%.1f",
            req_id,
            request.method,
            request.url.path,
            response.status_code,
            total * 1000,
        )
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _validation_message(exc)})

    @app.exception_handler(SQLAlchemyError)
    async def db_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("database error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": str(getattr(exc, "orig", None) or exc)})

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.exception("storage error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": str(exc) or "Storage error"})

    app.include_router(public_router)
    app.include_router(projects_router)
    app.include_router(editorials_router)
    app.include_router(listings_router)
    app.include_router(enquiries_router)
    app.include_router(instagram_router)
    app.include_router(settings_router)
    app.include_router(admin_router)
    app.include_router(storage_router)
    app.include_router(ai_router)

    @app.get("/health", include_in_schema=False)
    def healthcheck():
        return {"status": "ok"}

    return app


app = create_app()

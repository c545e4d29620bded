# backend/main.py
import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from config.settings import settings
from database.executor import get_executor
from gateway.error_handlers import register_error_handlers

# ⬅️ שער אחוד שמאגד את כל הראוטרים תחת /api/*
from gateway.gateway_router import gateway_router

logging.basicConfig(
    level=logging.DEBUG if settings.APP_ENV.lower() == "debug" else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Tailoring API is starting (env=%s)", settings.APP_ENV)
    if get_executor().test_connection():
        logger.info("Database connected")
    else:
        logger.warning("Database connection failed; requests needing the database will return 500")

    yield
    # Shutdown
    logger.info("Shutting down")
    get_executor().close_connection()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Tailoring Commerce API",
        description="Users, businesses, products, orders and measurements for a tailoring marketplace",
        version=APP_VERSION,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path,
                    response.status_code, (time.perf_counter() - started) * 1000)
        return response

    register_error_handlers(app)

    upload_root = Path(settings.UPLOAD_DIR)
    upload_root.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=str(upload_root)), name="uploads")

    @app.get("/")
    async def root():
        return {
            "success": True,
            "message": "Welcome to the Tailoring Commerce API",
            "version": APP_VERSION,
            "api_base": "/api",
            "docs": "/docs",
            "endpoints": {
                "health": "/health",
                "test_db": "/test-db",
            },
        }

    # בריאות מערכת כללית
    @app.get("/health")
    def health():
        database_ok = get_executor().test_connection()
        return {
            "success": True,
            "status": "healthy" if database_ok else "degraded",
            "service": "tailoring-api",
            "version": APP_VERSION,
            "database": "connected" if database_ok else "unavailable",
        }

    @app.get("/test-db")
    def test_db():
        if not get_executor().test_connection():
            raise HTTPException(status_code=500, detail="Database connection failed")
        return {"success": True, "message": "Database connection successful"}

    app.include_router(gateway_router, prefix="/api")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=not settings.is_production,
        log_level="info",
    )

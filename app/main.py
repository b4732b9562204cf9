import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.core.config import settings
from app.core.database import init_database
from app.core.error_handlers import register_exception_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="Dojang - taekwondo school backend")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        return response

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    async def root():
        return {
            "app": "Dojang",
            "status": "running",
            "endpoints": {
                "auth": "/api/auth",
                "users": "/api/users",
                "trainees": "/api/trainees",
                "progress": "/api/progress",
                "beltProgress": "/api/belt-progress",
                "sessions": "/api/sessions",
                "forum": "/api/forum",
                "resources": "/api/resources",
                "docs": "/docs",
            }
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


app = create_app()


@app.on_event("startup")
async def startup_event():
    await init_database()
    logger.info("Приложение запущено")

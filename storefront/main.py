import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from storefront.api import auth, products, cart, orders, users, admin
from storefront.core.config import Settings, get_settings
from storefront.core.errors import StoreError
from storefront.core.logging import configure_logging
from storefront.core.sessions import SessionStore
from storefront.db.seed import seed_sample_data
from storefront.db.storage import Storage

logger = logging.getLogger(__name__)


def _field_path(loc) -> str:
    return ".".join(str(part) for part in loc)


def register_error_handlers(app: FastAPI):
    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(HTTPException)
    async def http_error_handler(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = [{"field": _field_path(err["loc"]), "message": err["msg"]} for err in exc.errors()]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request", "errors": errors},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME)
    app.state.settings = settings
    app.state.storage = Storage()
    app.state.sessions = SessionStore(settings)
    if settings.SEED_SAMPLE_DATA:
        seed_sample_data(app.state.storage)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(products.router, prefix="/api/products", tags=["products"])
    app.include_router(cart.router, prefix="/api/cart", tags=["cart"])
    app.include_router(orders.router, prefix="/api/orders", tags=["orders"])
    app.include_router(admin.router, prefix="/api/admin", tags=["admin"])

    @app.get("/")
    def root():
        return {"status": "ok", "app": settings.APP_NAME}

    logger.info("%s started", settings.APP_NAME)
    return app


app = create_app()

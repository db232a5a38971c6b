from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException

from hotel_common.access import home_path_for
from hotel_common.config import get_settings
from hotel_common.dependencies import resolve_actor
from hotel_common.errors import register_error_handlers
from hotel_common.logging_middleware import add_audit_middleware, configure_event_logging
from hotel_common.rate_limit import apply_rate_limiter
from hotel_common.services import get_services

from .routers import admin, customer, public, staff

settings = get_settings()


@asynccontextmanager
async def lifespan(_: FastAPI):
    # build the store (migrations, demo seed) before the first request
    get_services()
    yield


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code != status.HTTP_404_NOT_FOUND:
        return await http_exception_handler(request, exc)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.detail, "redirect": home_path_for(resolve_actor(request))},
    )


def create_app() -> FastAPI:
    fastapi_app = FastAPI(title=settings.app_name, version="1.0.0", lifespan=lifespan)
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    apply_rate_limiter(fastapi_app)
    add_audit_middleware(fastapi_app, "hotel")
    configure_event_logging()
    register_error_handlers(fastapi_app)
    fastapi_app.add_exception_handler(StarletteHTTPException, not_found_handler)

    fastapi_app.include_router(public.router)
    fastapi_app.include_router(customer.router)
    fastapi_app.include_router(staff.router)
    fastapi_app.include_router(admin.router)

    Instrumentator().instrument(fastapi_app).expose(fastapi_app, include_in_schema=False)
    return fastapi_app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.app_port)


if __name__ == "__main__":
    run()

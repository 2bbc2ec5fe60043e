from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from reba.api.routes.property import router as property_router
from reba.api.schemas import HealthResponse
from reba.config import get_settings


load_dotenv()


def health():
    return HealthResponse().model_dump()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="REBA property API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(HTTPException)
    async def _http_error(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "query")
        message = first.get("msg", "Invalid request")
        return JSONResponse(
            status_code=422,
            content={"error": f"{field}: {message}" if field else message},
        )

    app.include_router(property_router, prefix="/api")

    @app.get("/api/health", response_model=HealthResponse)
    def health_route():
        return health()

    @app.on_event("startup")
    def _log_startup():
        logger = logging.getLogger("reba.api")
        logger.info(
            "REBA API starting: api_key_configured=%s demo=%s",
            "yes" if get_settings().has_api_key else "no",
            get_settings().demo,
        )

    return app


app = create_app()

# showcase_api/main.py
from __future__ import annotations

import asyncio
import contextlib
import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from showcase_api.core.config import get_settings
from showcase_api.core.logging_ import setup_logging
from showcase_api.core.errors import register_exception_handlers
from showcase_api.api.deps import get_provider
from showcase_api.api.router_inference import router as inference_router
from showcase_api.services import list_services

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    provider = app.dependency_overrides.get(get_provider, get_provider)()

    # 1) Optional warm-up of every pipeline
    if settings.PRELOAD_MODELS:
        for svc in list_services(settings):
            try:
                await asyncio.to_thread(provider.preload, svc["task"], svc["model"])
            except Exception:
                logger.exception("Failed to preload %s (%s)", svc["task"], svc["model"])

    # 2) Sweeper loop: drop pipelines that sat idle too long
    async def sweeper():
        while True:
            await asyncio.sleep(settings.SWEEP_INTERVAL_SECONDS)
            await asyncio.to_thread(provider.sweep_idle, settings.IDLE_UNLOAD_SECONDS)

    task = asyncio.create_task(sweeper())
    try:
        yield
    finally:
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task


# ===== App init =====
settings = get_settings()

setup_logging()
templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))

app = FastAPI(
    title=settings.APP_NAME,
    lifespan=lifespan,
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    swagger_ui_parameters={
        "defaultModelsExpandDepth": (1 if settings.DOCS_SHOW_SCHEMAS else -1),
        "defaultModelExpandDepth": 0,
        "docExpansion": "none",
    },
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
)

# Request ID middleware
class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        rid = request.headers.get("x-request-id") or uuid.uuid4().hex
        request.state.request_id = rid
        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response

app.add_middleware(RequestIDMiddleware)

# Errors
register_exception_handlers(app)

# Routes
@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    return templates.TemplateResponse(
        request,
        "index.html",
        {"title": settings.APP_NAME, "version": settings.VERSION, "services": list_services(settings)},
    )

@app.get("/health")
def health():
    return {"status": "ok"}

EXPOSE_ENV = (settings.ENV != "production") or settings.EXPOSE_ENV_ENDPOINT
if EXPOSE_ENV:
    @app.get("/env", include_in_schema=(settings.ENV != "production"))
    def env(x_admin_token: str | None = Header(default=None, alias="X-Admin-Token")):
        if settings.ENV == "production":
            expected = settings.ENV_SECRET_TOKEN
            if expected and x_admin_token != expected:
                raise HTTPException(status_code=403, detail="Forbidden")
        return settings.summary()

# Include routers
app.include_router(inference_router)

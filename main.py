"""
Blog Admin — FastAPI Application Entry Point

Registers all routers, applies middleware, and serves the API.
"""

import logging
import contextlib
import traceback
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.dependencies import build_blog_manager
from app.routers import blog_admin, verify

# ── Logging ───────────────────────────────────────────────────
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
)
logger = logging.getLogger(__name__)

@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: initial list load, the way the view does on mount
    logger.info("🚀 %s is starting up (backend: %s)", settings.app_name, settings.backend_url)
    if not hasattr(app.state, "blog_manager"):
        app.state.blog_manager = build_blog_manager()
    manager = app.state.blog_manager
    await manager.mount()
    yield
    # Shutdown
    await manager.aclose()
    logger.info("🛑 %s is shutting down", settings.app_name)


# ── App factory ───────────────────────────────────────────────
app = FastAPI(
    title=settings.app_name,
    description=(
        "Admin console for blog posts — list, upload with an image or "
        "video, and delete, against the blog backend."
    ),
    version="0.1.0",
    lifespan=lifespan,
)

# ── CORS ──────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)


# ── Global Exception Handler ─────────────────────────────────
# Ensures ALL unhandled errors return proper JSON with CORS headers
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: "
        f"{type(exc).__name__}: {exc}\n{traceback.format_exc()}"
    )
    return JSONResponse(
        status_code=500,
        content={"detail": f"Internal server error: {type(exc).__name__}"},
    )


# ── Routers ───────────────────────────────────────────────────
app.include_router(blog_admin.router)
app.include_router(verify.router)


# ── Health Check ──────────────────────────────────────────────
@app.get("/", tags=["Health"])
async def health_check():
    return {"status": "ok", "service": settings.app_name}

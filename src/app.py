"""Shipping FastAPI application.

Web server for cargo booking, handling registration and tracking. Commands
are processed synchronously within the request.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the config overlay (memory or PostgreSQL). Event
# processing is synchronous in both, so cargo inspection runs inside the
# request under the same per-cargo lock as the command. Serve with a single
# worker process.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers
from shipping.domain import shipping  # noqa: E402

shipping.init()

_DOMAIN_PREFIXES = ("/cargos", "/locations", "/handling-events", "/tracking")


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Shipping API",
    description="Cargo booking, handling and delivery tracking",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the shipping domain context for domain routes."""
    if request.url.path.startswith(_DOMAIN_PREFIXES):
        with shipping.domain_context():
            response = await call_next(request)
        return response
    # Health check, docs, etc.
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from shipping.api import cargo_router, handling_router, location_router, tracking_router  # noqa: E402

app.include_router(cargo_router)
app.include_router(location_router)
app.include_router(handling_router)
app.include_router(tracking_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": shipping.name})

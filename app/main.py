import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from app.shared.config import settings
from app.shared.db import init_db
from app.shared.http import ok

# import models so they register with Base.metadata
from app.memos import models as memos_models  # noqa: F401

# Routers Import
from app.memos.api import router as memos_router
from app.generation.api import router as generation_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

TAGS_METADATA = [
    {"name": "Memos", "description": "Create, list, search, edit and delete memos"},
    {"name": "Memos: AI", "description": "Gemini-generated summaries and tags"},
    {"name": "Health", "description": "Service health"},
]

app = FastAPI(
    title="Memos",
    version="0.1.0",
    description="Memo API with AI summaries and tags.",
    openapi_tags=TAGS_METADATA,
)

# ---- DEV-ONLY error handler (helps you see real errors in Swagger) ----
if settings.ENV == "dev":
    @app.exception_handler(Exception)
    async def _dev_ex_handler(request: Request, exc: Exception):
        return JSONResponse(status_code=500, content={"detail": str(exc)})

# ----------------------------------------------------------------------


@app.on_event("startup")
def _init_db():
    init_db()

@app.get("/healthz", tags=["Health"])
def healthz():
    return ok()

# Routers
app.include_router(generation_router)
app.include_router(memos_router)

# app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from app.comment.routes import router as comment_router
from app.core.config import get_settings
from app.core.database import init_db
from app.core.errors import error_body, register_exception_handlers
from app.core.logging_config import configure_logging
from app.ticket.routes import router as ticket_router

settings = get_settings()
configure_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESC,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    length = request.headers.get("content-length")
    if length and length.isdigit() and int(length) > settings.MAX_BODY_BYTES:
        return JSONResponse(
            status_code=413,
            content=error_body("Request body too large", f"Limit is {settings.MAX_BODY_BYTES} bytes"),
        )
    return await call_next(request)


# added after the size guard so CORS stays the outermost middleware
origins = settings.cors_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    # credentials cannot be combined with a wildcard origin
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Routers
app.include_router(ticket_router)
app.include_router(comment_router)

@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}

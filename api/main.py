import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from auth import router as auth_router
from comments import router as comments_router
from core import db, log, schema, settings
from feed import router as feed_router
from posts import router as posts_router
from users import router as users_router

log.configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        if db.auto_migrate():
            await schema.ensure_schema()
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="BirdBook API", lifespan=lifespan)

# Allow the frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.env_list(
        "CORS_ORIGINS",
        ["http://localhost:3000", "http://127.0.0.1:3000"],
    ),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _validation_detail(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = str(error.get("msg") or "invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request."


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": _validation_detail(exc)},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


app.include_router(auth_router.router, tags=["auth"])
app.include_router(posts_router.router, tags=["posts"])
app.include_router(comments_router.router, tags=["comments"])
app.include_router(feed_router.router, tags=["feed"])
app.include_router(users_router.router, tags=["users"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "birdbook api"}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.env_int("PORT", 8000))

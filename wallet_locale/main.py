"""FastAPI app serving the account-creation wizard's string tables.

Run with:
    uvicorn wallet_locale.main:app --host 0.0.0.0 --port 8070 --reload
"""

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wallet_locale.config import settings
from wallet_locale.errors import KeyNotFoundError, LocaleNotFoundError, MalformedResourceError
from wallet_locale.logging_config import setup_logging
from wallet_locale.registry import registry
from wallet_locale.routes import router


@asynccontextmanager
async def lifespan(_: FastAPI):
    load_dotenv()
    setup_logging(settings.get("LOG_LEVEL", "INFO"))
    # Malformed tables abort startup here.
    registry.activate(
        settings.default_locale,
        fallback=settings.fallback_locale,
        locales_dir=settings.locales_dir,
    )
    yield


app = FastAPI(title="wallet-locale", lifespan=lifespan)


@app.exception_handler(KeyNotFoundError)
async def key_not_found_handler(_request: Request, exc: KeyNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={"detail": str(exc), "key": exc.path, "reason": exc.reason},
    )


@app.exception_handler(LocaleNotFoundError)
async def locale_not_found_handler(_request: Request, exc: LocaleNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc), "lang": exc.lang})


@app.exception_handler(MalformedResourceError)
async def malformed_resource_handler(_request: Request, exc: MalformedResourceError) -> JSONResponse:
    # Only reachable after startup; the active table is left in place.
    return JSONResponse(status_code=500, content={"detail": str(exc), "path": exc.path})


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)

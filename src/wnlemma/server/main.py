"""
wnlemma API Server.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from wnlemma.core.logging_config import configure_logging
from wnlemma.core.wordnet_files import LoadError
from wnlemma.server.routes import lemmas


log = structlog.get_logger(__name__)


def log_routes(app: FastAPI):
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(sorted(route.methods - {"HEAD", "OPTIONS"}))
            log.info("route", methods=methods, path=route.path, name=route.name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    log_routes(app)
    yield


app = FastAPI(title="wnlemma API", lifespan=lifespan)

app.include_router(lemmas.router)


@app.exception_handler(LoadError)
async def wordnet_unavailable(request: Request, exc: LoadError):
    return JSONResponse(status_code=503, content={"detail": f"WordNet data unavailable: {exc}"})


@app.get("/")
async def root():
    return {"name": "wnlemma API", "version": "0.1.0"}

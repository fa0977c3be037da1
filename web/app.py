"""FastAPI application factory."""
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from agent.llm import LLMClient, get_llm_client
from config import settings
from web.routes import router
from web.schemas import failure


def _describe(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "Invalid request: " + "; ".join(parts)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(failure(_describe(exc)), status_code=400)


def create_app(llm_factory: Callable[[], LLMClient] = get_llm_client) -> FastAPI:
    """Build the app. llm_factory is called once per generate request."""
    app = FastAPI(
        title="Content Repurposer",
        description="Rewrite one piece of content for several publishing platforms",
        version="0.1.0",
    )
    app.state.llm_factory = llm_factory
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.include_router(router)
    return app


app = create_app()

"""HTTP handlers for the generation endpoint and platform metadata."""
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from agent.errors import InputValidationError, PlatformGenerationError, ServiceCallError
from agent.llm import current_model
from agent.modules.generate import generate
from agent.modules.validate import resolve_platforms, validate_input
from agent.prompts.generate import TEMPLATES
from config import settings
from web.schemas import GenerateRequest, GenerateResponse, PlatformInfo, failure

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate")
async def generate_content(body: GenerateRequest, request: Request):
    """Validate, then rewrite the content once per requested platform."""
    validation = validate_input(body.content, max_length=settings.max_input_length)
    if not validation.valid:
        return JSONResponse(failure(validation.error), status_code=400)

    try:
        platforms = resolve_platforms(body.platforms)
    except InputValidationError as e:
        return JSONResponse(failure(e.message), status_code=400)

    try:
        llm = request.app.state.llm_factory()
        results = await generate(
            body.content,
            platforms,
            body.tone,
            llm,
            max_tokens=settings.generation_max_tokens,
        )
    except PlatformGenerationError as e:
        logger.error("Generation aborted: %s", e, exc_info=e.cause)
        return JSONResponse(failure(str(e)), status_code=500)
    except ServiceCallError as e:
        logger.error("LLM client unavailable: %s", e)
        return JSONResponse(failure(str(e)), status_code=500)
    except Exception as e:
        logger.exception("Generate API error")
        return JSONResponse(failure(str(e) or "Internal server error"), status_code=500)

    logger.info("Generated %d platform(s)", len(results))
    response = GenerateResponse(success=True, data=results)
    return JSONResponse(response.model_dump(by_alias=True, exclude_none=True))


@router.get("/platforms")
async def list_platforms():
    data = [
        PlatformInfo(
            id=t.platform.value,
            alias=t.alias,
            name=t.name,
            description=t.description,
        ).model_dump()
        for t in TEMPLATES.values()
    ]
    return {"success": True, "data": data}


@router.get("/health")
async def health():
    return {"status": "ok", "provider": settings.llm_provider.lower(), "model": current_model()}

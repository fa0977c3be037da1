import logging

from agent.errors import PlatformGenerationError
from agent.llm.base import LLMClient, LLMResponse
from agent.models import PlatformResult
from agent.modules.extract import extract_payload, payload_fields
from agent.platforms import Platform, Tone
from agent.prompts import generate as prompts

logger = logging.getLogger(__name__)

DEFAULT_MAX_TOKENS = 2000


async def generate_for_platform(
    content: str,
    platform_id: str,
    platform: Platform,
    tone: Tone,
    llm: LLMClient,
    max_tokens: int = DEFAULT_MAX_TOKENS,
) -> PlatformResult:
    """One request → extract → decode pass for a single platform."""
    template = prompts.get_template(platform)
    user_prompt = prompts.USER_TEMPLATE.format(
        platform=platform.value,
        tone=tone.value,
        content=content,
    )

    response: LLMResponse = await llm.complete(
        system=template.system_prompt,
        user=user_prompt,
        max_tokens=max_tokens,
    )
    logger.debug("%s: %d tokens from %s", platform_id, response.tokens_used, response.model)

    payload = extract_payload(response.content)
    text, hashtags, suggestions = payload_fields(payload)
    return PlatformResult(
        platform=platform_id,
        content=text,
        hashtags=hashtags,
        suggestions=suggestions,
    )


async def generate(
    content: str,
    platforms: list[tuple[str, Platform]],
    tone: Tone,
    llm: LLMClient,
    max_tokens: int = DEFAULT_MAX_TOKENS,
) -> dict[str, PlatformResult]:
    """Generate every requested platform in order, all or nothing.

    platforms: (requested_id, Platform) pairs from validate.resolve_platforms.
    The first failing platform aborts the remaining ones and is raised as
    PlatformGenerationError; partial results are discarded.
    """
    results: dict[str, PlatformResult] = {}
    for platform_id, platform in platforms:
        logger.info("Generating %s (%s tone)", platform_id, tone.value)
        try:
            results[platform_id] = await generate_for_platform(
                content, platform_id, platform, tone, llm, max_tokens=max_tokens,
            )
        except Exception as exc:
            logger.warning("Generation failed for %s: %s", platform_id, exc)
            raise PlatformGenerationError(platform_id, exc) from exc
    return results

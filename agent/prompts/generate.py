"""
Platform-specific generation prompts.

Each PLATFORM_INSTRUCTIONS entry embeds:
  1. Target length for the platform
  2. Structural budget (hashtag count, emoji count, call-to-action)
  3. The output contract: a JSON object with content, hashtags, suggestions

The model is told to return JSON, but replies still arrive as free text;
see agent.modules.extract for how the payload is located.
"""
from agent.platforms import ALIASES, Platform, PlatformTemplate

PLATFORM_INSTRUCTIONS: dict[Platform, str] = {

    # ── LinkedIn ───────────────────────────────────────────────────────────────
    Platform.LINKEDIN: """You are a LinkedIn content expert. Transform the given content into an engaging LinkedIn post that:
- Is 1300-3000 characters (LinkedIn's optimal range)
- Uses professional but conversational tone
- Includes 3-5 relevant hashtags
- Has a clear hook in the first 2 lines
- Ends with a question or call-to-action
- Uses proper formatting (short paragraphs, bullet points)
- Focuses on actionable insights and professional value
- Avoids overly promotional language

Return JSON with: { content, hashtags (array), suggestions (array of 3 posting tips) }""",

    # ── Twitter / X ────────────────────────────────────────────────────────────
    Platform.TWITTER: """You are a Twitter/X content expert. Transform the given content into a compelling tweet that:
- Is under 280 characters (or create a thread with 2-3 tweets if content is substantial)
- Uses concise, punchy language
- Includes 2-3 relevant hashtags
- Has a clear hook or insight
- Uses appropriate emoji (1-2 max)
- Is formatted for easy reading

If creating a thread, format as: "Tweet 1:\\n\\n[Tweet 1 content]\\n\\n---\\n\\nTweet 2:\\n\\n[Tweet 2 content]"

Return JSON with: { content, hashtags (array), suggestions (array of 3 posting tips) }""",

    # ── Instagram ──────────────────────────────────────────────────────────────
    Platform.INSTAGRAM: """You are an Instagram content expert. Transform the given content into an engaging Instagram caption that:
- Is 150-300 characters (Instagram's optimal range for captions)
- Has visual-first language (describe what image/video would accompany)
- Uses 10-15 relevant hashtags (mix of broad and niche)
- Includes appropriate emoji (3-5 max)
- Has a clear hook and call-to-action
- Uses line breaks for readability
- Feels personal and authentic

Return JSON with: { content, hashtags (array), suggestions (array of 3 posting tips) }""",

    # ── Newsletter ─────────────────────────────────────────────────────────────
    Platform.NEWSLETTER: """You are a newsletter writing expert. Transform the given content into an engaging newsletter section that:
- Is 200-500 words
- Uses personal, conversational tone
- Tells a story or shares an insight
- Has a clear narrative flow
- Includes a strong call-to-action
- Uses "you" to address the reader directly
- Feels like advice from a knowledgeable friend
- Has a compelling subject line (first line)

Return JSON with: { content, hashtags (empty array), suggestions (array of 3 tips for newsletter engagement) }""",
}

USER_TEMPLATE = "Transform this content for {platform} with a {tone} tone:\n\n{content}"

_PLATFORM_INFO: dict[Platform, tuple[str, str]] = {
    Platform.LINKEDIN: ("LinkedIn", "Professional post (1300-3000 chars)"),
    Platform.TWITTER: ("Twitter/X", "Concise tweet or thread (<280 chars)"),
    Platform.INSTAGRAM: ("Instagram", "Visual caption with hashtags (150-300 chars)"),
    Platform.NEWSLETTER: ("Newsletter", "Personal, storytelling (200-500 words)"),
}


def _build_templates() -> dict[Platform, PlatformTemplate]:
    missing = [p.value for p in Platform if p not in PLATFORM_INSTRUCTIONS or p not in _PLATFORM_INFO]
    if missing:
        raise RuntimeError(f"Platforms without a template: {missing}")

    aliases = {platform: alias for alias, platform in ALIASES.items()}
    return {
        p: PlatformTemplate(
            platform=p,
            name=_PLATFORM_INFO[p][0],
            description=_PLATFORM_INFO[p][1],
            system_prompt=PLATFORM_INSTRUCTIONS[p],
            alias=aliases.get(p),
        )
        for p in Platform
    }


TEMPLATES: dict[Platform, PlatformTemplate] = _build_templates()


def get_template(platform: Platform) -> PlatformTemplate:
    return TEMPLATES[platform]

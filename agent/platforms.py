"""The closed set of target platforms and tones."""
from dataclasses import dataclass
from enum import Enum


class Platform(str, Enum):
    LINKEDIN = "linkedin"
    TWITTER = "twitter"
    INSTAGRAM = "instagram"
    NEWSLETTER = "newsletter"


class Tone(str, Enum):
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    ENTHUSIASTIC = "enthusiastic"


# Generic names accepted alongside the wire ids.
ALIASES: dict[str, Platform] = {
    "professional-network": Platform.LINKEDIN,
    "microblog": Platform.TWITTER,
    "photo-caption": Platform.INSTAGRAM,
}


@dataclass(frozen=True)
class PlatformTemplate:
    platform: Platform
    name: str
    description: str
    system_prompt: str
    alias: str | None = None


def lookup(platform_id: str) -> Platform | None:
    """Resolve a wire id or alias, ignoring case and surrounding whitespace."""
    key = platform_id.strip().lower()
    try:
        return Platform(key)
    except ValueError:
        return ALIASES.get(key)

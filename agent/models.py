from pydantic import BaseModel, ConfigDict, Field, computed_field


class PlatformResult(BaseModel):
    """One platform's rewrite. Serialize with by_alias=True for the wire format."""

    model_config = ConfigDict(frozen=True)

    platform: str
    content: str = ""
    hashtags: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)

    # Counted locally so it always matches the content that is displayed.
    @computed_field(alias="characterCount")
    @property
    def character_count(self) -> int:
        return len(self.content)

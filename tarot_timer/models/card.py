"""Card and LocalizedText data models."""

from typing import Literal, Optional

from pydantic import BaseModel, Field, RootModel, field_validator, model_validator

Suit = Literal["major", "wands", "cups", "swords", "pentacles"]
Element = Literal["fire", "water", "air", "earth"]

SUITS: tuple[str, ...] = ("major", "wands", "cups", "swords", "pentacles")
REQUIRED_LANGUAGES = frozenset({"ko", "en"})
DEFAULT_LANGUAGE = "en"


class LocalizedText(RootModel[dict[str, str]]):
    """Display text keyed by language code (at least ``ko`` and ``en``)."""

    model_config = {"frozen": True}

    @field_validator("root")
    @classmethod
    def _check_languages(cls, value: dict[str, str]) -> dict[str, str]:
        missing = REQUIRED_LANGUAGES - value.keys()
        if missing:
            raise ValueError(f"missing languages: {', '.join(sorted(missing))}")
        for lang, text in value.items():
            if not text.strip():
                raise ValueError(f"empty text for language '{lang}'")
        return dict(value)

    @property
    def languages(self) -> frozenset[str]:
        return frozenset(self.root)

    def resolve(self, language: str) -> str:
        """Return the text for ``language``, falling back to English."""
        return self.root.get(language, self.root[DEFAULT_LANGUAGE])

    def __str__(self) -> str:
        return self.resolve(DEFAULT_LANGUAGE)


class Card(BaseModel):
    """A single tarot card from the 78-card catalog."""

    id: str = Field(..., min_length=1, description="Stable card identifier")
    name: LocalizedText = Field(..., description="Display name")
    keywords: tuple[LocalizedText, ...] = Field(..., min_length=1, description="Keywords")
    description: LocalizedText = Field(..., description="Short meaning")
    suit: Suit = Field(..., description="Major arcana or minor suit")
    number: int = Field(..., ge=0, le=21, description="Arcana number or rank (Ace=1, King=14)")
    element: Optional[Element] = Field(default=None, description="Associated element")

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def _check_card(self) -> "Card":
        if self.suit != "major" and not 1 <= self.number <= 14:
            raise ValueError(f"minor arcana rank out of range: {self.number}")
        languages = self.name.languages
        texts = (self.description, *self.keywords)
        if any(text.languages != languages for text in texts):
            raise ValueError(f"card '{self.id}' has inconsistent languages")
        return self

    @property
    def is_major(self) -> bool:
        return self.suit == "major"

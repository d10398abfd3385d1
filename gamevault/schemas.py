from enum import Enum
from pydantic import AliasChoices, BaseModel, Field, field_validator


class ItemType(str, Enum):
    GAME = "Game"
    CONSOLE = "Console"
    ACCESSORY = "Accessory"

    @classmethod
    def default(cls) -> "ItemType":
        return cls.GAME

    @classmethod
    def from_cell(cls, text: str | None) -> "ItemType":
        """Resolves a CSV cell (English value or FR/DE label) to an ItemType, else the default."""
        return _lookup(_ITEM_TYPE_LABELS, text, cls.default())


class Condition(str, Enum):
    BOXED = "Boxed"
    LOOSE = "Loose"
    UNKNOWN = "Unknown"

    @classmethod
    def default(cls) -> "Condition":
        return cls.UNKNOWN

    @classmethod
    def from_cell(cls, text: str | None) -> "Condition":
        """Resolves a CSV cell (English value or FR/DE label) to a Condition, else the default."""
        return _lookup(_CONDITION_LABELS, text, cls.default())


# Lower-cased spellings accepted on import, per locale.
_ITEM_TYPE_LABELS = {
    "game": ItemType.GAME,
    "jeu": ItemType.GAME,
    "spiel": ItemType.GAME,
    "console": ItemType.CONSOLE,
    "konsole": ItemType.CONSOLE,
    "accessory": ItemType.ACCESSORY,
    "accessoire": ItemType.ACCESSORY,
    "zubehör": ItemType.ACCESSORY,
}

_CONDITION_LABELS = {
    "boxed": Condition.BOXED,
    "en boîte": Condition.BOXED,
    "complet": Condition.BOXED,
    "verpackt": Condition.BOXED,
    "loose": Condition.LOOSE,
    "en vrac": Condition.LOOSE,
    "lose": Condition.LOOSE,
    "unknown": Condition.UNKNOWN,
    "inconnu": Condition.UNKNOWN,
    "unbekannt": Condition.UNKNOWN,
}


def _lookup(labels: dict, text: str | None, default):
    if not text:
        return default
    return labels.get(text.strip().lower(), default)


class PriceEstimate(BaseModel):
    """A low/average/high price triple quoted by one marketplace source."""

    source: str
    currency: str
    low: float = 0.0
    average: float
    high: float = 0.0

    class Config:
        frozen = True


class Item(BaseModel):
    """
    A collectible (game, console or accessory) as stored in a collection or wishlist.
    Aliases follow the camelCase JSON shape used by the collection store.
    """

    id: str | None = None
    title: str
    platform: str
    publisher: str = ""
    release_year: int = Field(..., alias="releaseYear")
    item_type: ItemType = Field(default=ItemType.GAME, alias="itemType")
    condition: Condition = Condition.UNKNOWN
    price_estimates: list[PriceEstimate] = Field(
        default_factory=list,
        alias="priceEstimates",
        # Older exports of the store used "estimatedPrices".
        validation_alias=AliasChoices("priceEstimates", "estimatedPrices", "price_estimates"),
    )

    class Config:
        frozen = True
        populate_by_name = True

    @field_validator("title", "platform")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def price_for(self, source_key: str) -> PriceEstimate | None:
        """First estimate whose source contains `source_key` (case-insensitive)."""
        key = source_key.lower()
        for estimate in self.price_estimates:
            if key in estimate.source.lower():
                return estimate
        return None

    def price_in(self, currency: str) -> PriceEstimate | None:
        """First estimate quoted in `currency`."""
        for estimate in self.price_estimates:
            if estimate.currency == currency:
                return estimate
        return None

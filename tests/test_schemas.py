import pytest
from pydantic import ValidationError

from gamevault.schemas import Condition, Item, ItemType, PriceEstimate


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Game", ItemType.GAME),
        (" console ", ItemType.CONSOLE),
        ("Zubehör", ItemType.ACCESSORY),
        ("Jeu", ItemType.GAME),
        ("", ItemType.GAME),
        (None, ItemType.GAME),
        ("Pinball", ItemType.GAME),
    ],
)
def test_item_type_from_cell(text, expected):
    assert ItemType.from_cell(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Boxed", Condition.BOXED),
        ("en vrac", Condition.LOOSE),
        ("Verpackt", Condition.BOXED),
        ("", Condition.UNKNOWN),
        ("mint", Condition.UNKNOWN),
    ],
)
def test_condition_from_cell(text, expected):
    assert Condition.from_cell(text) is expected


def test_item_accepts_store_aliases():
    item = Item.model_validate(
        {
            "title": "Halo",
            "platform": "Xbox",
            "publisher": "Microsoft",
            "releaseYear": 2001,
            "itemType": "Game",
            "condition": "Boxed",
            "estimatedPrices": [
                {"source": "ebay.com", "currency": "USD", "low": 5, "average": 10, "high": 15}
            ],
        }
    )
    assert item.release_year == 2001
    assert item.price_estimates[0].average == 10.0


def test_item_defaults():
    item = Item(title="Halo", platform="Xbox", release_year=2001)
    assert item.publisher == ""
    assert item.item_type is ItemType.GAME
    assert item.condition is Condition.UNKNOWN
    assert item.price_estimates == []


@pytest.mark.parametrize("field", ["title", "platform"])
def test_blank_required_text_is_rejected(field):
    values = {"title": "Halo", "platform": "Xbox", "release_year": 2001, field: "  "}
    with pytest.raises(ValidationError):
        Item(**values)


def test_items_are_immutable():
    item = Item(title="Halo", platform="Xbox", release_year=2001)
    with pytest.raises(ValidationError):
        item.title = "Halo 2"


def test_price_lookups(fully_priced_item):
    assert fully_priced_item.price_for("EBAY.FR").currency == "EUR"
    assert fully_priced_item.price_in("CHF").source == "ricardo.ch"
    assert fully_priced_item.price_in("JPY") is None
    assert PriceEstimate(source="x", currency="USD", average=1).low == 0.0

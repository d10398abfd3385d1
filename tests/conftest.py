import pytest

from gamevault.schemas import Condition, Item, ItemType, PriceEstimate


@pytest.fixture
def chrono_trigger() -> Item:
    return Item(
        title="Chrono Trigger",
        platform="SNES",
        publisher="Square",
        release_year=1995,
        item_type=ItemType.GAME,
        condition=Condition.BOXED,
        price_estimates=[
            PriceEstimate(source="ebay.com", currency="USD", low=40, average=65, high=90)
        ],
    )


@pytest.fixture
def fully_priced_item() -> Item:
    return Item(
        title="Nintendo 64",
        platform="Nintendo 64",
        publisher="Nintendo",
        release_year=1996,
        item_type=ItemType.CONSOLE,
        condition=Condition.LOOSE,
        price_estimates=[
            PriceEstimate(source="ebay.com", currency="USD", low=60, average=85.5, high=120),
            PriceEstimate(source="ricardo.ch", currency="CHF", low=50, average=70, high=95),
            PriceEstimate(source="anibis.ch", currency="CHF", low=45, average=65, high=90),
            PriceEstimate(source="ebay.fr", currency="EUR", low=55, average=75.25, high=110),
        ],
    )


@pytest.fixture
def english_csv() -> str:
    return (
        "Title,Platform,Publisher,Release Year,Item Type,Condition,"
        "eBay.com Price (Low),eBay.com Price (Avg),eBay.com Price (High),eBay.com Currency\n"
        '"Super Metroid","SNES","Nintendo",1994,Game,Boxed,50,80,110,USD\n'
        '"Game Boy","Game Boy","Nintendo",1989,Console,Loose,30,45,60,\n'
    )

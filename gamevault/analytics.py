import pandas as pd
from pydantic import BaseModel

from .schemas import Item


class CollectionSummary(BaseModel):
    """Headline numbers for a collection, as shown on the analytics page."""

    total_items: int = 0
    total_value_usd: float = 0.0
    total_value_chf: float = 0.0
    platforms_by_count: list[tuple[str, int]] = []
    platforms_by_value: list[tuple[str, float]] = []
    decades: list[tuple[str, int]] = []


def _to_frame(items: list[Item]) -> pd.DataFrame:
    """One row per item with the averages used for valuation (first USD / CHF estimate)."""
    rows = []
    for item in items:
        usd = item.price_in("USD")
        chf = item.price_in("CHF")
        rows.append(
            {
                "platform": item.platform,
                "release_year": item.release_year,
                "usd": usd.average if usd else 0.0,
                "chf": chf.average if chf else 0.0,
            }
        )
    return pd.DataFrame(rows, columns=["platform", "release_year", "usd", "chf"])


def summarize_collection(items: list[Item]) -> CollectionSummary:
    if not items:
        return CollectionSummary()

    df = _to_frame(items)
    df["decade"] = (df["release_year"] // 10 * 10).astype(str) + "s"

    # Stable sorts keep first-seen order for ties.
    by_platform = df.groupby("platform", sort=False)
    counts = by_platform.size().sort_values(ascending=False, kind="stable")
    values = by_platform["usd"].sum().sort_values(ascending=False, kind="stable")
    decades = df.groupby("decade").size().sort_index()

    return CollectionSummary(
        total_items=len(df),
        total_value_usd=float(df["usd"].sum()),
        total_value_chf=float(df["chf"].sum()),
        platforms_by_count=[(str(k), int(v)) for k, v in counts.items()],
        platforms_by_value=[(str(k), float(v)) for k, v in values.items()],
        decades=[(str(k), int(v)) for k, v in decades.items()],
    )

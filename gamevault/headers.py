"""
Header layout for collection CSV files.

Exports always use the English header row built by `export_header()`.
Imports resolve each logical column against whatever header the file has,
using the pattern table below. A pattern is a tuple of substrings that must
all occur in the lower-cased header cell. Adding a locale means adding
patterns here; nothing else changes.
"""

from dataclasses import dataclass

from . import settings

# --- Descriptive Columns ---
# Order matters: columns are bound in this order and a header cell can only
# be claimed once.
DESCRIPTIVE_COLUMNS = [
    ("title", "Title", [("title",), ("titre",), ("titel",)]),
    ("platform", "Platform", [("platform",), ("plattform",), ("plateforme",)]),
    ("publisher", "Publisher", [("publisher",), ("herausgeber",), ("éditeur",), ("editeur",), ("verlag",)]),
    (
        "release_year",
        "Release Year",
        [("release year",), ("année de sortie",), ("annee de sortie",), ("veröffentlichungsjahr",), ("erscheinungsjahr",)],
    ),
    ("item_type", "Item Type", [("item type",), ("type d'article",), ("type d’article",), ("elementtyp",), ("artikeltyp",)]),
    ("condition", "Condition", [("condition",), ("état",), ("etat",), ("zustand",)]),
]

REQUIRED_COLUMNS = ("title", "platform", "publisher", "release_year", "item_type")

# --- Price Columns ---
# (field, English header suffix, substrings accepted for the field part)
PRICE_FIELDS = [
    ("low", "Price (Low)", ("low", "bas", "min", "tief", "niedrig")),
    ("avg", "Price (Avg)", ("avg", "average", "moy", "durchschn", "mittel")),
    ("high", "Price (High)", ("high", "haut", "max", "hoch")),
    ("currency", "Currency", ("currency", "devise", "monnaie", "währung", "waehrung")),
]


@dataclass(frozen=True)
class LogicalColumn:
    name: str
    label: str
    patterns: tuple[tuple[str, ...], ...]
    # Substrings that disqualify a cell, e.g. "ebay.fr" for the eBay.com columns.
    excludes: tuple[str, ...] = ()

    def matches(self, cell: str) -> bool:
        if any(word in cell for word in self.excludes):
            return False
        return any(all(part in cell for part in pattern) for pattern in self.patterns)


def price_column_name(source_key: str, field: str) -> str:
    """Internal name of a price column, e.g. 'ebay.com:avg'."""
    return f"{source_key}:{field}"


def _build_columns() -> list[LogicalColumn]:
    columns = [
        LogicalColumn(name, label, tuple(patterns))
        for name, label, patterns in DESCRIPTIVE_COLUMNS
    ]
    all_keys = [source["key"] for source in settings.MARKETPLACE_SOURCES]
    for source in settings.MARKETPLACE_SOURCES:
        key = source["key"]
        names = [key, *source.get("short_names", [])]
        other_keys = tuple(other for other in all_keys if other != key)
        for field, suffix, words in PRICE_FIELDS:
            columns.append(
                LogicalColumn(
                    price_column_name(key, field),
                    f"{source['label']} {suffix}",
                    tuple((name, word) for name in names for word in words),
                    excludes=other_keys,
                )
            )
    return columns


LOGICAL_COLUMNS = _build_columns()


def export_header() -> list[str]:
    """The fixed header row written on export."""
    return [column.label for column in LOGICAL_COLUMNS]


def resolve_columns(header_cells: list[str]) -> dict[str, int]:
    """
    Maps each logical column name to the index of the first header cell that
    matches it. Columns with no matching cell are left out of the result.
    """
    cells = [str(cell).strip().lower() for cell in header_cells]
    claimed: set[int] = set()
    mapping: dict[str, int] = {}

    for column in LOGICAL_COLUMNS:
        for index, cell in enumerate(cells):
            if index in claimed or not cell:
                continue
            if column.matches(cell):
                mapping[column.name] = index
                claimed.add(index)
                break

    return mapping


def missing_required(mapping: dict[str, int]) -> list[str]:
    return [name for name in REQUIRED_COLUMNS if name not in mapping]

import csv
import io
import logging
import math
from dataclasses import dataclass, field
from decimal import Decimal

import pandas as pd
from pydantic import ValidationError

from . import headers, settings
from .exceptions import StructuralError
from .schemas import Condition, Item, ItemType, PriceEstimate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeResult:
    """Items that validated, plus how many data rows were read and dropped."""

    items: list[Item] = field(default_factory=list)
    rows_read: int = 0

    @property
    def rows_skipped(self) -> int:
        return self.rows_read - len(self.items)


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def _format_number(value: float) -> str:
    """Plain decimal text, never scientific notation ("0.00001", not "1e-05")."""
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(float(value))), "f")


def _parse_number(text: str) -> float | None:
    """Parses a price cell. Blank, non-numeric and non-finite cells give None."""
    text = text.strip()
    if not text:
        return None
    # Tolerate a decimal comma ("12,5") from localized spreadsheets.
    if "," in text and "." not in text:
        text = text.replace(",", ".")
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_year(text: str) -> int | None:
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    value = _parse_number(text)
    if value is not None and value.is_integer():
        return int(value)
    return None


class CollectionCsvCodec:
    """
    Converts collection items to and from a flat CSV document.

    Export always writes the English header in a fixed column order. Import
    accepts English, French or German headers in any order, drops rows that
    do not describe a valid item, and only raises StructuralError when the
    document itself is unusable.
    """

    def __init__(self, keep_zero_prices: bool = False):
        # When set, an explicit "0" average survives a round trip instead of
        # being treated as "no data".
        self.keep_zero_prices = keep_zero_prices

    # --- Export ---

    def encode(self, items: list[Item]) -> str:
        lines = [",".join(headers.export_header())]
        lines.extend(self._encode_row(item) for item in items)
        return "\n".join(lines)

    def _encode_row(self, item: Item) -> str:
        cells = [
            _quote(item.title),
            _quote(item.platform),
            _quote(item.publisher),
            str(item.release_year),
            item.item_type.value,
            item.condition.value,
        ]
        for source in settings.MARKETPLACE_SOURCES:
            estimate = item.price_for(source["key"])
            if estimate is None:
                cells.extend(["", "", "", ""])
                continue
            cells.extend(
                self._price_cell(value)
                for value in (estimate.low, estimate.average, estimate.high)
            )
            cells.append(estimate.currency or "")
        return ",".join(cells)

    def _price_cell(self, value: float) -> str:
        if not value and not self.keep_zero_prices:
            return ""
        return _format_number(value)

    # --- Import ---

    def decode(self, text: str) -> list[Item]:
        return self.decode_with_report(text).items

    def decode_with_report(self, text: str) -> DecodeResult:
        rows = self._read_rows(text)
        header, data_rows = rows[0], rows[1:]

        columns = headers.resolve_columns(header)
        missing = headers.missing_required(columns)
        if missing:
            raise StructuralError(
                f"Header row is missing required column(s): {', '.join(missing)}"
            )

        items = []
        for line_number, row in enumerate(data_rows, start=2):
            item = self._decode_row(row, columns)
            if item is None:
                logger.debug(f"Skipping CSV row {line_number}: not a valid item.")
                continue
            items.append(item)

        result = DecodeResult(items=items, rows_read=len(data_rows))
        logger.info(
            f"Decoded {len(result.items)} item(s) from {result.rows_read} row(s) "
            f"({result.rows_skipped} skipped)."
        )
        return result

    def _read_rows(self, text: str) -> list[list[str]]:
        if text is None or not text.strip():
            raise StructuralError("The file is empty.")

        body = text.lstrip("\ufeff")
        read_options = dict(header=None, dtype=str, keep_default_na=False, engine="python")
        try:
            header = pd.read_csv(io.StringIO(body), nrows=1, on_bad_lines="skip", **read_options)
            width = header.shape[1]
            # Rows wider than the header (trailing separators, stray cells)
            # are cut back to the header width instead of being dropped.
            frame = pd.read_csv(
                io.StringIO(body),
                skip_blank_lines=True,
                on_bad_lines=lambda line: line[:width],
                **read_options,
            )
        except (pd.errors.ParserError, pd.errors.EmptyDataError, csv.Error) as e:
            raise StructuralError(f"Could not parse CSV content: {e}") from e

        if frame.empty:
            raise StructuralError("No header row found.")

        return [
            ["" if not isinstance(cell, str) else cell for cell in row]
            for row in frame.values.tolist()
        ]

    def _decode_row(self, row: list[str], columns: dict[str, int]) -> Item | None:
        def cell(name: str) -> str:
            index = columns.get(name)
            if index is None or index >= len(row):
                return ""
            return row[index]

        release_year = _parse_year(cell("release_year"))
        if release_year is None:
            return None

        try:
            return Item(
                title=cell("title"),
                platform=cell("platform"),
                publisher=cell("publisher"),
                release_year=release_year,
                item_type=ItemType.from_cell(cell("item_type")),
                condition=Condition.from_cell(cell("condition")),
                price_estimates=self._decode_prices(cell),
            )
        except ValidationError:
            return None

    def _decode_prices(self, cell) -> list[PriceEstimate]:
        estimates = []
        for source in settings.MARKETPLACE_SOURCES:
            key = source["key"]
            average = _parse_number(cell(headers.price_column_name(key, "avg")))
            if average is None or average < 0:
                continue
            if average == 0 and not self.keep_zero_prices:
                continue

            low = _parse_number(cell(headers.price_column_name(key, "low")))
            high = _parse_number(cell(headers.price_column_name(key, "high")))
            currency = cell(headers.price_column_name(key, "currency")).strip()
            estimates.append(
                PriceEstimate(
                    source=key,
                    currency=currency or source["currency"],
                    low=low or 0.0,
                    average=average,
                    high=high or 0.0,
                )
            )
        return estimates


_default_codec = CollectionCsvCodec(keep_zero_prices=settings.KEEP_ZERO_PRICES)


def encode(items: list[Item]) -> str:
    """Serializes items to CSV text with the default codec."""
    return _default_codec.encode(items)


def decode(text: str) -> list[Item]:
    """Parses CSV text into the valid items it contains, with the default codec."""
    return _default_codec.decode(text)


def decode_with_report(text: str) -> DecodeResult:
    return _default_codec.decode_with_report(text)

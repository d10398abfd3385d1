import json
import logging
from pathlib import Path

from pydantic import ValidationError

from gamevault import data_handler, settings
from gamevault.csv_codec import CollectionCsvCodec
from gamevault.pipeline import DataPipeline
from gamevault.schemas import Item

logger = logging.getLogger(__name__)


class ExportPipeline(DataPipeline):
    """Writes a stored collection (or wishlist) out as a dated CSV file."""

    def __init__(
        self,
        collection_path: Path | None = None,
        subject: str = settings.COLLECTION_SUBJECT,
        codec: CollectionCsvCodec | None = None,
        test_mode: bool = False,
    ):
        super().__init__("export", subject=subject, test_mode=test_mode)
        self.collection_path = Path(collection_path or settings.INPUT_DIR / settings.COLLECTION_FILENAME)
        self.codec = codec or CollectionCsvCodec(keep_zero_prices=settings.KEEP_ZERO_PRICES)
        self.items: list[Item] = []

    def extract(self) -> list[Item] | None:
        if not self.collection_path.exists():
            logger.warning(f"⚠️ Collection file not found: {self.collection_path}")
            return None

        try:
            items = data_handler.load_collection(self.collection_path)
        except (ValidationError, json.JSONDecodeError) as e:
            logger.error(f"❌ Collection file {self.collection_path.name} is not valid.")
            logger.error(e)
            return None

        if not items:
            logger.warning(f"⚠️ Your {self.subject.replace('-', ' ')} is empty. Nothing to export.")
            return None

        logger.info(f"  > Loaded {len(items)} item(s) from {self.collection_path.name}")
        return items

    def transform(self, raw_data: list[Item]) -> str:
        self.items = raw_data
        return self.codec.encode(raw_data)

    def load(self, data: str) -> Path:
        csv_path = data_handler.save_export(data, self.subject)
        self.summary.update({"file": csv_path.name, "exported": len(self.items)})
        return csv_path

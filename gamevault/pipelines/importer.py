import logging
from pathlib import Path

from gamevault import data_handler, settings, utils
from gamevault.csv_codec import CollectionCsvCodec, DecodeResult
from gamevault.exceptions import StructuralError
from gamevault.pipeline import DataPipeline

logger = logging.getLogger(__name__)


class ImportPipeline(DataPipeline):
    """Reads an uploaded CSV file and stores the valid items it contains."""

    def __init__(
        self,
        csv_path: Path,
        subject: str = settings.COLLECTION_SUBJECT,
        codec: CollectionCsvCodec | None = None,
        test_mode: bool = False,
    ):
        super().__init__("import", subject=subject, test_mode=test_mode)
        self.csv_path = Path(csv_path)
        self.codec = codec or CollectionCsvCodec(keep_zero_prices=settings.KEEP_ZERO_PRICES)

    def extract(self) -> str | None:
        logger.info(f"  > Reading: {self.csv_path.name}")
        return utils.read_text_file(self.csv_path)

    def transform(self, raw_data: str) -> DecodeResult | None:
        try:
            return self.codec.decode_with_report(raw_data)
        except StructuralError as e:
            logger.error(f"❌ Could not read this file ({self.csv_path.name}): {e}")
            return None

    def load(self, data: DecodeResult) -> DecodeResult:
        logger.info(f"  > 📊 Imported {len(data.items)} item(s), skipped {data.rows_skipped} row(s).")
        self.summary.update(
            {
                "file": self.csv_path.name,
                "imported": len(data.items),
                "skipped": data.rows_skipped,
            }
        )

        if not data.items:
            logger.warning("No valid items to save.")
        elif settings.SAVE_JSON_OUTPUT:
            json_path = (
                settings.OUTPUT_DIR
                / f"{self.subject}-import-{utils.get_date_suffix_for_filename()}.json"
            )
            data_handler.save_collection(data.items, json_path)
        else:
            logger.info("INFO: Skipping JSON file save as per configuration.")

        return data

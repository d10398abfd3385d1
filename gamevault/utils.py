import logging
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)


def get_date_suffix_for_filename() -> str:
    """Returns the current date as a YYYY-MM-DD string for filenames."""
    return datetime.now().strftime("%Y-%m-%d")


def export_filename(subject: str) -> str:
    """File name offered for an export, e.g. 'game-collection-2024-05-01.csv'."""
    return f"{subject}-{get_date_suffix_for_filename()}.csv"


def read_text_file(file_path: Path) -> str | None:
    """
    Reads an uploaded file with a multi-stage encoding fallback:
    1. UTF-8 with BOM support ('utf-8-sig').
    2. Latin-1, which accepts any byte (spreadsheets saved by older Excel versions).
    Returns None when the file does not exist.
    """
    try:
        return file_path.read_text(encoding="utf-8-sig")

    except UnicodeDecodeError:
        logger.info(f"UTF-8 decoding failed for {file_path.name}. Retrying with 'latin-1'.")
        return file_path.read_text(encoding="latin-1")

    except FileNotFoundError:
        logger.warning(f"File not found at {file_path}, skipping.")
        return None

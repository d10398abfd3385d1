import json
import logging
from pathlib import Path
from typing import Any

import requests
from pydantic import TypeAdapter

from . import settings
from . import utils
from .schemas import Item

logger = logging.getLogger(__name__)

_ITEM_LIST = TypeAdapter(list[Item])


def load_collection(path: Path) -> list[Item]:
    """
    Loads a stored collection (a JSON array of items using camelCase keys).
    Raises pydantic.ValidationError if an entry does not match the Item schema.
    """
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return _ITEM_LIST.validate_python(raw)


def save_collection(items: list[Item], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    json_data = [item.model_dump(mode="json", by_alias=True, exclude_none=True) for item in items]
    with open(path, "w", encoding="utf-8") as f:
        json.dump(json_data, f, indent=2, ensure_ascii=False)
    logger.info(f"✅ Collection saved to: {path}")
    return path


def save_export(csv_text: str, subject: str) -> Path:
    """Writes exported CSV text to OUTPUT_DIR as '<subject>-<YYYY-MM-DD>.csv'."""
    settings.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    csv_path = settings.OUTPUT_DIR / utils.export_filename(subject)
    # newline="" keeps our "\n" line breaks as written on every platform.
    with open(csv_path, "w", encoding="utf-8", newline="") as f:
        f.write(csv_text)
    logger.info(f"✅ Export saved to: {csv_path}")
    return csv_path


def post_to_webhook(summary: dict[str, Any], report_type: str) -> bool:
    """
    Posts a run summary to the configured webhook.
    Returns True on success; failures are logged, never raised.
    """
    if not settings.WEBHOOK_URL:
        logger.warning("⚠️ WEBHOOK_URL not set. Skipping webhook post.")
        return False

    logger.info(f"🚀 Posting {report_type} summary to webhook.")
    payload = {"reportType": report_type, "summary": summary}

    try:
        response = requests.post(settings.WEBHOOK_URL, json=payload, timeout=15)
        response.raise_for_status()
        logger.info("✅ Summary successfully posted to webhook.")
        return True
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ Error posting to webhook: {e}")
        return False

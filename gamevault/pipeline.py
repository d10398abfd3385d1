import logging
from abc import ABC, abstractmethod
from typing import Any

from gamevault import settings, data_handler

logger = logging.getLogger(__name__)


class DataPipeline(ABC):
    """
    Abstract base class for the collection import / export jobs.
    Follows an Extract -> Transform -> Load (ETL) pattern.
    """

    def __init__(self, report_type: str, subject: str = settings.COLLECTION_SUBJECT, test_mode: bool = False):
        self.report_type = report_type
        self.subject = subject
        # Test mode never posts to the webhook.
        self.test_mode = test_mode
        self.summary: dict[str, Any] = {"subject": subject}

    def run(self) -> Any:
        """
        Orchestrates the pipeline execution. Returns whatever `load` produced,
        or None when a stage had nothing to hand on.
        """
        logger.info(f"🚀 STEP: {self.report_type.upper()} ({self.subject})")
        logger.info("-" * 30)

        # --- 1. EXTRACT ---
        raw_data = self.extract()
        if raw_data is None:
            logger.warning(f"⚠️ Nothing extracted for {self.report_type}.")
            return None

        # --- 2. TRANSFORM ---
        transformed = self.transform(raw_data)
        if transformed is None:
            logger.error(f"❌ Transformation failed for {self.report_type}.")
            return None

        # --- 3. LOAD ---
        result = self.load(transformed)
        self.notify()

        logger.info(f"✅ {self.report_type.capitalize()} Pipeline Finished.")
        logger.info("=" * 60)
        return result

    @abstractmethod
    def extract(self) -> Any:
        """Reads the input. Returns None when there is nothing to process."""

    @abstractmethod
    def transform(self, raw_data: Any) -> Any:
        """Converts the input. Returns None when it cannot be interpreted."""

    @abstractmethod
    def load(self, data: Any) -> Any:
        """Persists the result and fills in self.summary."""

    def notify(self):
        if self.test_mode:
            logger.info("🧪 Test Mode: Skipping webhook post.")
            return
        data_handler.post_to_webhook(self.summary, report_type=self.report_type)

import logging
from abc import ABC, abstractmethod
from typing import Any

from seller_ranking import data_handler

logger = logging.getLogger(__name__)


class DataPipeline(ABC):
    """
    Abstract base class for reporting pipelines.
    Follows an Extract -> Transform -> Load (ETL) pattern.
    """

    def __init__(self, report_type: str, test_mode: bool = False):
        self.report_type = report_type
        self.test_mode = test_mode
        # Run metadata reported at the end and sent along with the webhook payload
        self.status_summary: dict[str, Any] = {}
        self.saved_files = {}

    def run(self) -> bool:
        """
        Orchestrates the pipeline execution. Returns True when data was produced.
        """
        logger.info(f"🚀 STEP: {self.report_type.upper()} REPORT")
        logger.info("-" * 30)

        # --- 1. EXTRACT ---
        raw_data = self.extract()
        if raw_data is None:
            logger.warning(f"⚠️ No data extracted for {self.report_type}. Nothing to do.")
            return False

        # --- 2. TRANSFORM ---
        validated_data = self.transform(raw_data)
        if validated_data is None:
            logger.error(f"❌ Transformation failed for {self.report_type}.")
            return False

        # --- 3. LOAD ---
        self.load(validated_data)

        logger.info(f"✅ {self.report_type.capitalize()} Pipeline Finished.\n")
        logger.info("=" * 60)
        return True

    @abstractmethod
    def extract(self) -> Any | None:
        """
        Responsible for finding and reading the input, returning it raw.
        Should also populate self.status_summary with what was found.
        """
        pass

    @abstractmethod
    def transform(self, raw_data: Any) -> list[Any] | None:
        """
        Responsible for the actual computation and validation.
        Returns a list of validated Pydantic models.
        """
        pass

    def load(self, validated_data: list[Any]):
        """
        Saves data to disk and posts to webhook.
        """
        # 1. Print Status Summary
        if self.status_summary:
            logger.info("\n--- Final Status Summary ---")
            for key, value in self.status_summary.items():
                logger.info(f"{key}: {value if value is not None else 'n/a'}")

        # 2. Save Outputs (CSV/JSON)
        if validated_data:
            self.saved_files = data_handler.save_outputs(
                validated_data, self.output_filename_base()
            )
        else:
            logger.warning("No data to save to disk.")

        # 3. Post to Webhook
        if not self.test_mode:
            data_handler.post_to_webhook(
                validated_data=validated_data,
                metadata=self.status_summary,
                report_type=self.report_type,
            )
        else:
            logger.info("🧪 Test Mode: Skipping webhook post.")

    def output_filename_base(self) -> str:
        return f"{self.report_type}_report"

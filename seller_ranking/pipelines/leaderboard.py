import logging
from pathlib import Path
from typing import Any

from seller_ranking import data_handler, settings, utils
from seller_ranking.analysis import analyze_sales_data
from seller_ranking.diagnostics import LoggingDiagnostics, RecordingDiagnostics
from seller_ranking.exceptions import SalesDataError
from seller_ranking.pipeline import DataPipeline
from seller_ranking.schemas import SellerReport
from seller_ranking.strategies import DEFAULT_OPTIONS, AnalysisOptions

logger = logging.getLogger(__name__)


class LeaderboardPipeline(DataPipeline):
    def __init__(
        self,
        input_path: Path | None = None,
        options: AnalysisOptions = DEFAULT_OPTIONS,
        test_mode: bool = False,
    ):
        super().__init__("leaderboard", test_mode=test_mode)
        self.input_path = input_path
        self.options = options
        self.status_summary = {
            "source_file": None,
            "data_date": None,
            "sellers": 0,
            "products": 0,
            "purchase_records": 0,
        }

    def extract(self) -> dict[str, Any] | None:
        logger.info("--- Locating Sales Data ---")

        if self.input_path is not None:
            path = self.input_path
            data_date = None
        else:
            found_info = utils.find_latest_report(settings.INPUT_DIR, settings.SALES_DATA_PREFIX)
            if not found_info:
                logger.warning(
                    f"  > ⚠️  No '{settings.SALES_DATA_PREFIX}*' file in {settings.INPUT_DIR}."
                )
                return None
            path, data_date = found_info

        logger.info(f"  > Found: {path.name} (File Date: {data_date or 'n/a'})")
        raw = data_handler.load_sales_data(path)
        if raw is None:
            return None

        self.status_summary["source_file"] = path.name
        self.status_summary["data_date"] = data_date.isoformat() if data_date else None
        for name in ("sellers", "products", "purchase_records"):
            collection = raw.get(name)
            self.status_summary[name] = len(collection) if isinstance(collection, list) else 0

        logger.info(
            f"  > 📊 {self.status_summary['sellers']} sellers, "
            f"{self.status_summary['products']} products, "
            f"{self.status_summary['purchase_records']} purchase records."
        )
        return raw

    def transform(self, raw_data: dict[str, Any]) -> list[SellerReport] | None:
        logger.info("\n--- Aggregating and Ranking Sellers ---")

        diagnostics = RecordingDiagnostics(forward_to=LoggingDiagnostics())
        try:
            reports = analyze_sales_data(raw_data, self.options, diagnostics)
        except SalesDataError as e:
            logger.error("❌ Sales data rejected!")
            logger.error(e)
            return None

        self.status_summary.update(diagnostics.summary())
        logger.info(f"✅ Leaderboard built ({len(reports)} sellers).")

        df = data_handler.leaderboard_frame(reports)
        logger.info("\n--- Final Leaderboard ---")
        logger.info(df.to_string(index=False))
        return reports

    def output_filename_base(self) -> str:
        return settings.LEADERBOARD_FILENAME_BASE

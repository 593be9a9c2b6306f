import json
import logging
from pathlib import Path
from typing import Any, Optional

import pandas as pd
import requests

from . import settings
from . import utils
from .schemas import SellerReport, TopProduct

logger = logging.getLogger(__name__)


def load_sales_data(file_path: Path) -> Optional[dict[str, Any]]:
    """Reads an input bundle ({sellers, products, purchase_records}) from a JSON file."""
    raw = utils.load_json(file_path)
    if raw is None:
        return None
    if not isinstance(raw, dict):
        logger.error(f"❌ {file_path.name} does not contain a JSON object.")
        return None
    return raw


def leaderboard_frame(reports: list[SellerReport]) -> pd.DataFrame:
    """One row per seller, in rank order, with the friendly column aliases."""
    rows = [report.model_dump(by_alias=True, exclude={"top_products"}) for report in reports]
    columns = [
        info.alias
        for field, info in SellerReport.model_fields.items()
        if field != "top_products"
    ]
    df = pd.DataFrame(rows, columns=columns)
    df.insert(0, "Rank", range(1, len(df) + 1))
    return df


def top_products_frame(reports: list[SellerReport]) -> pd.DataFrame:
    """Long format: one row per (seller, top product)."""
    records = [report.model_dump() for report in reports]
    product_columns = [info.alias for info in TopProduct.model_fields.values()]

    df = pd.json_normalize(records, record_path="top_products", meta=["seller_id", "name"])
    if df.empty:
        return pd.DataFrame(columns=["Seller ID", "Seller Name", "Position", *product_columns])

    df["Position"] = df.groupby("seller_id").cumcount() + 1
    df = df.rename(
        columns={
            "seller_id": "Seller ID",
            "name": "Seller Name",
            **{field: info.alias for field, info in TopProduct.model_fields.items()},
        }
    )
    return df[["Seller ID", "Seller Name", "Position", *product_columns]]


def save_outputs(validated_data: list[SellerReport], filename_base: str) -> dict[str, Path]:
    """Saves the leaderboard to CSV and conditionally to JSON, with dated filenames."""
    settings.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    date_suffix = utils.get_date_suffix_for_filename()

    csv_path = settings.OUTPUT_DIR / f"{filename_base}_{date_suffix}.csv"
    top_csv_path = settings.OUTPUT_DIR / f"{filename_base}_top_products_{date_suffix}.csv"
    json_path = settings.OUTPUT_DIR / f"{filename_base}_{date_suffix}.json"

    saved = {}

    leaderboard_frame(validated_data).to_csv(csv_path, index=False)
    logger.info(f"✅ Leaderboard saved to: {csv_path}")
    saved["csv"] = csv_path

    top_products_frame(validated_data).to_csv(top_csv_path, index=False)
    logger.info(f"✅ Top products saved to: {top_csv_path}")
    saved["top_products_csv"] = top_csv_path

    if settings.SAVE_JSON_OUTPUT:
        with open(json_path, "w", encoding="utf-8") as f:
            json_data = [item.model_dump(by_alias=True) for item in validated_data]
            json.dump(json_data, f, indent=2, ensure_ascii=False, default=str)
        logger.info(f"✅ JSON output saved to: {json_path}")
        saved["json"] = json_path
    else:
        logger.info("INFO: Skipping JSON file save as per configuration.")

    return saved


def post_to_webhook(
    validated_data: list[SellerReport], metadata: dict[str, Any], report_type: str
) -> bool:
    """
    Posts the leaderboard and its run metadata to the webhook.
    Returns True when the post went through.
    """
    if not settings.WEBHOOK_URL:
        logger.warning("⚠️ WEBHOOK_URL not set. Skipping webhook post.")
        return False

    logger.info(f"🚀 Posting {report_type} data to webhook: {settings.WEBHOOK_URL}")

    payload = {
        "reportType": report_type,
        "metadata": metadata,
        "reportData": [
            item.model_dump(mode="json", by_alias=True) for item in validated_data
        ],
    }

    try:
        response = requests.post(settings.WEBHOOK_URL, json=payload, timeout=15)
        response.raise_for_status()
        logger.info("✅ Data successfully posted to webhook.")
        return True
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ Error posting to webhook: {e}")
        return False

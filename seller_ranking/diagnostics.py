"""
Sinks for non-fatal problems found while aggregating purchases.

The aggregation code reports unmatched references through a sink instead of
printing, so callers decide whether they are logged, collected or ignored.
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)


class DiagnosticsSink(Protocol):
    def seller_not_found(self, seller_id: str, record_id: str) -> None: ...

    def product_not_found(self, sku: str, record_id: str) -> None: ...


class LoggingDiagnostics:
    """Default sink: one warning per skipped record or line item."""

    def __init__(self, log: logging.Logger | None = None):
        self.log = log or logger

    def seller_not_found(self, seller_id: str, record_id: str) -> None:
        self.log.warning(
            f"⚠️ Seller {seller_id} not found, skipping purchase record {record_id}."
        )

    def product_not_found(self, sku: str, record_id: str) -> None:
        self.log.warning(f"⚠️ SKU {sku} not found in catalog (purchase record {record_id}).")


@dataclass
class RecordingDiagnostics:
    """Collects skipped references, optionally forwarding them to another sink."""

    missing_sellers: list[tuple[str, str]] = field(default_factory=list)
    missing_products: list[tuple[str, str]] = field(default_factory=list)
    forward_to: DiagnosticsSink | None = None

    def seller_not_found(self, seller_id: str, record_id: str) -> None:
        self.missing_sellers.append((seller_id, record_id))
        if self.forward_to is not None:
            self.forward_to.seller_not_found(seller_id, record_id)

    def product_not_found(self, sku: str, record_id: str) -> None:
        self.missing_products.append((sku, record_id))
        if self.forward_to is not None:
            self.forward_to.product_not_found(sku, record_id)

    def summary(self) -> dict[str, int]:
        return {
            "skipped_records": len(self.missing_sellers),
            "skipped_line_items": len(self.missing_products),
        }

"""
SKU Deduplicator

Keeps SKUs unique within one import by renaming collisions
(ABC, ABC-2, ABC-3, ...). One instance per transform call.
"""

import logging
from typing import Optional, Set, Tuple

from ..models import CanonicalField, TransformWarning

logger = logging.getLogger(__name__)


class SkuDeduplicator:
    """
    Registry of SKUs emitted so far in one import.

    Usage:
        skus = SkuDeduplicator()
        sku, warning = skus.resolve("ABC", row=2)   # "ABC", None
        sku, warning = skus.resolve("ABC", row=3)   # "ABC-2", TransformWarning
    """

    def __init__(self):
        self._seen: Set[str] = set()

    def __contains__(self, sku: str) -> bool:
        return sku in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def resolve(self, sku: str, row: int) -> Tuple[str, Optional[TransformWarning]]:
        """
        Return a SKU not used earlier in this import.

        Empty SKUs are returned as-is and never reserved, so any number of
        variants may have no SKU.

        Args:
            sku: SKU read from the row
            row: File row number, used in the warning

        Returns:
            Tuple of (unique SKU, warning if it had to be renamed)
        """
        if not sku:
            return '', None

        warning = None
        if sku in self._seen:
            suffix = 2
            while f"{sku}-{suffix}" in self._seen:
                suffix += 1
            renamed = f"{sku}-{suffix}"
            logger.debug("Row %d: duplicate SKU %s renamed to %s", row, sku, renamed)
            warning = TransformWarning(
                row=row,
                field=CanonicalField.SKU.value,
                message=f"重複SKU: {sku} → {renamed}",
            )
            sku = renamed

        self._seen.add(sku)
        return sku, warning

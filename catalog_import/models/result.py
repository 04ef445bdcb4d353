"""
Transform result models.

Errors and warnings carry the spreadsheet row number an operator sees:
the header is row 1, so the first data row is row 2.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from .product import VualProduct

# Offset from 0-based data row index to the row number shown to operators
HEADER_ROW_OFFSET = 2


def display_row(index: int) -> int:
    """Convert a 0-based data row index to its 1-based file row number."""
    return index + HEADER_ROW_OFFSET


@dataclass
class TransformIssue:
    """Problem found in one row, tied to the field it concerns."""
    row: int
    field: str
    message: str


@dataclass
class TransformError(TransformIssue):
    """The offending product is left out of the result."""


@dataclass
class TransformWarning(TransformIssue):
    """Recorded for the operator; the product is still imported."""


@dataclass
class TransformOptions:
    """Import-wide defaults supplied by the caller."""
    default_category: str = ""
    default_currency: str = "JPY"


@dataclass
class TransformResult:
    """Output of one transform call."""
    products: List[VualProduct] = field(default_factory=list)
    errors: List[TransformError] = field(default_factory=list)
    warnings: List[TransformWarning] = field(default_factory=list)

    @property
    def variant_count(self) -> int:
        return sum(len(p.variants) for p in self.products)

    def unique_brand_names(self) -> List[str]:
        """Distinct brand names in first-seen order, for brand resolution before saving."""
        seen: Dict[str, None] = {}
        for product in self.products:
            if product.brand_name:
                seen.setdefault(product.brand_name, None)
        return list(seen)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'products': [asdict(p) for p in self.products],
            'errors': [asdict(e) for e in self.errors],
            'warnings': [asdict(w) for w in self.warnings],
        }

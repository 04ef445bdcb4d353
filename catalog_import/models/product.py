"""
Product data models.

Pure data classes for representing normalized catalog products.
No business logic - only data structure definitions.
"""

from dataclasses import dataclass, field
from typing import List, Optional

STATUS_DRAFT = 'draft'
STATUS_PUBLISHED = 'published'


@dataclass
class VualProductImage:
    """Product image; color None means it applies to every color."""
    url: str
    color: Optional[str] = None


@dataclass
class VualProductVariant:
    """Purchasable color/size combination."""
    color: Optional[str] = None
    size: Optional[str] = None
    sku: str = ""
    stock: int = 0
    price_override: Optional[float] = None  # only when it differs from product price


@dataclass
class VualProduct:
    """
    Normalized product ready to be handed to the catalog persistence layer.

    One product becomes one catalog entry with its images and variants.
    Currency is the import-wide default, never read per row.
    """

    # Core fields (required)
    name: str
    price: float
    category: str
    currency: str

    name_en: Optional[str] = None
    description: Optional[str] = None     # plain text, HTML stripped
    brand_name: Optional[str] = None
    tags: Optional[List[str]] = None
    status: str = STATUS_DRAFT             # "draft" or "published"

    images: List[VualProductImage] = field(default_factory=list)
    variants: List[VualProductVariant] = field(default_factory=list)

    def __post_init__(self):
        """Validate required fields after initialization."""
        if not self.name:
            raise ValueError("Product name is required")
        if self.price is None or self.price < 0:
            raise ValueError("Product price must be a non-negative number")
        if self.status not in (STATUS_DRAFT, STATUS_PUBLISHED):
            raise ValueError(f"Unknown product status: {self.status!r}")

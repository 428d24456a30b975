"""Product records stored and returned by the index."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional, Tuple

# Fields whose text is tokenized into the index, in concatenation order.
INDEXED_FIELDS: Tuple[str, ...] = ("product_name", "category", "store_name")


@dataclass(frozen=True)
class Product:
    """One catalog row. Absent values are stored as empty strings."""

    product_name: Optional[str] = ""
    price: Optional[str] = ""
    description: Optional[str] = ""
    image_url: Optional[str] = ""
    availability: Optional[str] = ""
    category: Optional[str] = ""
    store_name: Optional[str] = ""

    def __post_init__(self) -> None:
        for item in fields(self):
            if getattr(self, item.name) is None:
                object.__setattr__(self, item.name, "")

    def indexed_text(self) -> str:
        """Join the indexed fields with single spaces."""
        return " ".join(getattr(self, name) for name in INDEXED_FIELDS)

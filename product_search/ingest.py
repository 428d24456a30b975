"""
Ingestion helpers for building the product index.

Reads a header-bearing CSV catalog and turns each row into a ``Product``.
Header names are matched case-insensitively; unknown columns are ignored and
missing ones yield empty values. Problems with the file are reported as a
single log line and never abort ingestion of what was already read.
"""

from __future__ import annotations

import codecs
import csv
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Sequence, Union

from .records import Product

logger = logging.getLogger("product_search.ingest")

# Lower-cased CSV header -> Product attribute.
COLUMNS: Dict[str, str] = {
    "product name": "product_name",
    "price": "price",
    "description": "description",
    "image url": "image_url",
    "availability": "availability",
    "category": "category",
    "store name": "store_name",
}


def _column_positions(header: Sequence[str]) -> Dict[str, int]:
    positions: Dict[str, int] = {}
    for idx, name in enumerate(header):
        attribute = COLUMNS.get(name.strip().lower())
        # first occurrence wins for duplicated headers
        if attribute is not None and attribute not in positions:
            positions[attribute] = idx
    return positions


def _row_to_product(row: Sequence[str], positions: Dict[str, int]) -> Product:
    values = {
        attribute: row[idx].strip() if idx < len(row) else ""
        for attribute, idx in positions.items()
    }
    return Product(**values)


def iter_products(path: Union[str, Path], encoding: str = "utf-8") -> Iterator[Product]:
    """Yield products from the CSV file at ``path`` one row at a time.

    Raises ``FileNotFoundError``, ``csv.Error`` and ``UnicodeDecodeError``
    unchanged; ``load_products`` turns them into diagnostics.
    """
    csv_path = Path(path)
    # utf-8-sig transparently drops a byte-order mark written by spreadsheets
    if codecs.lookup(encoding).name == "utf-8":
        encoding = "utf-8-sig"

    with csv_path.open("r", encoding=encoding, newline="") as handle:
        reader = csv.reader(handle, strict=True)
        header = next(reader, None)
        if header is None:
            return
        positions = _column_positions(header)
        missing = sorted(set(COLUMNS.values()) - set(positions))
        if missing:
            logger.debug("Columns missing from %s: %s", csv_path, ", ".join(missing))

        for row in reader:
            if not row or all(not cell.strip() for cell in row):
                continue
            yield _row_to_product(row, positions)


def load_products(path: Union[str, Path], encoding: str = "utf-8") -> List[Product]:
    """Load every product from ``path``.

    A missing file gives an empty list; a malformed or undecodable file gives
    the products parsed before the error. Either case is logged once.
    """
    products: List[Product] = []
    csv_path = Path(path)
    if not csv_path.is_file():
        logger.error("Catalog file not found: %s", csv_path)
        return products

    try:
        for product in iter_products(csv_path, encoding=encoding):
            products.append(product)
    except (csv.Error, UnicodeDecodeError) as exc:
        logger.error("Error reading CSV file %s: %s", csv_path, exc)
        return products
    except (OSError, LookupError) as exc:
        logger.error("Could not read catalog file %s: %s", csv_path, exc)
        return products

    logger.info("Loaded %d products from %s", len(products), csv_path)
    return products

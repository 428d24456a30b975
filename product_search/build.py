from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from config_loader import ConfigError, load_yaml_config

logger = logging.getLogger("product_search.build")

from .config import LogsConfig, SearchConfig
from .index import InvertedIndex
from .ingest import load_products
from .logs import configure_logging
from .records import Product


@dataclass(frozen=True)
class BuildSummary:
    documents: int = 0
    # per-record distinct-term sum reported by the index
    indexed_terms: int = 0
    unique_terms: int = 0

    def as_dict(self) -> Dict[str, object]:
        return {
            "documents": self.documents,
            "indexed_terms": self.indexed_terms,
            "unique_terms": self.unique_terms,
        }


def build_index(products: Iterable[Product]) -> Tuple[InvertedIndex, BuildSummary]:
    """Index ``products`` in iteration order with ids 1..N."""
    index = InvertedIndex()
    assigned = index.add_documents(products)
    stats = index.stats()
    summary = BuildSummary(
        documents=stats.documents,
        indexed_terms=stats.indexed_terms,
        unique_terms=stats.unique_terms,
    )
    logger.info(
        "Index built: documents=%d, indexed_terms=%d, unique_terms=%d",
        summary.documents,
        summary.indexed_terms,
        summary.unique_terms,
    )
    if assigned:
        logger.debug("Assigned document ids %d..%d", assigned[0], assigned[-1])
    return index, summary


def build_index_from_csv(
    catalog: Union[str, Path],
    *,
    encoding: str = "utf-8",
) -> Tuple[InvertedIndex, BuildSummary]:
    logger.info("Reading product data from %s", catalog)
    products = load_products(catalog, encoding=encoding)
    return build_index(products)


def resolve_settings(args: argparse.Namespace) -> SearchConfig:
    """Merge the optional YAML config with command line overrides."""
    app_config = load_yaml_config(args.config)
    settings = SearchConfig.from_app_config(app_config)
    if args.catalog:
        settings.catalog.path = str(Path(args.catalog).resolve())
    if args.log_level:
        settings.logs = LogsConfig(log_level=args.log_level, log_file=settings.logs.log_file)
    return settings


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML configuration file (built-in defaults when omitted).",
    )
    parser.add_argument(
        "--catalog",
        default=None,
        help="CSV product catalog to index (defaults to catalog.path).",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        help="Logging level override (defaults to logs.log_level).",
    )


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build the product keyword index and print its statistics.")
    add_common_arguments(parser)
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)

    try:
        settings = resolve_settings(args)
    except (ConfigError, ValueError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1

    configure_logging(settings.logs)

    _, summary = build_index_from_csv(settings.catalog.path, encoding=settings.catalog.encoding)
    print(
        f"Index built from {settings.catalog.path} "
        f"(documents={summary.documents}, indexed_terms={summary.indexed_terms}, "
        f"unique_terms={summary.unique_terms})"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

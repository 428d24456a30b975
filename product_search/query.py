"""Interactive CLI for running keyword searches against the product index."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from config_loader import ConfigError

from .build import add_common_arguments, build_index_from_csv, resolve_settings
from .index import InvertedIndex
from .logs import configure_logging
from .records import Product

logger = logging.getLogger("product_search.query")

EXIT_COMMAND = "exit"
PROMPT = "Enter keyword to search: "
RULE = "-" * 51


def render_results(keyword: str, results: Sequence[Product], out: TextIO) -> None:
    """Print ``results`` numbered from 1 with name, price and store."""
    print(file=out)
    print(RULE, file=out)
    print(f'Search Results for: "{keyword}"', file=out)

    if not results:
        print("No matching products found.", file=out)
    else:
        print(f"Found in {len(results)} document(s):", file=out)
        for number, product in enumerate(results, start=1):
            print(file=out)
            print(f"Document {number}:", file=out)
            print(f"  Product Name : {product.product_name}", file=out)
            print(f"  Price        : {product.price}", file=out)
            print(f"  Store        : {product.store_name}", file=out)
    print(RULE, file=out)


def run_search_interface(index: InvertedIndex, lines: Iterable[str], out: TextIO) -> int:
    """Answer one query per input line until ``exit`` or end of input.

    Returns the number of searches executed.
    """
    print(file=out)
    print(RULE, file=out)
    print("You can now search any product keyword.", file=out)
    print(f"Type '{EXIT_COMMAND}' anytime to close the program.", file=out)
    print(RULE, file=out)

    searches = 0
    source = iter(lines)
    while True:
        print(file=out)
        print(PROMPT, end="", file=out)
        out.flush()
        raw = next(source, None)
        if raw is None:
            print(file=out)
            break

        query = raw.strip()
        if query.lower() == EXIT_COMMAND:
            break
        if not query:
            print("Please type a valid search word.", file=out)
            continue

        results = index.search(query)
        logger.debug("Query %r matched %d product(s)", query, len(results))
        render_results(query, results, out)
        searches += 1

    print(file=out)
    print("Thank you for using the Product Search Engine!", file=out)
    return searches


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search the product catalog by keyword.")
    add_common_arguments(parser)
    parser.add_argument(
        "--query",
        dest="queries",
        action="append",
        default=None,
        help="Run this query and exit instead of prompting (repeatable).",
    )
    return parser.parse_args(argv)


def main(
    argv: Optional[List[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = parse_args(argv)
    out = stdout or sys.stdout

    try:
        settings = resolve_settings(args)
    except (ConfigError, ValueError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1

    configure_logging(settings.logs)

    print("=== PRODUCT SEARCH ENGINE (INVERTED INDEX) ===", file=out)
    print(f"Reading product data from file: {settings.catalog.path}", file=out)

    index, summary = build_index_from_csv(settings.catalog.path, encoding=settings.catalog.encoding)
    if index.is_empty:
        print("No data found! Please check your CSV file and try again.", file=out)
        return 0

    print(f"Total Products Loaded: {summary.documents}", file=out)
    print(f"Index successfully built with {summary.indexed_terms} indexed terms.", file=out)

    if args.queries:
        for raw in args.queries:
            keyword = raw.strip()
            if not keyword:
                print("Please type a valid search word.", file=out)
                continue
            render_results(keyword, index.search(keyword), out)
        return 0

    run_search_interface(index, stdin or sys.stdin, out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
"""
Catalog CSV Import

Reads a product CSV exported from Shopify, BASE or STORES.jp, detects the
platform, maps its columns and prints an import report. The normalized
products can be saved as JSON for the persistence step.

Usage:
    python3 import_csv.py exports/products_export.csv
    python3 import_csv.py exports/base.csv --default-category tops --output-json output/base.json
    python3 import_csv.py exports/other.csv --mapping mappings/other.yaml --strict --log-file logs/other.log

Environment (.env supported):
    CATALOG_IMPORT_DEFAULT_CATEGORY   default category for rows without one
    CATALOG_IMPORT_DEFAULT_CURRENCY   currency for every product (default: JPY)
"""

import argparse
import csv
import json
import logging
import os
import sys

import yaml
from dotenv import load_dotenv

from catalog_import import (
    PlatformId,
    TransformOptions,
    TransformResult,
    detect_platform,
    get_default_field_map,
    missing_required_fields,
    normalize_field_map,
    transform_csv_to_products,
)
from catalog_import.common import (
    load_field_mapping,
    load_import_settings,
    read_csv_table,
    setup_logging,
)
from catalog_import.platforms import get_platform_config

logger = logging.getLogger("catalog_import.cli")

# Errors/warnings listed in the report before truncating
MAX_ISSUES_SHOWN = 50


def resolve_options(args: argparse.Namespace) -> TransformOptions:
    """Flags override environment, environment overrides import_settings.yaml."""
    settings = load_import_settings()

    category = args.default_category
    if category is None:
        category = os.getenv("CATALOG_IMPORT_DEFAULT_CATEGORY", settings["default_category"])

    currency = args.default_currency
    if currency is None:
        currency = os.getenv("CATALOG_IMPORT_DEFAULT_CURRENCY", settings["default_currency"])

    return TransformOptions(default_category=category, default_currency=currency)


def print_report(platform: PlatformId, field_map: dict, result: TransformResult,
                 encoding: str, row_count: int):
    """Print import summary for the operator."""
    config = get_platform_config(platform)
    platform_label = config.display_name if config else "Unknown (manual mapping)"

    print("\n" + "="*80)
    print("IMPORT REPORT")
    print("="*80)

    print(f"\nPlatform: {platform_label}")
    print(f"Encoding: {encoding}")
    print(f"Data rows: {row_count}")

    print(f"\nCOLUMN MAPPING ({len(field_map)} columns):")
    for column, field in field_map.items():
        print(f"  {column:30} -> {field}")

    print("\n" + "-"*80)
    print("RESULT")
    print("-"*80)
    print(f"\n  Products: {len(result.products)}")
    print(f"  Variants: {result.variant_count}")
    print(f"  Images:   {sum(len(p.images) for p in result.products)}")
    print(f"  Errors:   {len(result.errors)}")
    print(f"  Warnings: {len(result.warnings)}")

    brands = result.unique_brand_names()
    if brands:
        print(f"\nBRANDS ({len(brands)}):")
        for brand in brands:
            print(f"  - {brand}")

    if result.errors:
        print("\nERRORS (products not imported):")
        for err in result.errors[:MAX_ISSUES_SHOWN]:
            print(f"  row {err.row:>5} [{err.field}] {err.message}")
        if len(result.errors) > MAX_ISSUES_SHOWN:
            print(f"  ... and {len(result.errors) - MAX_ISSUES_SHOWN} more")

    if result.warnings:
        print("\nWARNINGS:")
        for warn in result.warnings[:MAX_ISSUES_SHOWN]:
            print(f"  row {warn.row:>5} [{warn.field}] {warn.message}")
        if len(result.warnings) > MAX_ISSUES_SHOWN:
            print(f"  ... and {len(result.warnings) - MAX_ISSUES_SHOWN} more")

    if not result.errors and not result.warnings:
        print("\nNo issues found!")

    print("\n" + "="*80)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Transform a platform product CSV export into catalog products"
    )
    parser.add_argument("csv_file", help="Path to the exported CSV")
    parser.add_argument(
        "--platform",
        choices=[p.value for p in PlatformId],
        help="Skip detection and treat the file as this platform",
    )
    parser.add_argument(
        "--mapping",
        help="YAML file with a manual 'CSV header: field' mapping (replaces the default map)",
    )
    parser.add_argument("--default-category", help="Category for products without one")
    parser.add_argument("--default-currency", help="Currency for all products")
    parser.add_argument("--output-json", help="Write products, errors and warnings to this JSON file")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any row failed",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings")
    parser.add_argument("--log-file", help="Also write a DEBUG log of the run to this file")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)
    load_dotenv()

    try:
        table = read_csv_table(args.csv_file)
        options = resolve_options(args)

        platform = PlatformId(args.platform) if args.platform else detect_platform(table.headers)

        if args.mapping:
            field_map = normalize_field_map(load_field_mapping(args.mapping))
        else:
            field_map = get_default_field_map(platform, table.headers)

        missing = missing_required_fields(field_map)
        if missing:
            logger.warning(
                "No column mapped to %s; every row will fail. Supply --mapping.",
                ", ".join(f.value for f in missing),
            )

        result = transform_csv_to_products(table.rows, field_map, platform, options)
    except (OSError, ValueError, csv.Error, yaml.YAMLError) as e:
        print(f"\nError: {e}")
        return 1

    print_report(platform, field_map, result, table.encoding, table.row_count)

    if args.output_json:
        os.makedirs(os.path.dirname(args.output_json) or '.', exist_ok=True)
        output_data = {
            "source": args.csv_file,
            "platform": platform.value,
            "field_map": {column: field.value for column, field in field_map.items()},
            **result.to_dict(),
        }
        with open(args.output_json, 'w', encoding='utf-8') as f:
            json.dump(output_data, f, indent=2, ensure_ascii=False)
        print(f"\nResults saved to: {args.output_json}")

    if args.strict and result.errors:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

import argparse
import json
import logging
from pathlib import Path

from pydantic import ValidationError

from gamevault import analytics, data_handler, settings
from gamevault.logger import setup_logger
from gamevault.pipelines.exporter import ExportPipeline
from gamevault.pipelines.importer import ImportPipeline

logger = logging.getLogger("gamevault")


def _default_collection_path() -> Path:
    return settings.INPUT_DIR / settings.COLLECTION_FILENAME


def run_import(args: argparse.Namespace) -> int:
    result = ImportPipeline(args.file, subject=args.subject, test_mode=args.test).run()
    return 0 if result is not None else 1


def run_export(args: argparse.Namespace) -> int:
    path = ExportPipeline(args.file, subject=args.subject, test_mode=args.test).run()
    return 0 if path is not None else 1


def run_analytics(args: argparse.Namespace) -> int:
    path = Path(args.file or _default_collection_path())
    if not path.exists():
        logger.error(f"❌ Collection file not found: {path}")
        return 1

    try:
        items = data_handler.load_collection(path)
    except (ValidationError, json.JSONDecodeError) as e:
        logger.error(f"❌ Collection file {path.name} is not valid.")
        logger.error(e)
        return 1

    summary = analytics.summarize_collection(items)

    logger.info("\n--- Collection Analytics ---")
    logger.info(f"Total Items: {summary.total_items}")
    logger.info(f"Total Est. Value (USD): {summary.total_value_usd:,.0f}")
    logger.info(f"Total Est. Value (CHF): {summary.total_value_chf:,.0f}")

    logger.info("\nPlatform Distribution:")
    for platform, count in summary.platforms_by_count:
        logger.info(f"  {platform}: {count} item(s)")

    logger.info("\nValue by Platform (USD):")
    for platform, value in summary.platforms_by_value:
        logger.info(f"  {platform}: {value:,.0f}")

    logger.info("\nCollection by Decade:")
    for decade, count in summary.decades:
        logger.info(f"  {decade}: {count} item(s)")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Import, export and analyse a video game collection as CSV."
    )
    parser.add_argument(
        "--subject",
        default=settings.COLLECTION_SUBJECT,
        help=f"Name used for output files ('{settings.COLLECTION_SUBJECT}' or '{settings.WISHLIST_SUBJECT}')",
    )
    parser.add_argument("--test", action="store_true", help="Skip the webhook post")
    parser.add_argument("--debug", action="store_true", help="Log skipped rows")
    subparsers = parser.add_subparsers(dest="command", required=True)

    import_parser = subparsers.add_parser("import", help="Import items from a CSV file")
    import_parser.add_argument("file", type=Path)
    import_parser.set_defaults(func=run_import)

    export_parser = subparsers.add_parser("export", help="Export a collection JSON file to CSV")
    export_parser.add_argument("file", type=Path, nargs="?", default=None)
    export_parser.set_defaults(func=run_export)

    analytics_parser = subparsers.add_parser("analytics", help="Summarise a collection JSON file")
    analytics_parser.add_argument("file", type=Path, nargs="?", default=None)
    analytics_parser.set_defaults(func=run_analytics)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger("gamevault", logging.DEBUG if args.debug else None)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())

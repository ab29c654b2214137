"""Command-line access to the property store.

Examples
--------
    allzone-properties list --featured
    allzone-properties show prop_2
    allzone-properties export > backup.json
    allzone-properties --data-dir /srv/site/data import backup.json
"""

import argparse
import json
import sys
from pathlib import Path

from allzone.config import SiteConfig
from allzone.exceptions import AllZoneError, InvalidRecordError
from allzone.logging import get_logger, setup_logging
from allzone.models import PropertyRecord
from allzone.store import PropertyStore

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="allzone-properties",
        description="Inspect and manage the property listings file.",
    )
    parser.add_argument("--data-dir", type=Path, help="Directory holding properties.json (default: $DATA_DIR or ./data)")
    parser.add_argument("--log-level", help="Log level (default: $LOG_LEVEL or INFO)")

    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List all properties")
    list_cmd.add_argument("--featured", action="store_true", help="Only show featured properties")

    show_cmd = sub.add_parser("show", help="Show one property as JSON")
    show_cmd.add_argument("property_id")

    sub.add_parser("export", help="Write the whole collection to stdout as JSON")

    import_cmd = sub.add_parser("import", help="Replace the collection with a JSON array file")
    import_cmd.add_argument("file", type=Path)

    return parser


def _read_import(path: Path) -> list[PropertyRecord]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise InvalidRecordError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise InvalidRecordError(f"{path} must hold a JSON array")
    return [PropertyRecord.from_dict(item) for item in data]


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = SiteConfig.from_env()
        if args.data_dir is not None:
            config.store.data_dir = args.data_dir
        setup_logging(
            level=args.log_level or config.log_level,
            format_type=config.log_format,
            stream=sys.stderr,
        )
        store = PropertyStore(config.store)

        if args.command == "list":
            records = store.featured() if args.featured else store.list_all()
            for record in records:
                print(f"{record.id} | {record.name} | {record.price} | {record.location}")

        elif args.command == "show":
            record = store.get_by_id(args.property_id)
            if record is None:
                print(f"Property {args.property_id} not found", file=sys.stderr)
                return 1
            print(json.dumps(record.to_dict(), indent=2, ensure_ascii=False))

        elif args.command == "export":
            print(json.dumps([r.to_dict() for r in store.list_all()], indent=2, ensure_ascii=False))

        elif args.command == "import":
            records = _read_import(args.file)
            store.save_all(records)
            logger.info("Imported %d properties from %s", len(records), args.file)

    except (AllZoneError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())

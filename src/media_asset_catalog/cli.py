"""Command-line interface for querying a media catalog.

This module provides the `media-catalog` entry point: it ingests a
directory or an index file and prints query results as JSON.
"""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from .collection.base import Collection
from .collection.registry import CollectionRegistry
from .config import MAP_MIN_SIZE, THUMBS_FOLDER, CatalogSettings
from .core.types import AssetType, Filters
from .errors import CatalogError
from .i18n import Localizer
from .services import LoggingHost, Services


def parse_type(value: str) -> AssetType:
    """Parse an asset type name (case-insensitive)."""
    for asset_type in AssetType:
        if asset_type.value.lower() == value.lower():
            return asset_type
    raise argparse.ArgumentTypeError(
        f"Unknown asset type: {value}. Choose from {', '.join(t.value for t in AssetType)}"
    )


def to_json(value: Any) -> Any:
    """Convert catalog objects into JSON-serializable values."""
    if isinstance(value, Enum):
        return value.name if isinstance(value.value, int) else value.value
    if is_dataclass(value) and not isinstance(value, type):
        return to_json(asdict(value))
    if isinstance(value, dict):
        return {str(to_json(k)): to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value


def build_filters(args: argparse.Namespace) -> Filters:
    return Filters(
        type=getattr(args, "type", None),
        creator=getattr(args, "creator", None),
        pack=getattr(args, "pack", None),
        folder=getattr(args, "folder", None),
        search_terms=getattr(args, "search", None),
    )


async def run_command(collection: Collection, args: argparse.Namespace) -> Any:
    """Initialize the collection and run the requested query."""
    await collection.initialize()
    filters = build_filters(args)

    if args.command == "types":
        return await collection.get_types()
    if args.command == "creators":
        return await collection.get_creators(args.type)
    if args.command == "packs":
        return await collection.get_packs(filters)
    if args.command == "folders":
        return await collection.get_folders(filters)
    if args.command == "count":
        return await collection.get_assets_count(filters)
    if args.command == "assets":
        return await collection.get_assets(filters, args.page)
    if args.command == "actions":
        asset = collection.get_asset_by_id(args.id)
        if asset is None:
            raise CatalogError(f"No asset with id {args.id}")
        return [
            {"action": action, "hint": collection.get_action_hint(asset, action.id)}
            for action in collection.get_actions(asset)
        ]
    raise CatalogError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="media-catalog",
        description="Query a catalog of media asset packs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Count assets of each type
  media-catalog --path /path/to/assets types

  # First page of maps of one pack, matching "cave"
  media-catalog --path /path/to/assets assets --type map --pack dungeons --search cave

  # Folders of a pack, from an index file
  media-catalog --index index.json folders --type image --pack 1
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--path", help="Root directory, one pack per sub-directory")
    source.add_argument("--index", help="JSON index file listing the packs")

    parser.add_argument("--lang", help="JSON file with translated strings")
    parser.add_argument("--thumbs-folder", default=THUMBS_FOLDER, help="Thumbnail folder name")
    parser.add_argument(
        "--map-min-size",
        type=int,
        default=MAP_MIN_SIZE,
        help="Minimal size (pixels) of the shorter side of a map",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("types", help="Number of assets per type")

    creators = commands.add_parser("creators", help="Creators of a type")
    creators.add_argument("--type", type=parse_type, required=True)

    packs = commands.add_parser("packs", help="Packs with their number of assets of a type")
    packs.add_argument("--type", type=parse_type, required=True)
    packs.add_argument("--creator")

    folders = commands.add_parser("folders", help="Folders of a pack")
    folders.add_argument("--type", type=parse_type, required=True)
    folders.add_argument("--pack", required=True)

    for name, help_text in (("count", "Number of matching assets"), ("assets", "One page of matching assets")):
        query = commands.add_parser(name, help=help_text)
        query.add_argument("--type", type=parse_type, required=True)
        query.add_argument("--creator")
        query.add_argument("--pack")
        query.add_argument("--folder")
        query.add_argument("--search", help="Space-separated terms, all required")
        if name == "assets":
            query.add_argument("--page", type=int, default=0)

    actions = commands.add_parser("actions", help="Actions available on an asset")
    actions.add_argument("--id", required=True)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the catalog CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    settings = CatalogSettings(thumbs_folder=args.thumbs_folder, map_min_size=args.map_min_size)

    try:
        i18n = Localizer.from_file(Path(args.lang)) if args.lang else Localizer()
        services = Services(host=LoggingHost(), i18n=i18n)
        platform, path = ("filesystem", args.path) if args.path else ("index", args.index)
        collection = CollectionRegistry.create_collection(
            platform, path=Path(path), services=services, settings=settings
        )
        result = asyncio.run(run_command(collection, args))
    except (CatalogError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    json.dump(to_json(result), sys.stdout, indent=2)
    print()


if __name__ == "__main__":
    main()

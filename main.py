"""Command-line entrypoint for managing a local wardrobe and getting suggestions."""

import argparse
import json
import sys
from typing import List, Optional

from pydantic import ValidationError

from logic.validation import validation_failure
from stylist_app.app import WardrobeStylistApp


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Color-harmony outfit suggestions")
    subparsers = parser.add_subparsers(dest="command", required=True)

    suggest = subparsers.add_parser("suggest", help="Suggest outfits from the stored wardrobe")
    suggest.add_argument("--formal", action="store_true", default=None, help="Score for formal wear")
    suggest.add_argument("--count", type=int, default=None, help="Maximum number of suggestions")

    add = subparsers.add_parser("add", help="Add an item with its extracted color")
    add.add_argument("--category", required=True)
    color = add.add_mutually_exclusive_group(required=True)
    color.add_argument("--hex")
    color.add_argument("--rgb", type=int, nargs=3, metavar=("R", "G", "B"))
    color.add_argument("--hsl", type=int, nargs=3, metavar=("H", "S", "L"))
    add.add_argument("--name")

    subparsers.add_parser("list", help="List wardrobe items")
    return parser


def main(argv: Optional[List[str]] = None, app: Optional[WardrobeStylistApp] = None) -> int:
    args = build_parser().parse_args(argv)
    stylist = app or WardrobeStylistApp()

    try:
        if args.command == "suggest":
            output = stylist.suggest_outfits(formal=args.formal, max_suggestions=args.count)
        elif args.command == "add":
            output = stylist.add_item(
                category=args.category, hex=args.hex, rgb=args.rgb, hsl=args.hsl, name=args.name
            )
        else:
            output = stylist.list_items()
    except ValidationError as exc:
        print(json.dumps(validation_failure("Invalid input", exc), indent=2, default=str))
        return 2

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

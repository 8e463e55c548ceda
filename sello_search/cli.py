"""
sello-search CLI

Developer tool for trying the parser and the suggestion engine from
a shell. Prints JSON to stdout.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from sello_search.__version__ import __version__
from sello_search.catalog import ProductCatalog
from sello_search.config.loader import build_engine_config, load_config, load_vocabulary
from sello_search.core.contracts import ChipSelectionState, ParseContext
from sello_search.core.decision import decision_to_dict
from sello_search.intent import IntentParser
from sello_search.observability import build_observers
from sello_search.suggestions import SuggestionEngine
from sello_search.vocabulary import check_vocabulary

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sello-search",
        description=f"sello-search v{__version__}",
    )
    parser.add_argument("--config", required=False, help="Path to config YAML")
    parser.add_argument("--version", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")

    commands = parser.add_subparsers(dest="command")

    # ---- PARSE ----
    p_parse = commands.add_parser("parse", help="Turn search text into a query plan")
    p_parse.add_argument("text", help="Search text")
    p_parse.add_argument("--platform", action="append", default=[], help="Selected platform id")
    p_parse.add_argument("--time", help="Selected time preset id")
    p_parse.add_argument("--explain", action="store_true", help="Include the intent decision")

    # ---- SUGGEST ----
    p_suggest = commands.add_parser("suggest", help="Rank suggestions for a chip selection")
    p_suggest.add_argument("--metric", action="append", default=[])
    p_suggest.add_argument("--condition", action="append", default=[])
    p_suggest.add_argument("--platform", action="append", default=[])
    p_suggest.add_argument("--time")
    p_suggest.add_argument("--text", default="")
    p_suggest.add_argument("--catalog", help="Product CSV with sku / name columns")

    # ---- CHECK ----
    commands.add_parser("check", help="Check vocabulary integrity")

    return parser


def _emit(payload) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


# -------------------------------------------------
# CLI ENTRY
# -------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # ---- VERSION ----
    if args.version:
        print(f"sello-search v{__version__}")
        return 0

    # ---- LOGGING ----
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if not args.command:
        parser.error("a command is required (parse, suggest, check)")

    config = load_config(args.config)
    engine_config = build_engine_config(config)
    vocabulary = load_vocabulary(config["vocabulary"].get("path"))

    # ---- CHECK ----
    if args.command == "check":
        report = check_vocabulary(vocabulary)
        _emit({"status": report.status, "reasons": report.reasons})
        return 0 if report.ok else 1

    # ---- PARSE ----
    if args.command == "parse":
        intent_parser = IntentParser(
            vocabulary=vocabulary,
            config=engine_config.parser,
            observers=build_observers(config),
        )
        plan, decision = intent_parser.resolve(
            args.text,
            ParseContext(selected_platforms=tuple(args.platform), time_preset=args.time),
        )
        payload = plan.to_dict()
        if args.explain:
            payload = {"plan": payload, "decision": decision_to_dict(decision)}
        _emit(payload)
        return 0

    # ---- SUGGEST ----
    catalog = None
    if args.catalog:
        catalog_path = Path(args.catalog)
        if not catalog_path.exists():
            raise FileNotFoundError(catalog_path)
        catalog = ProductCatalog.from_csv(catalog_path)
        logger.info("Loaded %d products from %s", len(catalog), catalog_path)

    engine = SuggestionEngine(vocabulary=vocabulary, config=engine_config)
    state = ChipSelectionState.create(
        metrics=args.metric,
        conditions=args.condition,
        platforms=args.platform,
        time_preset=args.time,
        search_text=args.text,
    )
    _emit(engine.suggest(state, catalog).to_dict())
    return 0


if __name__ == "__main__":
    sys.exit(main())

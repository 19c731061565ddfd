#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Quick Localization CLI - localize one text into several locales

Usage:
    python quick_localize.py "Bonjour" --source fr --targets en,de,es
    python quick_localize.py --file launch.txt --source en --targets de,ja --content-type marketing
    python quick_localize.py "Hello" --source en --targets de --review-db data/review_queue.db

Prints one JSON object keyed by locale. API keys come from the environment
or .env (ANTHROPIC_API_KEY, OPENAI_API_KEY, DEEPSEEK_API_KEY).
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from config.constants import REVIEW_QUEUE_DB
from config.logging_config import setup_logger
from config.settings import Settings
from localization import (
    ContentType,
    JsonlEventSink,
    TranslationRequest,
    ValidationError,
    build_orchestrator,
)


async def run(args: argparse.Namespace) -> dict:
    overrides = {}
    if args.review_db:
        overrides["review_queue_db"] = Path(args.review_db)
    if args.progress:
        overrides["show_progress"] = True
    settings = Settings(**overrides)

    event_sink = JsonlEventSink(settings.analytics_dir) if args.analytics else None
    orchestrator = build_orchestrator(settings, event_sink=event_sink)

    text = Path(args.file).read_text(encoding="utf-8") if args.file else args.text
    request = TranslationRequest(
        source_text=text or "",
        source_locale=args.source,
        target_locales=[loc.strip() for loc in args.targets.split(",") if loc.strip()],
        content_type=ContentType(args.content_type),
        context=args.context,
    )

    try:
        results = await orchestrator.orchestrate(request)
        await orchestrator.drain_events()
    finally:
        await orchestrator.aclose()
    return {locale: result.to_dict() for locale, result in sorted(results.items())}


def main():
    parser = argparse.ArgumentParser(
        description="Localize text into several locales with quality gating",
        epilog="""
Examples:
  %(prog)s "Bonjour" --source fr --targets en,de,es
  %(prog)s --file launch.txt --source en --targets de,ja --content-type marketing
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument('text', nargs='?', help='Source text (or use --file)')
    parser.add_argument('-f', '--file', help='Read source text from a file')
    parser.add_argument('-s', '--source', required=True, help='Source locale code (e.g. en)')
    parser.add_argument('-t', '--targets', required=True, help='Comma-separated target locales (e.g. de,es,ja)')
    parser.add_argument(
        '-c', '--content-type',
        choices=[c.value for c in ContentType],
        default=ContentType.GENERIC.value,
        help='Content type used for routing (default: generic)'
    )
    parser.add_argument('--context', help='Extra context passed to the providers')
    parser.add_argument(
        '--review-db', nargs='?', const=REVIEW_QUEUE_DB,
        help=f'SQLite file for the review queue (flag alone: {REVIEW_QUEUE_DB}; default: in memory)'
    )
    parser.add_argument('--analytics', action='store_true', help='Append request events to the analytics dir')
    parser.add_argument('--progress', action='store_true', help='Show a progress bar')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log per-locale state transitions')

    args = parser.parse_args()

    if not args.text and not args.file:
        parser.error("provide source text or --file")

    if args.verbose:
        setup_logger("DEBUG")

    try:
        output = asyncio.run(run(args))
    except ValidationError as e:
        print(f"\n❌ Invalid request: {e}", file=sys.stderr)
        return 2
    except FileNotFoundError as e:
        print(f"\n❌ Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(output, ensure_ascii=False, indent=2))
    failed = [loc for loc, r in output.items() if "error" in r]
    return 1 if failed and len(failed) == len(output) else 0


if __name__ == '__main__':
    sys.exit(main())

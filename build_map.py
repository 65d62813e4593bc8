#!/usr/bin/env python3
"""CLI entry point for the Travel Map builder.

Usage:
    python build_map.py --html wiki_page.html [--output-dir output/]
    python build_map.py --url https://wiki.example.com/Travel
    python build_map.py --query "work=NY,CA&workTrips=NY:5,CA:3"

Options:
    --html PATH        Saved wiki page holding the trip tables
    --url URL          Wiki page to download (default: $WIKI_URL)
    --query QS         URL query string in the map parameter format
    --output-dir DIR   Directory for output files (default: output/)
    --format FMT       Output format: json, map, all (default: all)
    --embed-base URL   Also print an embed URL carrying the decoded data
    --dry-run          Show stats without writing files
"""

import argparse
import sys
from pathlib import Path

import requests

from travel_map.config import OUTPUT_DIR, WIKI_URL
from travel_map.extract.params import build_embed_url
from travel_map.pipeline import run_pipeline
from travel_map.output import format_summary, format_travel_map_html, to_json


def main():
    parser = argparse.ArgumentParser(
        description="Build a travel map from wiki trip tables or map parameters.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--html", help="Path to a saved wiki page")
    source.add_argument("--url", help="Wiki page URL")
    source.add_argument("--query", help="Map parameters as a URL query string")
    parser.add_argument(
        "--output-dir",
        default=str(OUTPUT_DIR),
        help="Output directory",
    )
    parser.add_argument(
        "--format",
        choices=["json", "map", "all"],
        default="all",
        help="Output format (json, map, all)",
    )
    parser.add_argument(
        "--embed-base",
        default="",
        help="Base URL of the deployed map; prints the embed URL for this data",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show stats only, don't write files",
    )
    args = parser.parse_args()

    url = args.url or (WIKI_URL if not (args.html or args.query) else None)
    if not (args.html or args.query or url):
        parser.error("one of --html, --url or --query is required (or set WIKI_URL)")

    try:
        decoded, stats = run_pipeline(html_path=args.html, url=url, query=args.query)
    except requests.RequestException as e:
        print(f"ERROR fetching wiki page: {e}", file=sys.stderr)
        sys.exit(1)

    print(format_summary(stats))

    if args.embed_base:
        print(f"\nEmbed URL: {build_embed_url(args.embed_base, decoded)}")

    if args.dry_run:
        print(f"\nDry run complete. {len(stats.regions)} regions classified.")
        return

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    if args.format in ("json", "all"):
        json_path = output_dir / "travel_map.json"
        to_json(stats, json_path)
        print(f"JSON written to: {json_path}")

    if args.format in ("map", "all"):
        map_path = output_dir / "travel_map.html"
        format_travel_map_html(stats, map_path)
        print(f"Travel map written to: {map_path}")


if __name__ == "__main__":
    main()

"""Exa semantic search from the command line.

Exa provides neural/semantic search that understands intent better than
keyword-based search. Use for discovery queries like "best standing desk
for programmers" where semantic understanding matters.

Usage:
    exa-search --query "best ergonomic chair for back pain" --limit 10
    exa-search --query "..." --limit 5 --format json
    exa-search --query "..." --category "research paper" --highlights --summary
"""

import argparse
import json
import sys
from typing import Optional

import requests

from .client import SearchClient
from .config import EXA_API_KEY_ENV, get_api_key
from .errors import ApiError, InvalidQuery
from .options import LIVECRAWL_MODES, SEARCH_TYPES

SNIPPET_CHARS = 600


def build_options(args: argparse.Namespace) -> dict:
    """Map parsed CLI flags onto an Exa options mapping."""
    options: dict = {"numResults": args.limit}
    if args.type:
        options["type"] = args.type
    if args.category:
        options["category"] = args.category
    if args.no_autoprompt:
        options["useAutoprompt"] = False
    if args.include_domain:
        options["includeDomains"] = list(args.include_domain)
    if args.exclude_domain:
        options["excludeDomains"] = list(args.exclude_domain)
    for flag, key in (
        ("start_published_date", "startPublishedDate"),
        ("end_published_date", "endPublishedDate"),
        ("start_crawl_date", "startCrawlDate"),
        ("end_crawl_date", "endCrawlDate"),
    ):
        value = getattr(args, flag)
        if value:
            options[key] = value
    if args.livecrawl:
        options["livecrawl"] = args.livecrawl
    if not args.no_text:
        options["text"] = {"maxCharacters": args.max_chars} if args.max_chars > 0 else {}
    if args.highlights:
        options["highlights"] = {}
    if args.summary:
        options["summary"] = {}
    return options


def _snippet(text: str) -> str:
    snippet = text[:SNIPPET_CHARS].replace("\n", " ").strip()
    if len(text) > SNIPPET_CHARS:
        snippet += "..."
    return snippet


def format_markdown(results: dict, start_id: int = 1) -> str:
    """Format Exa results as markdown source cards (Exx format)."""
    lines = ["## Exa Search Results\n"]
    for i, result in enumerate(results.get("results", []), start_id):
        title = result.get("title") or "Untitled"
        url = result.get("url") or "N/A"
        score = result.get("score")

        lines.append(f"**E{i:02d} — {title}**")
        lines.append(f"- URL: {url}")
        if score is not None:
            lines.append(f"- Score: {score:.3f}")
        if result.get("publishedDate"):
            lines.append(f"- Published: {result['publishedDate']}")
        if result.get("author"):
            lines.append(f"- Author: {result['author']}")
        if result.get("summary"):
            lines.append(f"- Summary: {result['summary'].strip()}")
        highlights = result.get("highlights") or []
        if highlights:
            lines.append(f"- Highlight: {_snippet(highlights[0])}")
        text = result.get("text") or ""
        if text:
            lines.append(f"- Snippet: {_snippet(text)}")
        lines.append("")

    return "\n".join(lines)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Exa semantic search (writes markdown or JSON).")
    parser.add_argument("--query", required=True, help="Search query (semantic)")
    parser.add_argument("--limit", type=int, default=10, help="Number of results (default: 10)")
    parser.add_argument("--type", choices=SEARCH_TYPES, default=None, help="Search type (default: neural)")
    parser.add_argument("--category", default="", help="Content category, e.g. 'research paper'")
    parser.add_argument("--no-autoprompt", action="store_true", help="Disable Exa query rewriting")
    parser.add_argument("--include-domain", action="append", default=[], help="Only this domain (repeatable)")
    parser.add_argument("--exclude-domain", action="append", default=[], help="Never this domain (repeatable)")
    parser.add_argument("--start-published-date", default="", help="ISO-8601 lower bound on publish date")
    parser.add_argument("--end-published-date", default="", help="ISO-8601 upper bound on publish date")
    parser.add_argument("--start-crawl-date", default="", help="ISO-8601 lower bound on crawl date")
    parser.add_argument("--end-crawl-date", default="", help="ISO-8601 upper bound on crawl date")
    parser.add_argument("--livecrawl", choices=LIVECRAWL_MODES, default=None, help="Livecrawl mode")
    parser.add_argument("--no-text", action="store_true", help="Skip fetching text content")
    parser.add_argument("--max-chars", type=int, default=3000, help="Max text chars per result (0 = no cap)")
    parser.add_argument("--highlights", action="store_true", help="Request highlights")
    parser.add_argument("--summary", action="store_true", help="Request summaries")
    parser.add_argument("--format", choices=["md", "json"], default="md", help="Output format")
    parser.add_argument("--start-id", type=int, default=1, help="Starting ID for Exx numbering")
    parser.add_argument("--dotenv", default=".env", help="Fallback .env file for EXA_API_KEY")
    parser.add_argument("--verbose", action="store_true", help="Print request/response diagnostics to stderr")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = _parser().parse_args(argv)

    api_key = get_api_key(args.dotenv) or ""
    if not api_key:
        print(f"Missing {EXA_API_KEY_ENV} in environment or .env file.", file=sys.stderr)
        return 2

    client = SearchClient(api_key, log_enabled=args.verbose)
    try:
        results = client.search_and_contents(args.query, build_options(args))
    except InvalidQuery as e:
        print(str(e), file=sys.stderr)
        return 2
    except ApiError as e:
        print(f"HTTP {e.status_code} from Exa: {e.body[:800]}", file=sys.stderr)
        return 1
    except requests.RequestException as e:
        print(f"Exa request failed: {e}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Exa returned non-JSON body: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        json.dump(results, sys.stdout, ensure_ascii=False, indent=2)
        sys.stdout.write("\n")
    else:
        sys.stdout.write(format_markdown(results, args.start_id))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

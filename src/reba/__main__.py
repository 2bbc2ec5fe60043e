import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from .config import MAX_LIST_LIMIT, get_settings, reset_settings_cache
from .providers import DemoProvider, RealtyProvider
from .render import TextPort
from .service import present, search


def _serve(args):
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "reba.api.app:app",
        host=args.host,
        port=args.port or settings.port,
        log_level=(args.log_level or "info").lower(),
    )


def main(argv=None):
    load_dotenv()
    reset_settings_cache()

    parser = argparse.ArgumentParser(
        description="REBA real-estate search CLI",
    )

    parser.add_argument(
        "command",
        nargs="?",
        choices=["search", "serve"],
        default="search",
        help="Run a single search (default) or serve the HTTP API",
    )

    parser.add_argument(
        "--query",
        help="Address or area search, e.g. 'Homes for sale in Miami'",
        required=False,
    )

    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help=f"Maximum listings for an area search (1-{MAX_LIST_LIMIT})",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Upstream request timeout in seconds",
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        help="Use the built-in demo records (no network)",
    )

    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )

    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, etc.)",
    )

    parser.add_argument("--host", default="127.0.0.1", help="Bind host for serve")
    parser.add_argument("--port", type=int, default=None, help="Bind port for serve")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "serve":
        _serve(args)
        return

    settings = get_settings()
    limit = args.limit if args.limit is not None else settings.default_limit
    if not 1 <= limit <= MAX_LIST_LIMIT:
        parser.error(f"--limit must be between 1 and {MAX_LIST_LIMIT}")

    query = args.query
    if query is None:
        query = input("Enter an address or area to search: ")
    query = query.strip()
    if not query:
        parser.error("a non-empty --query is required")

    if args.demo or settings.demo:
        provider = DemoProvider()
    else:
        provider = RealtyProvider(
            api_key=settings.rapidapi_key,
            host=settings.rapidapi_host,
            timeout=args.timeout or settings.timeout,
        )

    result = search(query, provider, limit=limit)

    if args.format == "json":
        print(json.dumps(result.to_dict()))
        return
    present(result, TextPort())


def _safe_main():
    try:
        main()
    except SystemExit:
        raise
    except Exception as exc:
        print(json.dumps({"error": str(exc)}))
        raise SystemExit(1)


if __name__ == "__main__":
    _safe_main()

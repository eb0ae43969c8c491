#!/usr/bin/env python3
"""Run the Thottam content API server."""

import argparse
import os
import sys
from pathlib import Path

import uvicorn
import anyio

from thottam.config import SUPPORTED_LANGUAGES, load_config


def main(argv=None):
    """Run the API server.

    `--contents` and `--default-language` are passed on through the
    environment so the server process (and reloader children) pick them up
    from `load_config` as well.
    """
    parser = argparse.ArgumentParser(description="Run the Thottam content API")
    parser.add_argument("--host", type=str, default=None, help="Host to bind to (default: from config)")
    parser.add_argument("--port", type=int, default=None, help="Port to bind to (default: from config)")
    parser.add_argument(
        "--contents",
        type=str,
        default=None,
        help="Content directory (default: from config)",
    )
    parser.add_argument(
        "--default-language",
        choices=SUPPORTED_LANGUAGES,
        default=None,
        help="Language used when a request names none",
    )
    parser.add_argument("--reload", action="store_true", help="Reload on code and settings changes")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.contents:
        os.environ["CONTENTS_PATH"] = args.contents
    if args.default_language:
        os.environ["DEFAULT_LANGUAGE"] = args.default_language

    try:
        config = anyio.run(load_config)
    except Exception as e:
        print(f"Failed to load config: {e}", file=sys.stderr)
        raise SystemExit(1) from e

    contents = Path(config.content.path)
    if not contents.is_dir():
        print(f"Content directory not found: {contents}", file=sys.stderr)
        raise SystemExit(1)

    host = args.host or config.api.host
    port = args.port or config.api.port

    print(f"Serving {contents.resolve()} ({', '.join(config.content.formats)}) on http://{host}:{port}")
    print(f"  - Default language: {config.content.default_language}")
    print(f"  - Tree: http://{host}:{port}/api/content/tree")
    print(f"  - Docs: http://{host}:{port}/docs")

    reload_options = {}
    if args.reload:
        # Content edits don't need a restart, only code and settings do
        reload_options = {"reload_dirs": ["thottam", "configs"], "reload_includes": ["*.py", "*.yaml"]}

    uvicorn.run(
        "thottam.api.main:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level="debug" if args.debug else "info",
        **reload_options,
    )


if __name__ == "__main__":
    main()

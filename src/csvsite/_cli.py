"""csvsite CLI — csvsite serve / csvsite build / csvsite sitemap.

Entry point for the ``csvsite`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the csvsite CLI."""
    parser = argparse.ArgumentParser(
        prog="csvsite",
        description="Content routing and sitemap for the csvtoolkit.org site.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # csvsite serve
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the live server (serves /sitemap.xml)",
    )
    serve_parser.add_argument("root", nargs="?", default=".", help="Site root directory")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.add_argument("--workers", type=int, default=0, help="Worker count (0=auto)")

    # csvsite build
    build_parser = subparsers.add_parser(
        "build",
        help="Write static assets and sitemap.xml",
    )
    build_parser.add_argument("root", nargs="?", default=".", help="Site root directory")
    build_parser.add_argument("--output", default=None, help="Output directory")
    build_parser.add_argument(
        "--site-url", default=None, help="Site origin for sitemap URLs",
    )
    build_parser.add_argument(
        "--fingerprint", action="store_true", help="Enable asset fingerprinting",
    )

    # csvsite sitemap
    sitemap_parser = subparsers.add_parser(
        "sitemap",
        help="Print sitemap.xml to stdout",
    )
    sitemap_parser.add_argument("root", nargs="?", default=".", help="Site root directory")
    sitemap_parser.add_argument(
        "--site-url", default=None, help="Site origin for sitemap URLs",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from csvsite import __version__

    return __version__


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from csvsite._errors import SiteError
    from csvsite.app import build, serve, sitemap

    try:
        if args.command == "serve":
            serve(root=args.root, host=args.host, port=args.port, workers=args.workers)
        elif args.command == "build":
            build(
                root=args.root,
                output=args.output,
                site_url=args.site_url,
                fingerprint=args.fingerprint or None,
            )
        elif args.command == "sitemap":
            sys.stdout.write(sitemap(root=args.root, site_url=args.site_url))
    except SiteError as exc:
        print(f"csvsite: error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

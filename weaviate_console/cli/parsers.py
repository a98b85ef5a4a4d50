from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Weaviate console (admin page + proxy)")
    ap.add_argument("--base-url", default=None, help="Weaviate base URL; defaults to $WEAVIATE_URL")
    ap.add_argument("--api-key", default=None, help="Bearer token; defaults to $WEAVIATE_API_KEY")
    sub = ap.add_subparsers(dest="cmd", required=False)

    # Serve the page and JSON routes
    sv = sub.add_parser("serve")
    sv.add_argument("--host", default=None, help="Bind host; defaults to $WEAVIATE_CONSOLE_HOST or 127.0.0.1")
    sv.add_argument("--port", type=int, default=None, help="Bind port; defaults to $WEAVIATE_CONSOLE_PORT or 9090")

    ls = add_class_subparser(sub, "list")
    ls.add_argument("--limit", type=int, default=None)

    se = add_class_subparser(sub, "search")
    se.add_argument("--q", required=True, help="Search text")
    se.add_argument("--type", default="hybrid", choices=["hybrid", "nearText"])
    se.add_argument("--alpha", type=float, default=None, help="Hybrid blend factor (0 = keyword, 1 = vector)")
    se.add_argument("--certainty", type=float, default=None, help="nearText minimum certainty")
    se.add_argument("--property", action="append", default=[], help="Hybrid keyword property; can repeat")
    se.add_argument("--limit", type=int, default=None)

    ad = add_class_subparser(sub, "add")
    ad.add_argument("--query", required=True)
    ad.add_argument("--content", required=True)

    sub.add_parser("classes")
    sub.add_parser("info")

    ob = sub.add_parser("object")
    ob.add_argument("--id", required=True)

    de = sub.add_parser("delete")
    de.add_argument("--id", required=True)

    return ap


def add_class_subparser(sub, name):
    """
    Adds a subcommand that targets one class.

    Args:
        sub: The subparsers object from argparse.
        name: The name of the subcommand to add.

    Returns:
        argparse.ArgumentParser: The configured subparser.
    """
    result = sub.add_parser(name)
    result.add_argument("--class", dest="class_name", required=True, help="Weaviate class name")
    return result

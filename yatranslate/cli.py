"""Command line interface for yatranslate."""

from __future__ import annotations

import argparse
import logging
import sys

import requests

from yatranslate.client import Client
from yatranslate.config import API_KEY_ENV, ClientConfig
from yatranslate.errors import TranslateError
from yatranslate.languages import RU, UNKNOWN
from yatranslate.transport import Transport

logger = logging.getLogger("yatranslate")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yatranslate",
        description="Translate text with the Yandex Translate API.",
        allow_abbrev=False,
    )
    parser.add_argument("text", nargs="*", help="Text to translate")
    parser.add_argument(
        "-key",
        "--key",
        default="",
        help=f"Yandex API key (defaults to ${API_KEY_ENV})",
    )
    parser.add_argument(
        "-to",
        "--to",
        dest="target",
        default=RU,
        help="Destination language (two- or three-letter code)",
    )
    parser.add_argument(
        "-from",
        "--from",
        dest="source",
        default=UNKNOWN,
        help="Source language (two- or three-letter code); auto-detected by default",
    )
    parser.add_argument(
        "-lang",
        "--lang",
        dest="detect",
        action="store_true",
        help="Detect source language",
    )
    parser.add_argument(
        "-ls",
        "--ls",
        dest="directions",
        action="store_true",
        help="List translation directions",
    )
    parser.add_argument(
        "-url",
        "--url",
        default="",
        help="API endpoint root (defaults to $YANDEXTRANSLATEURL or the public endpoint)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log requests to stderr",
    )
    return parser


def run(argv: list[str] | None = None, transport: Transport | None = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    text = " ".join(args.text)
    if not text and not args.directions:
        parser.print_usage(sys.stderr)
        return 1

    config = ClientConfig.from_env(api_key=args.key, base_url=args.url)
    if not config.api_key:
        logger.error("$%s not set", API_KEY_ENV)
        return 1

    try:
        client = Client(config, transport=transport)

        if args.directions:
            results = client.list_languages().directions
        elif args.detect:
            results = [client.detect_language(text)]
        else:
            results = client.translate(text, args.target, source_lang=args.source)
    except (TranslateError, requests.RequestException) as exc:
        logger.error("%s", exc)
        return 1

    for line in results:
        print(line)
    return 0


def main() -> None:
    sys.exit(run())


__all__ = ["main", "run", "build_parser"]

#!/usr/bin/env python
"""Generate the JSON:API OpenAPI document from a generator config file.

Usage:
  jsonapi-openapi --config generator-config.yaml --out openapi.yaml
  jsonapi-openapi --out openapi.json --base-url https://api.example.com/v1
  jsonapi-openapi --update-hash tests/openapi_spec_hash.txt
  python -m jsonapi_openapi.cli --check tests/openapi_spec_hash.txt

Options:
  --config PATH        Generator config (default: $GENERATOR_CONFIG or generator-config.yaml)
  --out PATH           Write the document to PATH (directories auto-created)
  --format FMT         yaml or json (default: from --out suffix, else yaml)
  --base-url URL       Server URL (default: $GENERATOR_BASE_URL or https://api.example.com/<version>)
  --print-hash         Print the document hash
  --check PATH         Exit non-zero if the document hash != the one stored in PATH
  --update-hash PATH   Overwrite PATH with the current document hash

Safe Defaults:
  Without --out, --print-hash, --check or --update-hash the document is printed to stdout.

Exit Codes:
  0 success / in-check mode hash matches
  2 mismatch in --check mode
  3 config, generation or I/O error (nothing is written)
"""
from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from typing import Optional

from .config import load_config, load_settings
from .errors import GeneratorError
from .openapi import generate
from .writer import FORMATS, document_hash, dump_document, format_for_path, write_document

EXIT_OK = 0
EXIT_MISMATCH = 2
EXIT_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="jsonapi-openapi", description="Generate a JSON:API OpenAPI document")
    p.add_argument("--config", dest="config", help="Path to the generator config YAML")
    p.add_argument("--out", dest="out", help="Path to write the document")
    p.add_argument("--format", dest="fmt", choices=FORMATS, help="Output format")
    p.add_argument("--base-url", dest="base_url", help="Server URL used in the document")
    p.add_argument("--print-hash", action="store_true", help="Print the document hash")
    p.add_argument("--check", metavar="PATH", help="Compare the document hash with the one stored in PATH")
    p.add_argument("--update-hash", metavar="PATH", help="Overwrite PATH with the document hash")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    return p


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)

    try:
        settings = load_settings()
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else settings.log_level,
            format="%(levelname)s %(name)s: %(message)s",
        )
        config = load_config(args.config or settings.config_path)
        base_url = args.base_url or settings.resolve_base_url(config.version)
        spec = generate(config, base_url)
        h = document_hash(spec)
        if args.out:
            fmt = args.fmt or format_for_path(args.out)
            out_path = write_document(spec, args.out, fmt)
            print(f"Wrote {fmt} document to {out_path}")
        if args.check:
            expected = pathlib.Path(args.check).read_text().strip()
            if h != expected:
                print(f"Document hash mismatch: expected={expected} current={h}", file=sys.stderr)
                return EXIT_MISMATCH
            print(f"Document hash OK: {h}")
        if args.update_hash:
            pathlib.Path(args.update_hash).write_text(h + "\n")
            print(f"Updated snapshot hash -> {h}")
    except GeneratorError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if args.print_hash:
        print(h)
    if not (args.out or args.print_hash or args.check or args.update_hash):
        sys.stdout.write(dump_document(spec, args.fmt or "yaml"))
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

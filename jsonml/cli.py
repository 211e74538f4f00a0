"""CLI for converting JsonML documents and verifying round-trips."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConvertConfig, load_config
from .decode import decode
from .encode import dumps
from .errors import JsonMLError
from .html_render import render_html
from .io_utils import read_json, warn
from .verify_roundtrip import verify_roundtrip_all


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert a JsonML document to HTML or JsonML")
    parser.add_argument("--input", type=Path, help="Path to a JsonML .json document")
    parser.add_argument("--out", type=Path, help="Output file (defaults to stdout)")
    parser.add_argument("--config", type=Path, help="YAML file with conversion settings")
    parser.add_argument(
        "--format",
        choices=["html", "jsonml"],
        help="Output format; overrides the config file",
    )
    parser.add_argument(
        "--check",
        type=Path,
        metavar="DIR",
        help="Verify that every *.json document in DIR survives decode/encode unchanged",
    )
    args = parser.parse_args(argv)
    if args.input is None and args.check is None:
        parser.error("one of --input or --check is required")
    return args


def convert(path: Path, config: ConvertConfig) -> str:
    element = decode(read_json(path))
    if config.output == "jsonml":
        return dumps(element, indent=config.indent, ensure_ascii=config.ensure_ascii) + "\n"
    return render_html(element) + "\n"


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    config = load_config(args.config)
    if args.format:
        config = config.model_copy(update={"output": args.format})

    if args.check is not None:
        ok, errors = verify_roundtrip_all(args.check)
        if not ok:
            sys.stderr.write("\n".join(errors))
            sys.exit(1)
        if args.input is None:
            return

    try:
        output = convert(args.input, config)
    except (JsonMLError, OSError, ValueError) as exc:
        warn(f"{args.input}: {exc}")
        sys.exit(1)

    if args.out is None:
        sys.stdout.write(output)
        return
    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text(output, encoding="utf-8")


if __name__ == "__main__":
    main()

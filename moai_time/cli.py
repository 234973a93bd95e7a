import argparse
import json
import logging
import sys

import colorama
from pydantic import ValidationError

from .config import get_default_config
from .errors import GCodeError
from .parser import parse_gcode
from .report import build_report, render_text

logger = logging.getLogger(__name__)


def _progress(layer: int) -> None:
    if layer > 0:
        sys.stderr.write(f"\rProcessed {layer} layers")
        sys.stderr.flush()


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="moai-time",
        description="More accurate time estimation for Peopoly Moai gcode files."
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="G-code file(s) to estimate")
    parser.add_argument("--layer-change-seconds", type=float, default=None,
                        help="Per-layer overhead in seconds (default: 9.5 or MOAI_LAYER_CHANGE_SECONDS)")
    parser.add_argument("--json", action="store_true", help="Print reports as JSON")
    parser.add_argument("--quiet", "-q", action="store_true", help="Hide layer progress")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    colorama.just_fix_windows_console()

    try:
        config = get_default_config(args.layer_change_seconds)
    except ValidationError as e:
        print(f"Error: invalid layer change seconds: {e.errors()[0]['msg']}", file=sys.stderr)
        sys.exit(1)
    color = not args.no_color and sys.stdout.isatty()
    on_layer = None if args.quiet else _progress

    reports = []
    for file_path in args.files:
        logger.debug("Reading %s", file_path)
        try:
            parsed = parse_gcode(file_path, on_layer=on_layer)
        except (GCodeError, OSError) as e:
            if on_layer is not None:
                sys.stderr.write("\n")
            print(f"Error: {file_path}: {e}", file=sys.stderr)
            sys.exit(1)
        if on_layer is not None:
            sys.stderr.write("\n")

        report = build_report(file_path, parsed, config.layer_change_seconds)
        if args.json:
            reports.append(report.model_dump())
        else:
            print(render_text(report, color=color))

    if args.json:
        print(json.dumps(reports, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()

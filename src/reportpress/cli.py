import argparse
import logging
import sys

from .engine import build_demo_report
from .errors import UnknownFamilyError
from .factories import available_families


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reportpress",
        description="Render a demo report with a chosen element family, then export it as XML.",
    )
    parser.add_argument("--family", "-f", default="html",
                        help=f"element family to build the report with ({', '.join(available_families())})")
    parser.add_argument("--verbose", "-v", action="store_true", help="enable debug logging")
    return parser


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # root 已有 handler 时 basicConfig 不生效，包 logger 的级别单独设
    logging.getLogger("reportpress").setLevel(level)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        engine = build_demo_report(args.family)
    except UnknownFamilyError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print("--- 1. Rendering the report (Abstract Factory + Adapter) ---")
    engine.render(sys.stdout)

    print("\n--- 2. Export to XML (Visitor) ---")
    for line in engine.export_xml():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())

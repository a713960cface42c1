"""CLI entry point for envfixture."""

import argparse
import logging
import sys
from typing import List, Mapping, Optional

from envfixture import __version__
from envfixture.config import Config
from envfixture.render import write_fixture
from envfixture.selector import select_keys
from envfixture.snapshot import snapshot

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envfixture",
        description="Dump environment variables as a Rust fixture constant",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Dump the built-in list of edge-case keys
  envfixture > tests/fixtures/edge_cases.rs

  # Dump only selected keys
  envfixture HOME PATH

  # Keys starting with a dash go after --
  envfixture -- -ODD-KEY
""",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("keys", nargs="*", help="Variable names to dump (default: built-in list)")
    parser.add_argument("-o", "--output", help="Write the fixture to a file instead of stdout")
    parser.add_argument("--const-name", help="Name of the generated constant")
    parser.add_argument("--indent", type=int, help="Spaces before each pair")
    parser.add_argument("--config", help="Extra YAML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def cmd_dump(args, environ: Optional[Mapping[str, str]] = None) -> int:
    """Select, read and render the requested variables."""
    config = Config(args.config)
    resolved = config.resolve(const_name=args.const_name, indent=args.indent)

    keys = select_keys(args.keys, default=resolved["default_keys"])
    pairs = snapshot(keys, environ)
    logger.debug("%d of %d keys are set", len(pairs), len(keys))

    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="\n") as f:
            count = write_fixture(pairs, f, resolved["const_name"], resolved["indent"])
        print(f"Wrote {count} pairs to {args.output}", file=sys.stderr)
    else:
        # Characters U+0080..U+00FE are written unescaped
        reconfigure = getattr(sys.stdout, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding="utf-8")
        write_fixture(pairs, sys.stdout, resolved["const_name"], resolved["indent"])
        sys.stdout.flush()
    return 0


def main(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        return cmd_dump(args, environ)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

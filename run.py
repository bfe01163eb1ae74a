"""Labyrinth CLI entry point.

Provides subcommands for generating a level from the command line and for
running the level API server. Accepts configuration via flags and
environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()

# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()


def _load_version() -> str:
    here = os.path.dirname(os.path.abspath(__file__))
    try:
        with open(os.path.join(here, "VERSION"), "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()

# Options that belong to the top-level parser, before any subcommand
_TOP_LEVEL_FLAGS = ("--version", "-h", "--help")
_TOP_LEVEL_VALUE_FLAGS = ("--env-file", "--log-level")


def _add_level_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--half-size", dest="half_size", type=int, default=None, help="Lattice half-size h (lattice is (2h+1)^3)")
    p.add_argument("--percent", type=float, default=None, help="Extra loop density in [0, 1]")
    p.add_argument("--columns", type=int, default=None, help="Number of feature cells kept by dead-end pruning")
    p.add_argument("--unit", type=float, default=None, help="World scale applied to emitted geometry")
    p.add_argument("--shape", choices=["sphere", "cylinder", "cube"], default=None, help="Carving silhouette")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--x-shift", dest="x_shift", action="store_true", default=None, help="Enable x jitter")
    p.add_argument("--y-shift", dest="y_shift", action="store_true", default=None, help="Enable y jitter")
    p.add_argument("--z-shift", dest="z_shift", action="store_true", default=None, help="Enable z jitter")


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Labyrinth level generator

    Generate a spherical 3D maze level or run the HTTP level API. Configuration
    can be provided via CLI flags or LABYRINTH_* environment variables. If both
    are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                 Bind address for the API server (default: 0.0.0.0)
          PORT                 Port for the API server (default: 5000)
          LABYRINTH_HALF_SIZE  Default lattice half-size (default: 9)
          LABYRINTH_PERCENT    Default loop density (default: 0.05)
          LABYRINTH_SEED       Default seed
          LABYRINTH_LOG_LEVEL  Structured log threshold (default: info)

        Examples:
          # Generate a level and print a summary
          python run.py generate --half-size 6 --percent 0.2 --seed 7

          # Dump the full level as JSON
          python run.py generate --seed 7 --json > level.json

          # Run the level API on a custom port
          python run.py server --port 8080
        """
    )

    parser = argparse.ArgumentParser(
        prog="Labyrinth",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["debug", "info", "warn", "error"],
        default=None,
        help="Structured log threshold (default: env LABYRINTH_LOG_LEVEL or info)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Labyrinth {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate one level and print it",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    _add_level_flags(gen_parser)
    gen_parser.add_argument("--json", action="store_true", help="Print the full level as JSON")
    gen_parser.set_defaults(command="generate")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the HTTP level API",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    server_parser.add_argument("--host", default=None, help="Host interface to bind (default: env HOST or 0.0.0.0)")
    server_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 5000)")
    server_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode with verbose error pages")
    server_parser.set_defaults(command="server")

    # If no subcommand provided, default to generate. The subcommand goes after
    # the top-level options so generate flags given bare still parse.
    if not any(a in ("generate", "server") for a in argv):
        i = 0
        while i < len(argv):
            arg = argv[i]
            if arg in _TOP_LEVEL_VALUE_FLAGS:
                i += 2
            elif arg in _TOP_LEVEL_FLAGS or arg.split("=", 1)[0] in _TOP_LEVEL_VALUE_FLAGS:
                i += 1
            else:
                break
        argv = [*argv[:i], "generate", *argv[i:]]

    return parser.parse_args(argv)


def _label(text: str) -> str:
    return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text


def _value(val) -> str:
    return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)


def _error(msg: str) -> None:
    prefix = f"{Fore.RED}[ERROR]{Style.RESET_ALL}" if _COLOR_ENABLED else "[ERROR]"
    print(f"{prefix} {msg}", file=sys.stderr)


def _generate(args: argparse.Namespace) -> int:
    from labyrinth.logging_utils import log
    from labyrinth.maze import ConfigurationError, LevelBuilder, LevelConfig

    try:
        cfg = LevelConfig.from_env(
            half_size=args.half_size,
            percent=args.percent,
            columns=args.columns,
            unit=args.unit,
            shape=args.shape,
            seed=args.seed,
            x_shift=args.x_shift,
            y_shift=args.y_shift,
            z_shift=args.z_shift,
        )
        level = LevelBuilder(cfg).build()
    except ConfigurationError as exc:
        _error(str(exc))
        log.error(event="generate_failed", error=str(exc))
        return 1

    if args.json:
        print(json.dumps(level.to_dict()))
        return 0

    m = level.metrics
    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {_label('Seed:'):14} {_value(level.seed)}",
        f"  {_label('Half-size:'):14} {_value(cfg.half_size)}",
        f"  {_label('Shape:'):14} {_value(cfg.shape)}",
        f"  {_label('Cells:'):14} {_value(len(level.maze.active_cells()))}/{m['cells']}",
        f"  {_label('Loops:'):14} {_value(m['loop_edges'])}",
        f"  {_label('Walls:'):14} {_value(m['walls'])}",
        f"  {_label('Tiles:'):14} {_value(m['tiles'])}",
        f"  {_label('Tubes:'):14} {_value(m['tubes'])}",
        f"  {_label('Runtime:'):14} {_value(str(m['runtime_ms']) + ' ms')}",
        divider,
    ]
    print("\n".join(lines))
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    if getattr(args, "log_level", None):
        from labyrinth.logging_utils import configure

        configure(level=args.log_level)

    mode = (getattr(args, "command", None) or "generate").lower()

    if mode == "generate":
        return _generate(args)

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))
    debug = bool(getattr(args, "debug", False) or os.getenv("FLASK_DEBUG") == "1")

    from labyrinth.logging_utils import log
    from labyrinth.server import start_server

    log.info(event="listen", host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

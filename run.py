"""Delve CLI entry point.

Generates a dungeon and writes it as a PPM image stream, or runs the HTTP
raster service. Accepts configuration via flags and DELVE_* environment
variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()

# Disable colors if diagnostics are not going to a real terminal (e.g., during pytest capture)
try:
    _COLOR_ENABLED = sys.stderr.isatty()
except (AttributeError, ValueError):  # pragma: no cover - environment dependent
    _COLOR_ENABLED = False

COMMANDS = ("generate", "server")


def _load_version() -> str:
    try:
        with open("VERSION", "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        from delve import __version__ as pkg_version

        return pkg_version


__version__ = _load_version()


def _with_default_command(argv: list[str]) -> list[str]:
    """Insert the `generate` subcommand after top-level options when none is given."""
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--env-file":
            i += 2
            continue
        if arg.startswith("--env-file="):
            i += 1
            continue
        break
    if i < len(argv) and argv[i] in COMMANDS + ("-h", "--help", "--version"):
        return argv
    return argv[:i] + ["generate"] + argv[i:]


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Delve dungeon generator

    Places rooms, fills the rest of the grid with a maze, connects every room
    through a door and prunes dead ends. The result is written as a plain-text
    PPM image (or a stream of frames with --animate). Configuration can be
    provided via CLI flags or environment variables; CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          DELVE_WIDTH / DELVE_HEIGHT   Grid size in cells, must be odd (default: 121 x 91)
          DELVE_ATTEMPTS               Room placement attempts (default: 200)
          DELVE_ANIMATE                Emit one frame per carved cell (default: 0)
          DELVE_SEED                   Fixed RNG seed (default: random)
          DELVE_LOG_LEVEL              debug|info|warn|error (default: info)
          HOST / PORT                  Bind address for the server (default: 0.0.0.0:5000)

        Examples:
          # Write a dungeon image
          python run.py generate -w 61 -H 41 > dungeon.ppm

          # Render an animation with ffmpeg
          python run.py --animate | ffmpeg -f image2pipe -c:v ppm -i - dungeon.mp4

          # Serve rasters over HTTP
          python run.py server --port 8080
        """
    )

    parser = argparse.ArgumentParser(
        prog="Delve",
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
        "--version",
        action="version",
        version=f"Delve Dungeon Generator {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    # generate subcommand
    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a dungeon and write it as PPM (default command)",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a random dungeon",
    )
    gen_parser.add_argument(
        "--animate",
        action="store_true",
        default=None,
        help="Generate a PPM stream, one frame per carved cell (for video assembly)",
    )
    gen_parser.add_argument(
        "-w",
        "--width",
        type=int,
        default=None,
        help="Width of the dungeon in cells, must be odd (default: env DELVE_WIDTH or 121)",
    )
    gen_parser.add_argument(
        "-H",
        "--height",
        type=int,
        default=None,
        help="Height of the dungeon in cells, must be odd (default: env DELVE_HEIGHT or 91)",
    )
    gen_parser.add_argument(
        "-a",
        "--attempts",
        type=int,
        default=None,
        help="Number of attempts used to place rooms (default: env DELVE_ATTEMPTS or 200)",
    )
    gen_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed for a reproducible dungeon (default: env DELVE_SEED or random)",
    )
    gen_parser.add_argument(
        "--winding",
        dest="winding_percent",
        type=int,
        default=None,
        help="Corridor winding percent 0..100 (default: 0, straightest corridors)",
    )
    gen_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write to this file instead of stdout",
    )
    gen_parser.add_argument(
        "--ascii",
        action="store_true",
        help="Write the tile grid as text instead of an image",
    )
    gen_parser.set_defaults(command="generate")

    # server subcommand
    server_parser = subparsers.add_parser(
        "server",
        help="Run the HTTP raster service",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Serve one freshly generated dungeon raster per request",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    return parser.parse_args(_with_default_command(argv))


def _error(text: str) -> None:
    prefix = f"{Fore.RED}[ERROR]{Style.RESET_ALL}" if _COLOR_ENABLED else "[ERROR]"
    print(f"{prefix} {text}", file=sys.stderr)


def _banner(mode: str, rows: list[tuple[str, object]]) -> None:
    title = (
        f"{Fore.CYAN}{Style.BRIGHT}Delve Dungeon Generator{Style.RESET_ALL}"
        if _COLOR_ENABLED
        else "Delve Dungeon Generator"
    )

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [divider, f"  {title}", divider, f"  {label('Mode:'):12} {value(mode.upper())}"]
    lines.extend(f"  {label(name + ':'):12} {value(val)}" for name, val in rows)
    lines.extend([divider, ""])
    print("\n".join(lines), file=sys.stderr)


def run_generate(args: argparse.Namespace) -> int:
    from delve.dungeon import Dungeon, DungeonConfig
    from delve.errors import ConfigurationError, UnreachableRoomError
    from delve.logging_utils import log
    from delve.rendering.canvas import Canvas

    try:
        cfg = DungeonConfig.from_env(
            width=args.width,
            height=args.height,
            attempts=args.attempts,
            animate=args.animate,
            seed=args.seed,
            winding_percent=args.winding_percent,
        ).validate()
    except ConfigurationError as e:
        _error(str(e))
        return 2

    out = open(args.output, "w", encoding="ascii") if args.output else sys.stdout
    try:
        if args.ascii:
            dungeon = Dungeon(cfg)
            dungeon.generate()
            out.write(dungeon.to_ascii() + "\n")
        else:
            dungeon = Dungeon(cfg, canvas=Canvas(cfg.width, cfg.height, out))
            dungeon.generate()
    except UnreachableRoomError as e:
        log.error(event="unreachable_room", seed=dungeon.seed, room=e.index)
        _error(f"{e} (seed {dungeon.seed}); try a different seed or grid size")
        if out is not sys.stdout:
            # Leave no partial image behind
            out.close()
            os.remove(args.output)
        return 1
    finally:
        if out is not sys.stdout:
            out.close()

    ok = f"{Fore.GREEN}[OK]{Style.RESET_ALL}" if _COLOR_ENABLED else "[OK]"
    print(
        f"{ok} {len(dungeon.rooms)} rooms, {dungeon.metrics['doors_created']} doors, seed {dungeon.seed}",
        file=sys.stderr,
    )
    return 0


def run_server(args: argparse.Namespace) -> int:
    host = args.host or os.getenv("HOST", "0.0.0.0")
    port = int(args.port or os.getenv("PORT", "5000"))
    debug = bool(args.debug or os.getenv("FLASK_DEBUG") == "1")

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...", file=sys.stderr)
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoint only after environment is ready
    from delve.logging_utils import log
    from delve.server import start_server

    _banner("server", [("Host", host), ("Port", port), ("Debug", "YES" if debug else "NO")])
    log.info(event="listen", host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    # Load .env if requested, else the default .env if present (no error if missing)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        load_dotenv()

    if args.command == "server":
        return run_server(args)
    return run_generate(args)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

import argparse
import logging
import os
import sys

from epsilon_shell.config.settings import Settings
from epsilon_shell.container import DependencyContainer
from epsilon_shell.exceptions import BaseShellError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="epsilon-shell",
        description="Interactive shell for the Epsilon virtual drive.",
    )
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        default=[],
        metavar="LINE",
        help="Run LINE and exit (repeatable, lines run in order)",
    )
    parser.add_argument(
        "--drive-root",
        default=None,
        help="Host directory backing the virtual drive (default: $EPSILON_DRIVE_ROOT)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: $EPSILON_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        config = Settings()
    except BaseShellError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    if args.drive_root:
        config.drive_root = os.path.abspath(os.path.expanduser(args.drive_root))

    logging.basicConfig(
        level=args.log_level or config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger(__name__)

    container = DependencyContainer(config)
    try:
        dispatcher = container.get_dispatcher()
    except BaseShellError as e:
        logger.error(f"Cannot start shell: {e}")
        print(f"Cannot start shell: {e}", file=sys.stderr)
        return 2
    session = container.new_session()
    logger.info(f"Drive {config.drive_prefix} mounted at {config.drive_root}")

    if args.command:
        for line in args.command:
            _ = dispatcher.run(line, session)
        return 0

    console = container.get_console()
    console.info("Commands: " + ", ".join(dispatcher.command_names()))
    while True:
        try:
            line = input(f"{session.cur_path}> ")
        except (EOFError, KeyboardInterrupt):
            console.write_line()
            break
        _ = dispatcher.run(line, session)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

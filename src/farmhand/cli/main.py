from __future__ import annotations

import sys

from farmhand.cli.theme_mode import run_css, run_fonts, run_list, run_show, run_styles
from farmhand.errors.base import FarmhandError
from farmhand.errors.guidance import build_guidance_message
from farmhand.errors.render import format_error
from farmhand.theme.registry import default_registry
from farmhand.version import version_banner


COMMANDS = {
    "list": run_list,
    "show": run_show,
    "styles": run_styles,
    "css": run_css,
    "fonts": run_fonts,
}


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        if not args:
            _print_usage()
            return 1
        cmd = args[0]
        if cmd == "--version":
            print(version_banner())
            return 0
        if cmd in {"--help", "-h", "help"}:
            _print_usage()
            return 0
        handler = COMMANDS.get(cmd)
        if handler is None:
            raise FarmhandError(_unknown_command_message(cmd))
        return handler(default_registry(), args[1:])
    except FarmhandError as err:
        print(format_error(err), file=sys.stderr)
        return 1


def _unknown_command_message(cmd: str) -> str:
    return build_guidance_message(
        what=f"Unknown command '{cmd}'.",
        why=f"Supported commands: {', '.join(COMMANDS)}.",
        fix="Run `farmhand-theme --help` to see usage.",
        example="farmhand-theme list",
    )


def _print_usage() -> None:
    usage = """Usage:
  farmhand-theme list [--json]                          # built-in themes with skins
  farmhand-theme show <key> [--mode light|dark] [--json]  # resolved palette, surfaces and fonts
  farmhand-theme styles <key> [--mode M] [--skin S]     # component style table as JSON
  farmhand-theme css <key> [--mode M] [--skin S]        # compiled stylesheet with --fh-* tokens
  farmhand-theme fonts <key>                            # @font-face blocks for shipped fonts
  farmhand-theme --version
  farmhand-theme --help
"""
    print(usage.strip())


if __name__ == "__main__":
    sys.exit(main())

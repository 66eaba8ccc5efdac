from __future__ import annotations

import difflib
from dataclasses import dataclass

from farmhand.errors.base import FarmhandError
from farmhand.errors.guidance import build_guidance_message
from farmhand.theme.resolver import normalize_mode
from farmhand.theme.styles.skins import resolve_skin


_VALUE_FLAGS = {"--mode", "--skin"}


@dataclass(frozen=True)
class CommandOptions:
    positional: tuple[str, ...]
    mode: str = "light"
    skin: str | None = None
    json_mode: bool = False


def parse_options(command: str, args: list[str], *, flags: set[str]) -> CommandOptions:
    positional: list[str] = []
    values: dict[str, str] = {}
    json_mode = False
    idx = 0
    while idx < len(args):
        item = args[idx]
        if item.startswith("--") and "=" in item:
            name, value = item.split("=", 1)
            _check_flag(command, name, flags)
            values[name] = value
            idx += 1
            continue
        if item in _VALUE_FLAGS and item in flags:
            values[item] = _next_value(command, args, idx)
            idx += 2
            continue
        if item == "--json" and item in flags:
            json_mode = True
            idx += 1
            continue
        if item.startswith("--"):
            _check_flag(command, item, flags)
        positional.append(item)
        idx += 1
    mode = normalize_mode(values.get("--mode", "light"))
    skin = resolve_skin(values["--skin"]) if "--skin" in values else None
    return CommandOptions(positional=tuple(positional), mode=mode, skin=skin, json_mode=json_mode)


def require_key(command: str, options: CommandOptions) -> str:
    if len(options.positional) == 1:
        return options.positional[0]
    if not options.positional:
        what = f"'{command}' needs a theme key."
    else:
        what = f"'{command}' takes one theme key, got {len(options.positional)}."
    raise FarmhandError(
        build_guidance_message(
            what=what,
            why="Each command works on exactly one registered theme.",
            fix="Pass one key from `farmhand-theme list`.",
            example=f"farmhand-theme {command} TractorTheme",
        )
    )


def _check_flag(command: str, flag: str, flags: set[str]) -> None:
    if flag in flags:
        return
    allowed = sorted(flags)
    matches = difflib.get_close_matches(flag, allowed, n=1, cutoff=0.6)
    fix = f'Did you mean "{matches[0]}"?' if matches else "Remove the flag."
    raise FarmhandError(
        build_guidance_message(
            what=f"Unknown flag '{flag}' for '{command}'.",
            why=f"Supported flags: {', '.join(allowed) or 'none'}.",
            fix=fix,
            example="farmhand-theme --help",
        )
    )


def _next_value(command: str, args: list[str], idx: int) -> str:
    flag = args[idx]
    if idx + 1 >= len(args) or args[idx + 1].startswith("--"):
        raise FarmhandError(
            build_guidance_message(
                what=f"Flag '{flag}' is missing a value.",
                why=f"'{flag}' expects a value after it.",
                fix=f"Add a value after {flag}.",
                example=f"farmhand-theme {command} TractorTheme {flag} <value>",
            )
        )
    return args[idx + 1]


__all__ = ["CommandOptions", "parse_options", "require_key"]

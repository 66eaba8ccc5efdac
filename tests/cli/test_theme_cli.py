from __future__ import annotations

import json

from farmhand.cli.main import main
from farmhand.version import get_version


def test_list_plain(capsys) -> None:
    code = main(["list"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("Themes: 6")
    assert "- TractorTheme (default): Tractor Technicians (default) [skin farmhand]" in out
    assert "- RuneScapeTheme: Dungeon Master [skin parchment]" in out


def test_list_json(capsys) -> None:
    code = main(["list", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["count"] == 6
    assert payload["themes"][0] == {
        "default": True,
        "display_name": "Tractor Technicians (default)",
        "key": "TractorTheme",
        "skin": "farmhand",
    }


def test_show_json_dark(capsys) -> None:
    code = main(["show", "TractorTheme", "--mode", "dark", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["id"] == "TractorTheme"
    assert payload["skin"] == "farmhand"
    assert payload["theme"]["mode"] == "dark"
    assert payload["theme"]["palette"]["surface"]["base"] == "#121212"


def test_show_plain_summary(capsys) -> None:
    code = main(["show", "WindowsXPTheme", "--mode=light"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("WindowsXPTheme: Frutiger")
    assert "Mode: light  Skin: retro  Radius: 0px" in out
    assert "- primary: main #245EDB light #5B8DF5 dark #1242A0" in out
    assert "Surfaces:" in out


def test_styles_uses_registered_skin_unless_overridden(capsys) -> None:
    assert main(["styles", "RuneScapeTheme"]) == 0
    parchment = json.loads(capsys.readouterr().out)
    assert "data:image/svg+xml," in parchment["card"]["slots"]["root"]["backgroundImage"]
    assert main(["styles", "RuneScapeTheme", "--skin", "farmhand"]) == 0
    plain = json.loads(capsys.readouterr().out)
    assert plain["card"]["slots"]["root"]["backgroundImage"] == "none"
    assert set(plain) >= {"baseline", "app_bar", "fab"}


def test_css_prints_header_and_tokens(capsys) -> None:
    code = main(["css", "WindowsXPTheme", "--mode", "dark"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("/* WindowsXPTheme dark retro sha256:")
    assert "--fh-radius: 0px;" in out


def test_fonts(capsys) -> None:
    assert main(["fonts", "TractorTheme"]) == 0
    out = capsys.readouterr().out
    assert out.count("@font-face {") == 3
    assert main(["fonts", "WindowsXPTheme"]) == 0
    assert "ships no font assets" in capsys.readouterr().out


def test_version_and_help(capsys) -> None:
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"farmhand-theme {get_version()}"
    assert main(["--help"]) == 0
    assert capsys.readouterr().out.startswith("Usage:")
    assert main([]) == 1


def test_unknown_theme_reports_on_stderr(capsys) -> None:
    code = main(["show", "TractorThem"])
    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert captured.err.startswith("Something went wrong")
    assert 'Did you mean "TractorTheme"?' in captured.err


def test_bad_mode_and_flags(capsys) -> None:
    assert main(["show", "TractorTheme", "--mode", "dusk"]) == 1
    assert "Unknown theme mode 'dusk'" in capsys.readouterr().err
    assert main(["list", "--jsn"]) == 1
    assert 'Did you mean "--json"?' in capsys.readouterr().err
    assert main(["css", "TractorTheme", "--json"]) == 1
    assert "Unknown flag '--json'" in capsys.readouterr().err
    assert main(["show", "TractorTheme", "--mode"]) == 1
    assert "missing a value" in capsys.readouterr().err


def test_argument_count_errors(capsys) -> None:
    assert main(["show"]) == 1
    assert "needs a theme key" in capsys.readouterr().err
    assert main(["fonts", "TractorTheme", "ThunderTheme"]) == 1
    assert "takes one theme key" in capsys.readouterr().err
    assert main(["list", "extra"]) == 1
    assert "takes no arguments" in capsys.readouterr().err


def test_unknown_command(capsys) -> None:
    assert main(["lst"]) == 1
    assert "Unknown command 'lst'" in capsys.readouterr().err

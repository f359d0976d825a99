from __future__ import annotations

import io

import pytest

from asciiart.models.commands import Exit
from asciiart.models.round_mode import RoundMode
from asciiart.service.shell import Shell
from asciiart.settings import AppSettings

from conftest import BLACK, solid, split_black_white


@pytest.fixture
def app_settings(tmp_path):
    return AppSettings(
        default_charset="ab",
        default_resolution=2,
        output="console",
        html_file=str(tmp_path / "out.html"),
        prompt="> ",
    )


def run_shell(app_settings, brightness, script: str, picture=None) -> tuple[Shell, str]:
    stdout = io.StringIO()
    shell = Shell(app_settings, brightness=brightness, stdin=io.StringIO(script), stdout=stdout)
    shell.run(picture or split_black_white(4, 4))
    return shell, stdout.getvalue()


def test_render_to_console(app_settings, ascii_brightness):
    _, out = run_shell(app_settings, ascii_brightness, "asciiart\nexit\n")
    assert "a b\na b\n" in out
    assert out.endswith("> ")


def test_chars_after_add_and_remove(app_settings, ascii_brightness):
    shell, out = run_shell(app_settings, ascii_brightness, "add c-e\nremove d\nchars\nexit\n")
    assert "a b c e\n" in out
    assert shell.index.chars == ("a", "b", "c", "e")


def test_add_all(app_settings, ascii_brightness):
    shell, _ = run_shell(app_settings, ascii_brightness, "add all\nremove space\n")
    assert len(shell.index) == 94
    assert " " not in shell.index


def test_charset_too_small(app_settings, ascii_brightness):
    _, out = run_shell(app_settings, ascii_brightness, "remove a\nasciiart\nexit\n")
    assert "Did not execute. Charset is too small.\n" in out


def test_errors_do_not_stop_the_loop(app_settings, ascii_brightness):
    _, out = run_shell(app_settings, ascii_brightness, "bogus\nadd ab\nchars\nexit\n")
    assert "Invalid command. Please try again.\n" in out
    assert "Did not add due to incorrect format.\n" in out
    assert "a b\n" in out


def test_resolution_bounds(app_settings, ascii_brightness):
    shell, out = run_shell(app_settings, ascii_brightness, "res up\nres up\nres down\nres down\nres down\n")
    lines = [line.lstrip("> ") for line in out.splitlines()]
    assert lines[:5] == [
        "Resolution set to 4",
        "Did not change resolution due to exceeding boundaries.",
        "Resolution set to 2",
        "Resolution set to 1",
        "Did not change resolution due to exceeding boundaries.",
    ]
    assert shell.algorithm.resolution == 1


def test_tall_picture_starts_at_a_renderable_resolution(app_settings, ascii_brightness):
    # 4x16: blocks must be at most 4px, so at least 4 rows
    tall = solid(4, 16, BLACK)
    shell, out = run_shell(app_settings, ascii_brightness, "asciiart\nres down\nexit\n", picture=tall)
    assert shell.algorithm.resolution == 4
    lines = [line.lstrip("> ") for line in out.splitlines()]
    assert lines[:5] == ["a", "a", "a", "a", "Did not change resolution due to exceeding boundaries."]


def test_round_command_updates_index(app_settings, ascii_brightness):
    shell, _ = run_shell(app_settings, ascii_brightness, "round down\n")
    assert shell.index.round_mode is RoundMode.DOWN


def test_html_output(app_settings, ascii_brightness, tmp_path):
    _, out = run_shell(app_settings, ascii_brightness, "output html\nasciiart\nexit\n")
    page = (tmp_path / "out.html").read_text(encoding="utf-8")
    assert "<pre>\nab\nab\n</pre>" in page
    assert "a b" not in out


def test_end_of_input_stops(app_settings, ascii_brightness):
    _, out = run_shell(app_settings, ascii_brightness, "chars\n")
    assert out == "> a b\n> "


def test_settings_drive_initial_state(ascii_brightness, tmp_path):
    app_settings = AppSettings(default_charset="xyz", default_resolution=4, default_round=RoundMode.UP)
    shell = Shell(app_settings, brightness=ascii_brightness, stdin=io.StringIO(""), stdout=io.StringIO())
    shell.load(split_black_white(8, 8))
    assert shell.index.chars == ("x", "y", "z")
    assert shell.index.round_mode is RoundMode.UP
    assert shell.algorithm.resolution == 4
    assert shell.handle_command(Exit(type="exit")) is False

from __future__ import annotations

import io
import logging

import pytest
from PIL import Image

from asciiart.main import main, setup_logging


@pytest.fixture(autouse=True)
def restore_asciiart_logger():
    # main() and setup_logging() replace the handlers of the shared logger
    logger = logging.getLogger("asciiart")
    saved = logger.handlers[:], logger.propagate, logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in saved[0]:
            handler.close()
    logger.handlers[:], logger.propagate, logger.level = saved


def test_missing_image(tmp_path, capsys):
    assert main([str(tmp_path / "missing.png")]) == 1
    assert "Failed to open image" in capsys.readouterr().err


def test_interactive_session(tmp_path, monkeypatch, capsys):
    image = tmp_path / "in.png"
    Image.new("RGB", (6, 2), (0, 0, 0)).save(image)
    config = tmp_path / "asciiart.yaml"
    config.write_text("default_charset: '@ '\nfont_family: No Such Font Family\n", encoding="utf-8")
    monkeypatch.setenv("ASCIIART_CONFIG_FILE", str(tmp_path / "unused.yaml"))
    monkeypatch.setattr("sys.stdin", io.StringIO("chars\nasciiart\nexit\n"))

    assert main([str(image), "--config", str(config)]) == 0
    out = capsys.readouterr().out
    assert out.startswith(">>> ")
    assert ">>>   @\n" in out
    # padded to 8x2 with a white column on each side, one pixel per block
    assert "\n  @ @ @ @ @ @  \n" in out


def test_setup_logging_file(tmp_path, restore_asciiart_logger):
    log_path = tmp_path / "asciiart.log"
    setup_logging("WARNING", str(log_path))
    assert restore_asciiart_logger.propagate is False
    logging.getLogger("asciiart.service.shell").debug("hello from the shell")
    for handler in restore_asciiart_logger.handlers:
        handler.flush()
    assert "hello from the shell" in log_path.read_text(encoding="utf-8")

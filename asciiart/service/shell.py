from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from asciiart.errors import AsciiArtError, InsufficientCharsetError, ResolutionBoundsError
from asciiart.imaging.picture import Picture
from asciiart.matching.char_index import BrightnessFn, CharBrightnessIndex
from asciiart.matching.glyphs import GlyphSampler
from asciiart.models.commands import (
    AddChars,
    ChangeOutput,
    ChangeResolution,
    ChangeRound,
    Command,
    Exit,
    RemoveChars,
    RenderArt,
    ShowChars,
    parse_command,
)
from asciiart.models.round_mode import RoundMode
from asciiart.output.ascii_output import AsciiOutput, ConsoleAsciiOutput, HtmlAsciiOutput
from asciiart.service.algorithm import AsciiArtAlgorithm
from asciiart.settings import AppSettings, settings as default_settings

LOG = logging.getLogger(__name__)

MIN_CHARSET_SIZE = 2


class Shell:
    """Interactive command loop around one picture, one index and one algorithm.

    Commands are parsed into `models.commands` and dispatched by `handle_command`.
    Any `AsciiArtError` raised by a command is printed and the loop goes on.
    """

    def __init__(self,
                 app_settings: Optional[AppSettings] = None,
                 brightness: Optional[BrightnessFn] = None,
                 stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None):
        self.settings = app_settings or default_settings
        self._brightness = brightness
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout
        self.output_method = self.settings.output
        self.index: Optional[CharBrightnessIndex] = None
        self.algorithm: Optional[AsciiArtAlgorithm] = None

    # ---- setup ----
    def load(self, image: Union[str, Path, Picture]) -> None:
        picture = image if isinstance(image, Picture) else Picture.open(image)
        if self._brightness is None:
            self._brightness = GlyphSampler(
                font_family=self.settings.font_family,
                font_path=self.settings.font_path,
                size=self.settings.glyph_size,
            )
        self.index = CharBrightnessIndex(
            self.settings.default_charset,
            self._brightness,
            self.settings.default_round,
        )
        self.algorithm = AsciiArtAlgorithm(
            picture.padded(),
            self.settings.default_resolution,
            self.index,
        )
        alg = self.algorithm
        resolution = min(max(alg.resolution, alg.min_resolution), alg.max_resolution)
        if resolution != alg.resolution:
            LOG.info("starting resolution %d does not fit a %dx%d picture, using %d",
                     alg.resolution, alg.picture.width, alg.picture.height, resolution)
            self.algorithm = AsciiArtAlgorithm(alg.picture, resolution, self.index)

    # ---- loop ----
    def run(self, image: Union[str, Path, Picture]) -> None:
        self.load(image)
        while True:
            self._out.write(self.settings.prompt)
            self._out.flush()
            line = self._in.readline()
            if not line:
                break
            try:
                if not self.handle_command(parse_command(line)):
                    break
            except AsciiArtError as e:
                LOG.debug("command %r failed: %s", line.strip(), e)
                self._print(str(e))

    def handle_command(self, command: Command) -> bool:
        """Applies one command. Returns False when the loop should stop."""
        match command:
            case Exit():
                return False
            case ShowChars():
                self._print(" ".join(self.index.chars))
            case AddChars(chars=chars):
                for c in chars:
                    self.index.add(c)
            case RemoveChars(chars=chars):
                for c in chars:
                    self.index.remove(c)
            case ChangeResolution(direction=direction):
                self._change_resolution(RoundMode(direction))
            case ChangeRound(mode=mode):
                self.index.round_mode = mode
            case ChangeOutput(method=method):
                self.output_method = method
            case RenderArt():
                self._render()
        return True

    # ---- handlers ----
    def _change_resolution(self, direction: RoundMode) -> None:
        alg = self.algorithm
        if direction is RoundMode.UP and alg.resolution * 2 > alg.max_resolution:
            raise ResolutionBoundsError()
        if direction is RoundMode.DOWN and alg.resolution // 2 < alg.min_resolution:
            raise ResolutionBoundsError()
        alg.set_resolution(direction)
        self._print(f"Resolution set to {alg.resolution}")

    def _render(self) -> None:
        if len(self.index) < MIN_CHARSET_SIZE:
            raise InsufficientCharsetError()
        art = self.algorithm.run()
        self.make_output().out(art)

    def make_output(self) -> AsciiOutput:
        if self.output_method == "html":
            return HtmlAsciiOutput(self.settings.html_file, self.settings.html_font)
        return ConsoleAsciiOutput(self._out)

    def _print(self, text: str) -> None:
        print(text, file=self._out)

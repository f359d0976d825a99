from __future__ import annotations

import html
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence, TextIO, Union

Art = Sequence[Sequence[str]]

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>ASCII art</title>
<style>
pre {{ font-family: '{font}', monospace; font-size: 8px; line-height: 1.0; letter-spacing: 0.2em; }}
</style>
</head>
<body>
<pre>
{body}
</pre>
</body>
</html>
"""


class AsciiOutput(ABC):
    @abstractmethod
    def out(self, art: Art) -> None:
        """Renders a character grid (rows of single characters)."""
        ...


class ConsoleAsciiOutput(AsciiOutput):
    def __init__(self, stream: TextIO | None = None, separator: str = " "):
        self._stream = stream
        self._separator = separator

    def out(self, art: Art) -> None:
        stream = self._stream or sys.stdout
        for row in art:
            print(self._separator.join(row), file=stream)


class HtmlAsciiOutput(AsciiOutput):
    def __init__(self, filename: Union[str, Path], font: str):
        self.path = Path(filename)
        self.font = font

    def out(self, art: Art) -> None:
        body = "\n".join(html.escape("".join(row)) for row in art)
        page = HTML_TEMPLATE.format(font=html.escape(self.font, quote=True), body=body)
        self.path.write_text(page, encoding="utf-8")

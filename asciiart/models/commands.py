from __future__ import annotations

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from asciiart.errors import CommandFormatError, InvalidCommandError
from asciiart.models.round_mode import RoundMode

# printable ASCII, space through tilde
ASCII_START = 32
ASCII_END = 127

ALL = "all"
SPACE = "space"
RANGE_SEPARATOR = "-"


def expand_char_spec(spec: str) -> List[str]:
    """Expand an add/remove argument: `all`, `space`, a range like `a-z`, or one character."""
    if spec == ALL:
        return [chr(i) for i in range(ASCII_START, ASCII_END)]
    if spec == SPACE:
        return [chr(ASCII_START)]
    if len(spec) == 3 and spec[1] == RANGE_SEPARATOR:
        start, end = sorted((ord(spec[0]), ord(spec[2])))
        return [chr(i) for i in range(start, end + 1)]
    if len(spec) == 1:
        return [spec]
    raise ValueError(f"not a character, range, 'all' or 'space': {spec!r}")


class ShellCommand(BaseModel):
    model_config = ConfigDict(frozen=True)


class Exit(ShellCommand):
    type: Literal["exit"]


class ShowChars(ShellCommand):
    type: Literal["chars"]


class AddChars(ShellCommand):
    type: Literal["add"]
    chars: List[str]

    @field_validator("chars", mode="before")
    @classmethod
    def _expand(cls, v):
        return expand_char_spec(v) if isinstance(v, str) else v


class RemoveChars(ShellCommand):
    type: Literal["remove"]
    chars: List[str]

    @field_validator("chars", mode="before")
    @classmethod
    def _expand(cls, v):
        return expand_char_spec(v) if isinstance(v, str) else v


class ChangeResolution(ShellCommand):
    type: Literal["res"]
    direction: Literal["up", "down"]


class ChangeRound(ShellCommand):
    type: Literal["round"]
    mode: RoundMode


class ChangeOutput(ShellCommand):
    type: Literal["output"]
    method: Literal["console", "html"]


class RenderArt(ShellCommand):
    type: Literal["asciiart"]


Command = Annotated[
    Union[
        Exit,
        ShowChars,
        AddChars,
        RemoveChars,
        ChangeResolution,
        ChangeRound,
        ChangeOutput,
        RenderArt,
    ],
    Field(discriminator="type"),
]

_COMMAND_ADAPTER: TypeAdapter[Command] = TypeAdapter(Command)

# command word -> (argument field or None, message when the argument is bad)
_SYNTAX = {
    "exit": (None, None),
    "chars": (None, None),
    "asciiart": (None, None),
    "add": ("chars", "Did not add due to incorrect format."),
    "remove": ("chars", "Did not remove due to incorrect format."),
    "res": ("direction", "Did not change resolution due to incorrect format."),
    "round": ("mode", "Did not change rounding method due to incorrect format."),
    "output": ("method", "Did not change output method due to incorrect format."),
}


def parse_command(line: str) -> Command:
    parts = line.split()
    if not parts or parts[0].lower() not in _SYNTAX:
        raise InvalidCommandError()

    name = parts[0].lower()
    field, format_error = _SYNTAX[name]
    payload = {"type": name}
    if field is not None:
        if len(parts) != 2:
            raise CommandFormatError(format_error)
        payload[field] = parts[1]

    try:
        return _COMMAND_ADAPTER.validate_python(payload)
    except ValidationError:
        raise CommandFormatError(format_error) from None

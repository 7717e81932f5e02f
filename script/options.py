"""Global gnuplot options and their statement forms.

Each option value is classified into one variant before formatting:

  Text           set <key> "<value>"  or  set <key> <value>
  Flag           set <key>            or  unset <key>
  SpecialFormat  a key-specific template, e.g. set format x "<value>"

Values are inserted verbatim; embedded double quotes are not escaped.
"""
from __future__ import annotations

from dataclasses import dataclass

from errors import ConfigurationError

# Which string values are written in double quotes
QUOTED = frozenset({
    "xlabel",
    "ylabel",
    "zlabel",
    "xformat",
    "yformat",
    "zformat",
    "decimalsign",
    "output",
    "title",
})

SPECIAL = {
    "xformat": 'set format x "{}"',
    "yformat": 'set format y "{}"',
    "zformat": 'set format z "{}"',
}

# Output type tag → gnuplot terminal driver
TERMINALS = {
    "png": "pngcairo enhanced",
    "svg": "svg dashed enhanced",
}


def register_terminal(tag: str, driver: str) -> None:
    TERMINALS[tag.lower()] = driver


@dataclass(frozen=True)
class Text:
    key: str
    value: str
    quoted: bool = False


@dataclass(frozen=True)
class Flag:
    key: str
    enabled: bool


@dataclass(frozen=True)
class SpecialFormat:
    key: str
    template: str
    value: str


Option = Text | Flag | SpecialFormat


def to_option(key: str, value: object) -> Option:
    """Classify a raw option value; unsupported kinds are rejected."""
    if isinstance(value, (Text, Flag, SpecialFormat)):
        return value
    # bool before numbers: True is an int
    if isinstance(value, bool):
        return Flag(key, value)
    if isinstance(value, str):
        if key in SPECIAL:
            return SpecialFormat(key, SPECIAL[key], value)
        return Text(key, value, quoted=key in QUOTED)
    if isinstance(value, (int, float)):
        return Text(key, str(value))
    raise ConfigurationError(
        f"option {key!r} has unsupported value {value!r} ({type(value).__name__}); "
        "expected str, bool or number"
    )


def format_option(option: Option) -> str:
    if isinstance(option, Flag):
        return f"{'set' if option.enabled else 'unset'} {option.key}"
    if isinstance(option, SpecialFormat):
        return option.template.format(option.value)
    if isinstance(option, Text):
        if option.quoted:
            return f'set {option.key} "{option.value}"'
        return f"set {option.key} {option.value}"
    raise TypeError(f"not an option: {option!r}")


def terminal_statement(tag: str, width: int, height: int, font: str, font_size: int) -> str:
    try:
        driver = TERMINALS[tag.lower()]
    except KeyError:
        known = ", ".join(sorted(TERMINALS))
        raise ConfigurationError(f"unknown output type {tag!r} (known: {known})") from None
    return f'set terminal {driver} size {width}, {height} font "{font},{font_size}"'

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, TypeVar

from docx_codec.xml_node import XmlNode

E = TypeVar("E", bound=Enum)

_OFF_VALUES = {"0", "false", "off"}
_TWIPS_PER_POINT = 20


def w(name: str) -> tuple[str, str]:
    return (f"w:{name}", name)


def parse_on_off(value: str | None, default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in _OFF_VALUES


def on_off_element(node: XmlNode | None) -> bool:
    if node is None:
        return False
    return parse_on_off(node.get(*w("val")))


def parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return int(float(text))
    except (ValueError, OverflowError):
        return None


def parse_non_negative_int(value: str | None) -> int | None:
    parsed = parse_int(value)
    if parsed is None or parsed < 0:
        return None
    return parsed


def parse_dxa(value: str | None) -> int | None:
    if value is None:
        return None
    text = value.strip()
    if text.lower().endswith("pt"):
        try:
            return int(float(text[:-2]) * _TWIPS_PER_POINT)
        except (ValueError, OverflowError):
            return None
    return parse_int(text)


def parse_non_negative_dxa(value: str | None) -> int | None:
    parsed = parse_dxa(value)
    if parsed is None or parsed < 0:
        return None
    return parsed


def parse_percent(value: str | None) -> int | None:
    if value is None:
        return None
    return parse_int(value.strip().rstrip("%"))


def parse_enum(value: str | None, enum_cls: type[E], default: E | None = None) -> E | None:
    if value is None:
        return default
    try:
        return enum_cls(value.strip())
    except ValueError:
        return default


def enum_parser(enum_cls: type[E]) -> Callable[[str], E | None]:
    def _parse(value: str) -> E | None:
        return parse_enum(value, enum_cls)

    return _parse


def text_value(value: str | None) -> str | None:
    return value


@dataclass(frozen=True)
class Attr:
    """One attribute field: candidate keys in priority order, its default and its conversion."""

    keys: tuple[str, ...]
    default: Any = None
    convert: Callable[[str], Any] = text_value

    def read(self, node: XmlNode | None) -> Any:
        if node is None:
            return self.default
        raw = node.get(*self.keys)
        if raw is None:
            return self.default
        value = self.convert(raw)
        if value is None:
            return self.default
        return value

    def present(self, node: XmlNode | None) -> bool:
        return node is not None and node.get(*self.keys) is not None


def dual_attr(node: XmlNode | None, primary: Attr, fallback: Attr) -> Any:
    if primary.present(node):
        value = primary.convert(node.get(*primary.keys))
        if value is not None:
            return value
    return fallback.read(node)


VAL = Attr(w("val"))
VAL_INT = Attr(w("val"), convert=parse_int)
VAL_DXA = Attr(w("val"), convert=parse_dxa)

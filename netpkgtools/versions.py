"""Package file name parsing and version ordering."""

from __future__ import annotations

import re
from dataclasses import dataclass

_PACKAGE_RE = re.compile(r".*-([^-]*)-[^-]*-([^-]*)\.t[glx]z")

VERSION_KEY_LENGTH = 128
BUILD_KEY_LENGTH = 64
_SLOT_WIDTH = 8
_DEFAULT_FLAG = "55"
_DIGITS = frozenset("0123456789")

_KEYWORDS = (
    "cvs", "svn", "git",
    "alpha1", "alpha2", "alpha3", "alpha4", "alpha",
    "beta1", "beta2", "beta3", "beta4", "beta",
    "pre1", "pre2", "pre3", "pre4", "pre",
    "rc1", "rc2", "rc3", "rc4", "rc",
    "a", "b", "c", "d", "e", "f", "g", "h", "i", "j", "k", "l",
)
_HIGH_FLAGS = "00011111222223333344444666677778888"
_LOW_FLAGS = "55512345123451234512345123412341234"

# Ordered: longer spellings come before their prefixes.
_KEYWORD_FLAGS = tuple(
    (word, high + low) for word, high, low in zip(_KEYWORDS, _HIGH_FLAGS, _LOW_FLAGS)
)


@dataclass(frozen=True)
class PackageFields:
    """The version and build parts of a package file name."""

    name: str
    version: str
    build: str

    @property
    def version_key(self) -> str:
        return serialize_version(self.version)

    @property
    def build_key(self) -> str:
        return serialize_build(self.build)


def parse_package(name: str) -> PackageFields:
    """Split ``name-version-arch-build.t?z`` into its fields.

    Raises ValueError when the name does not have that shape.
    """
    match = _PACKAGE_RE.fullmatch(name)
    if match is None:
        raise ValueError(f"not a package file name: {name!r}")
    return PackageFields(name=name, version=match.group(1), build=match.group(2))


def _place(cells: list[str], end: int, chars: list[str]) -> None:
    """Write ``chars`` right-aligned so that the last one lands before ``end``."""
    for position, char in enumerate(chars, start=end - len(chars)):
        if 0 <= position < len(cells):
            cells[position] = char


def _match_keyword(text: str, position: int) -> tuple[str, str] | None:
    for word, flag in _KEYWORD_FLAGS:
        if text[position:position + len(word)].lower() == word:
            return word, flag
    return None


def _serialize(text: str, length: int, separators: str, use_keywords: bool) -> tuple[list[str], str]:
    cells = ["0"] * length
    flag = _DEFAULT_FLAG
    text = text.lstrip("0")
    pending: list[str] = []
    slot = 0
    position = 0
    while position < len(text):
        char = text[position]
        if char in _DIGITS:
            pending.append(char)
            position += 1
            continue
        if char in separators:
            slot += 1
            _place(cells, slot * _SLOT_WIDTH, pending)
            pending = []
            position += 1
            continue
        keyword = _match_keyword(text, position) if use_keywords else None
        if keyword is None:
            pending.append(char)
            position += 1
        else:
            word, flag = keyword
            position += len(word)
    slot += 1
    _place(cells, slot * _SLOT_WIDTH, pending)
    return cells, flag


def serialize_version(version: str) -> str:
    """Turn a version string into a fixed-width key that sorts as text."""
    cells, flag = _serialize(version, VERSION_KEY_LENGTH, "._", use_keywords=True)
    cells[-2:] = list(flag)
    return "".join(cells)


def serialize_build(build: str) -> str:
    """Turn a build string into a fixed-width key that sorts as text."""
    cells, _ = _serialize(build, BUILD_KEY_LENGTH, "._z", use_keywords=False)
    return "".join(cells)


def _sign(first: str, second: str) -> int:
    return (first > second) - (first < second)


def compare_packages(name1: str, name2: str) -> int:
    """Return 1, 0 or -1 as package ``name1`` is newer, equal or older than ``name2``.

    Raises ValueError when either name is not a package file name.
    """
    first = parse_package(name1)
    second = parse_package(name2)
    order = _sign(first.version_key, second.version_key)
    if order:
        return order
    return _sign(first.build_key, second.build_key)
"""Filter package comparison lines down to updates, downgrades or new packages."""

from __future__ import annotations

import getopt
import re
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from netpkgtools.versions import compare_packages, parse_package

VERSION = "0.2"

USAGE = "\n".join(
    [
        "",
        f"vfilter v{VERSION} : compare versions and returns updated packages",
        "Usage : vfilter [-a] [-u] [-d] [-n] -q query -f filename",
        "[-a] : show all",
        "[-u] : show updates",
        "[-d] : show downgrades",
        "[-n] : show news",
        '"filename" is in format "package1 | package2"',
        '"query" is a filter matching on package1',
        'no "filename" <=> stdin is used',
    ]
)

_TOKEN_RE = re.compile(r"\s*(\S+)")
_BAR_RE = re.compile(r"\s*\|")


@dataclass(frozen=True)
class FilterOptions:
    """Which lines to keep."""

    show_all: bool = False
    show_updates: bool = False
    show_downgrades: bool = False
    show_news: bool = False
    query: str | None = None


def _scan_fields(line: str) -> tuple[str, str, str]:
    """Read ``category | package | package``; missing fields come back empty."""
    fields: list[str] = []
    position = 0
    while len(fields) < 3:
        if fields:
            bar = _BAR_RE.match(line, position)
            if bar is None:
                break
            position = bar.end()
        token = _TOKEN_RE.match(line, position)
        if token is None:
            break
        fields.append(token.group(1))
        position = token.end()
    fields.extend([""] * (3 - len(fields)))
    return fields[0], fields[1], fields[2]


def filter_lines(lines: Iterable[str], options: FilterOptions) -> Iterator[str]:
    """Yield the lines (without newline) that the options select."""
    for raw in lines:
        line = raw.removesuffix("\n")
        if options.show_all:
            yield line
            continue
        _, name1, name2 = _scan_fields(line)
        if not name1:
            continue
        if options.query is not None and not name1.startswith(options.query):
            continue
        try:
            parse_package(name1)
        except ValueError:
            continue
        if options.show_news:
            if not name2:
                yield line
            continue
        try:
            order = compare_packages(name1, name2)
        except ValueError:
            continue
        if order > 0 and options.show_updates:
            yield line
        elif order < 0 and options.show_downgrades:
            yield line


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(USAGE)
        return 1
    try:
        opts, _ = getopt.gnu_getopt(args, "f:q:audnh")
    except getopt.GetoptError as exc:
        print(f"vfilter: {exc}", file=sys.stderr)
        return 1

    filename = None
    settings = {}
    for flag, value in opts:
        if flag == "-h":
            print(USAGE)
            return 1
        if flag == "-f":
            filename = value
        elif flag == "-q":
            settings["query"] = value
        elif flag == "-a":
            settings["show_all"] = True
        elif flag == "-u":
            settings["show_updates"] = True
        elif flag == "-d":
            settings["show_downgrades"] = True
        elif flag == "-n":
            settings["show_news"] = True
    options = FilterOptions(**settings)

    if filename is None:
        for line in filter_lines(sys.stdin, options):
            print(line)
        return 0
    try:
        with open(filename, encoding="utf-8", errors="replace") as stream:
            for line in filter_lines(stream, options):
                print(line)
    except OSError as exc:
        print(f"vfilter: cannot open {filename}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
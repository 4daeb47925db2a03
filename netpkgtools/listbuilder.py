"""Merge an available-package list with an installed-package list."""

from __future__ import annotations

import getopt
import re
import sys
from collections.abc import Iterable, Iterator

VERSION = "0.1"

USAGE = "\n".join(
    [
        "",
        f"listbuilder v{VERSION} : build 1 main list from 2 package lists",
        "Usage : listbuilder -a filename1 -i filename2",
        '"filename1" must contain lines in format "category package"',
        '"filename2" must contain lines in format "package"',
    ]
)

_SOFT_NAME_RE = re.compile(r"(.*)-[^-]*-[^-]*-[^-]*\.t[glx]z")


def soft_name(package: str) -> str | None:
    """Return the software name of a package file name, or None if it is not one."""
    match = _SOFT_NAME_RE.fullmatch(package)
    return match.group(1) if match else None


def build_list(available_lines: Iterable[str], installed_lines: Iterable[str]) -> Iterator[str]:
    """Yield ``category | available | installed`` for each available package.

    The installed column is empty when no installed package has the same
    software name (compared without regard to case).
    """
    installed: dict[str, str] = {}
    for line in installed_lines:
        tokens = line.split()
        if not tokens:
            continue
        name = soft_name(tokens[0])
        if name is not None:
            installed.setdefault(name.lower(), tokens[0])

    for line in available_lines:
        tokens = line.split()
        if len(tokens) < 2:
            continue
        category, package = tokens[0], tokens[1]
        name = soft_name(package)
        if name is None:
            continue
        yield f"{category} | {package} | {installed.get(name.lower(), '')}"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(USAGE)
        return 1
    try:
        opts, _ = getopt.gnu_getopt(args, "a:i:h")
    except getopt.GetoptError as exc:
        print(f"listbuilder: {exc}", file=sys.stderr)
        return 1

    available_path = installed_path = None
    for flag, value in opts:
        if flag == "-h":
            print(USAGE)
            return 1
        if flag == "-a":
            available_path = value
        elif flag == "-i":
            installed_path = value
    if available_path is None or installed_path is None:
        return 1

    try:
        with open(available_path, encoding="utf-8", errors="replace") as available, \
                open(installed_path, encoding="utf-8", errors="replace") as installed:
            for line in build_list(available, installed):
                print(line)
    except OSError as exc:
        print(f"listbuilder: cannot open {exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
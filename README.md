# netpkgtools

Two small command-line helpers for a package manager. The package manager
works with package files named `name-version-arch-build.tgz`. The `.tlz` and
`.txz` endings are accepted as well.

## Installation

    pip install .

For the tests:

    pip install .[test]
    pytest

## Commands

Both commands print their usage and exit with status 1 when you run them
with no arguments or with `-h`.

### listbuilder

Builds one main list from two package lists:

    listbuilder -a available.txt -i installed.txt

- `available.txt` holds lines of the form `category package`.
- `installed.txt` holds one package file name per line. Only the first
  word of each line is used.

Each line of `available.txt` gives one output line of the form
`category | package | installed-package`. The third field is the first
installed package with the same software name. The software name is the
part of the file name before `-version-arch-build`, and case is ignored
when names are compared. If no installed package matches, the third field
is left empty. Lines that are not package file names are skipped, in both
files.

The command exits with status 1 in these cases: either file cannot be
opened, or one of `-a` and `-i` is missing.

### vfilter

Reads lines in the format `category | package1 | package2`. It compares the
version and build of `package1` with those of `package2`, and prints the
lines that you select:

    vfilter -u -f list.txt        # updates: package1 is newer
    vfilter -d -f list.txt        # downgrades: package1 is older
    vfilter -n -f list.txt        # new packages: the package2 field is empty
    vfilter -a -f list.txt        # every line, unchanged
    vfilter -u -q foo -f list.txt # only lines whose package1 starts with "foo"

You can give `-u` and `-d` together. Lines where both packages have the same
version and build are never printed. Lines whose package names cannot be
parsed are skipped, except with `-a`. Without `-f` the list is read from
standard input, so the two commands chain together:

    listbuilder -a available.txt -i installed.txt | vfilter -u

## Library use

```python
from netpkgtools.versions import compare_packages, parse_package

fields = parse_package("foo-1.2.3-i486-1.tgz")
fields.version, fields.build      # ("1.2.3", "1")
compare_packages("foo-1.3-i486-1.tgz", "foo-1.2-i486-1.tgz")  # 1: newer
```

- `parse_package(name)` returns a `PackageFields` with `name`, `version`
  and `build`, plus `version_key` and `build_key`. It raises `ValueError`
  for names that are not package file names.
- `serialize_version(version)` turns a version into a fixed-width key of
  128 characters, and `serialize_build(build)` turns a build into a key of
  64 characters. The keys compare correctly as plain strings.
- `compare_packages(name1, name2)` returns `1`, `0` or `-1`. It compares
  the versions first and the builds only when the versions are equal.

Version strings recognise the markers `cvs`, `svn`, `git`, `alpha`, `beta`,
`pre` and `rc`, with or without a number 1–4 after them. They also recognise
the single-letter suffixes `a` to `l`. A final release sorts after its
alphas, betas, pre-releases and release candidates.

`netpkgtools.vfilter.filter_lines(lines, FilterOptions(...))` and
`netpkgtools.listbuilder.build_list(available_lines, installed_lines)` do the
same work as the commands, on iterables of lines. Both are generators.
`netpkgtools.listbuilder.soft_name(package)` returns the software name of a
package file name, or `None`.

## What it does not do

These tools only compare and merge lists of package file names. They do not
download, install, upgrade or remove packages. They do not read package
sources or mirrors, and they do not keep a database of installed packages.
You must produce the input lists yourself.
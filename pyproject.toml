[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netpkgtools"
version = "10.0"
description = "Compare package version strings and merge package lists for a package manager front-end"
requires-python = ">=3.10"
dependencies = []
keywords = ["packages", "versions", "package-manager", "version-comparison"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Software Distribution",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vfilter = "netpkgtools.vfilter:main"
listbuilder = "netpkgtools.listbuilder:main"

[tool.hatch.build.targets.wheel]
packages = ["netpkgtools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

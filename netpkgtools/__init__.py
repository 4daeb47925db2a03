"""Package version comparison, update filtering and package list merging."""

__version__ = "10.0"
__all__ = ["versions", "vfilter", "listbuilder"]
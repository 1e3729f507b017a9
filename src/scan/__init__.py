"""File discovery and call-site location."""

from scan.call_sites import find_call_sites, iter_call_sites
from scan.files import find_source_files

__all__ = ["find_call_sites", "find_source_files", "iter_call_sites"]

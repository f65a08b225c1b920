"""Affordance Forms: HTML form rendering for hypermedia affordances"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("affordance-forms")
except PackageNotFoundError:
    __version__ = "dev"

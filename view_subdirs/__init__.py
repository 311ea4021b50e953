"""View Subdirs App"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("view-subdirs")
except PackageNotFoundError:
    __version__ = "dev"

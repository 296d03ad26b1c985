"""imagecache - On-disk image cache with base64 transcoding for host applications."""

from importlib import metadata

try:
    __version__ = metadata.version("imagecache")
except metadata.PackageNotFoundError:
    # Package is not installed, so version is not available
    __version__ = "0.0.0+unknown"

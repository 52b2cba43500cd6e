"""
hab-export — delegate package export formats to helper packages.
"""

__version__ = "0.1.0"

# Product name reported to the installer (user agent / telemetry).
PRODUCT = "hab"
VERSION = __version__

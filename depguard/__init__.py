"""depguard — block prohibited dependency versions in project manifests."""

__version__ = "0.1.0"

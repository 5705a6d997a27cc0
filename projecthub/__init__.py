"""projecthub: in-memory open source project tracker."""

__version__ = "0.1.0"

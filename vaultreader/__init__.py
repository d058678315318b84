"""vaultreader - browse, edit and cross-reference a document vault."""

__version__ = "0.1.0"

"""Constants for reference resolution (private)."""

STATUS_OK = "ok"
STATUS_MISSING_TARGET = "missing_target"

VAULT_URI_PREFIX = "vault:///"
DOCUMENT_SUFFIX = ".md"

"""Canonical logging field names for genapi runtime log records.

Formatters and context helpers share these keys so structured output keeps a
stable shape across generated clients.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"

# Per-call fields bound while wrapping responses.
STATUS_CODE = "status_code"

# Common client-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"

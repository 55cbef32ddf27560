"""Core constants: connection and directory defaults.

Single source of truth for defaults shared by Settings, the REST client and
the service.
"""

# Web application the engine's REST APIs are mounted under
DEFAULT_CONTEXT_ROOT = "flowable-task"

# Per-request timeout (connect, read, write, pool) in seconds
DEFAULT_TIMEOUT_SECONDS = 30.0

# Users requested per identity directory page
DEFAULT_DIRECTORY_PAGE_SIZE = 1000

"""Machine-readable error codes.

Codes follow the ENTITY_ACTION_REASON convention and double as the ``error``
field of JSON error responses, so their values are part of the public
contract with dashboard clients.
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes carried by every DomainError."""

    # Caller authentication
    UNAUTHORIZED = "unauthorized"

    # Credential lifecycle
    NOT_CONNECTED = "not_connected"
    CONFIGURATION_ERROR = "configuration_error"
    REFRESH_FAILED = "refresh_failed"

    # Report fetching
    FETCH_FAILED = "fetch_failed"

    # Gate
    ALREADY_SYNCED = "already_synced"

    # Persistence
    STORAGE_ERROR = "storage_error"
    CONCURRENT_UPDATE = "concurrent_update"
    NO_CACHED_DATA = "no_cached_data"

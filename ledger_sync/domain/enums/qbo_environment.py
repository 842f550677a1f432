"""Remote accounting environment a credential belongs to."""

from enum import Enum


class QboEnvironment(str, Enum):
    """Remote accounting environment.

    Selects the client credentials used for token refresh and the API base
    URL used for report requests.
    """

    SANDBOX = "sandbox"
    PRODUCTION = "production"

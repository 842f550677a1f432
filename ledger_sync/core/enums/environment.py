"""Application environment types.

Drives environment-specific behavior such as the log renderer:
- DEVELOPMENT: local runs, human-readable console logs
- TESTING: automated test execution, JSON logs
- CI: continuous integration, JSON logs
- PRODUCTION: deployed service
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

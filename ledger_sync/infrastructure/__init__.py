"""Infrastructure adapters (database, remote API, logging, security)."""

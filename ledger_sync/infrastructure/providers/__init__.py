"""Remote accounting service adapters."""

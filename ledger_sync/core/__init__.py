"""Core package: configuration, result types, errors and the DI container."""

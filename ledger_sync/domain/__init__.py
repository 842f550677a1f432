"""Domain layer: entities, value objects, protocols and the sync gate."""

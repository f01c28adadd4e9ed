"""Domain layer: value objects, entities and pure domain services."""

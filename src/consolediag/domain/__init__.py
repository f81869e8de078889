"""Domain layer: value objects, state, exceptions and ports."""

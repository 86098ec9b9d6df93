"""Domain layer: entities shared by the core and its consumers."""

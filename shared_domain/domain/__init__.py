"""Domain layer: building blocks shared by every bounded context."""

"""Infrastructure adapters that need nothing beyond the standard library."""

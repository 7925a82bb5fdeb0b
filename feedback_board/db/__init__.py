"""Storage backends for persisted keyed values."""

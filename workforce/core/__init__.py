"""Core: configuration, per-reference locking and composition root."""

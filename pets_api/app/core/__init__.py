"""Core infrastructure: configuration, logging, storage and failures."""

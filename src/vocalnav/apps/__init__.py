"""Application layer: configuration, preference storage, session and CLI."""

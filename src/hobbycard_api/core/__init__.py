"""Core utilities: exceptions and event logging."""

"""Core configuration, errors, validation and wiring."""

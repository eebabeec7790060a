"""Configuration and record containers."""

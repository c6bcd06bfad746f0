"""Configuration for searchmoji."""

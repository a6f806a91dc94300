"""Core configuration engine and utilities."""

"""Core widget logic."""

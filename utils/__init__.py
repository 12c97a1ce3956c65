"""Configuration, prompting and rendering helpers."""

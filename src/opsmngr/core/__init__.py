"""Configuration, errors, domain models and the path/argument helpers."""

"""Configuration, paths, errors and file helpers shared by all modules."""

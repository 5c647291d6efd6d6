"""boxgen - generate the on-device codegen test suite from box() test data."""

__version__ = "0.1.0"

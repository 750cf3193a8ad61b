"""Pre-processor generating reflection, component and endpoint code for annotated C++ headers, with its runtime helpers."""

__version__ = "0.1.0"
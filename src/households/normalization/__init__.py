"""
households.normalization package

Contains normalization modules such as:

- address_normalization

This __init__ intentionally exports NOTHING to avoid circular imports.
"""

__all__ = []

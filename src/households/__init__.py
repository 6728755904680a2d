"""
households

Groups individual-person records into households keyed by normalized
address and reports per-household occupant demographics.
"""

__version__ = "0.1.0"

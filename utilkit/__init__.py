"""
utilkit – small demonstration utilities.

Re-exports the public operations so callers can write
``from utilkit import add, greet``.
"""

from utilkit.utils.arithmetic import add, multiply
from utilkit.utils.text import greet
from utilkit.utils.sequences import filter_even
from utilkit.fetch.simulated import fetch_data

__all__ = ["add", "multiply", "greet", "filter_even", "fetch_data"]

"""
datasets/
---------
Input arrays for the drivers.

    from datasets import make_array, parse_custom_input, DISTRIBUTIONS
"""

from datasets.generators import DISTRIBUTIONS, make_array, parse_custom_input

__all__ = [
    "DISTRIBUTIONS",
    "make_array",
    "parse_custom_input",
]

"""
Finite partial orders with two interchangeable representations.
"""

from finpartord.core import *
from finpartord.core import __all__

"""
IRIS MATCHER - Hamming Distance Iris Code Matching

A small command-line demonstrator that enrolls named identities with a binary
iris code and authenticates claimed identities by normalized Hamming distance
against a fixed acceptance threshold.

The matching engine (decoding, alignment, distance, decision) is independent
of the interactive driver and can be used directly through ``IrisMatcher``.
"""

from .identity_store import IdentityStore
from .matcher import IrisMatcher, is_match

__version__ = "1.0.0"
__author__ = "Iris Matcher Team"

__all__ = ["IdentityStore", "IrisMatcher", "is_match"]

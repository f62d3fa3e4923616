"""Companion matcher exports."""

from .instantiation_blocking import InstantiationNotAllowedMatcher, instantiation_not_allowed
from .number_signs import Sign, SignMatcher, is_negative, is_positive

__all__ = [
    "InstantiationNotAllowedMatcher",
    "instantiation_not_allowed",
    "Sign",
    "SignMatcher",
    "is_negative",
    "is_positive",
]

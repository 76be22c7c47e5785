"""
Mugplugin IO - typed design snapshot and constraint policy loading.

Example:
    >>> from mugplugin.io import ConstraintPolicy, load_policy_json
    >>>
    >>> policy = load_policy_json("policy.json")
    >>> strict = ConstraintPolicy(max_dimension_mm=300)
"""

from .loaders import (
    MugDesign,
    ConstraintPolicy,
    load_policy_json,
)

__all__ = [
    "MugDesign",
    "ConstraintPolicy",
    "load_policy_json",
]

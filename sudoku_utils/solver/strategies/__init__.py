"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies. The import order
below is the order in which the solving loop tries them.
"""

from .existing_singles import EliminateUsingExistingSingles
from .hidden_singles import SetHiddenSingles
from .pointing import EliminateUsingPointing
from .naked_pairs import EliminateUsingNakedPairs
from .hidden_groups import EliminateUsingHiddenGroups
from .x_wing import EliminateUsingXWing
from .y_wing import EliminateUsingYWing
from .single_randomly import SetSingleRandomly

__all__ = [
    "EliminateUsingExistingSingles",
    "SetHiddenSingles",
    "EliminateUsingPointing",
    "EliminateUsingNakedPairs",
    "EliminateUsingHiddenGroups",
    "EliminateUsingXWing",
    "EliminateUsingYWing",
    "SetSingleRandomly",
]

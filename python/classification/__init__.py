"""
Classification Module

Rule-tree categorization of Fortuneo operations from the words of their label.
"""

from .tree import ClassificationTree, TreeNode
from .engine import (
    CategoryMetadata,
    ClassificationEngine,
    Polarity,
    classify_credit,
    classify_debit,
    get_default_engine,
    tokenize_label,
)

__all__ = [
    # Rules
    "ClassificationTree",
    "TreeNode",
    # Engine
    "CategoryMetadata",
    "ClassificationEngine",
    "Polarity",
    "classify_credit",
    "classify_debit",
    "get_default_engine",
    "tokenize_label",
]

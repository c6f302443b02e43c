"""
Classification Engine Module

Categorizes Fortuneo operations by walking the classification tree with the
words of their label.
"""

import logging
from dataclasses import dataclass, fields
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Sequence

from .tree import CREDIT_KEY, DEBIT_KEY, ClassificationTree, TreeNode

logger = logging.getLogger(__name__)

# Card payments read "CARTE <date or card ref> <merchant> ..."
CARD_PREFIX = "CARTE"


class Polarity(Enum):
    """Direction of an operation."""
    CREDIT = CREDIT_KEY
    DEBIT = DEBIT_KEY


@dataclass
class CategoryMetadata:
    """Category metadata of an operation."""

    id: str = "0"
    probability: float = 0
    category_type: str = "none"

    @property
    def is_classified(self) -> bool:
        return self.id != "0"

    def apply(self, values: Mapping[str, Any]) -> None:
        """Overwrite the fields defined in values."""
        for f in fields(self):
            value = values.get(f.name)
            if value is not None:
                setattr(self, f.name, value)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "probability": self.probability,
            "categoryType": self.category_type,
        }


def tokenize_label(label: str) -> list[str]:
    """Split an operation label into words."""
    return label.split()


class ClassificationEngine:
    """Matches operation labels against the classification tree."""

    def __init__(self, tree: ClassificationTree):
        """Initialize the engine.

        Args:
            tree: Classification rules
        """
        self.tree = tree

    @classmethod
    def from_config(cls, config_dir: Path | str | None = None) -> "ClassificationEngine":
        """Create an engine from the rules file named in the connector settings."""
        # bank.operations imports this module
        from bank.settings import ConnectorSettings, get_config_dir

        config_dir = get_config_dir(config_dir)
        settings = ConnectorSettings.load(config_dir)
        return cls(ClassificationTree.load(config_dir / settings.classification_file))

    def classify(self, words: Sequence[str], polarity: Polarity) -> CategoryMetadata:
        """Find the metadata of an operation from the words of its label.

        The deepest node reached by the words gives the result; the walk
        stops at the first word without a matching child.

        Args:
            words: Words of the label
            polarity: Whether the operation is a credit or a debit, as a
                Polarity or its "_credit" / "_debit" value

        Returns:
            CategoryMetadata, the default one when the first word is unknown

        Raises:
            ValueError: If polarity is neither a credit nor a debit
        """
        polarity = Polarity(polarity)
        metadata = CategoryMetadata()
        if not words:
            return metadata

        node = self.tree.root(words[0])
        if node is None:
            return metadata

        # Skip the card reference following CARTE
        start = 2 if words[0].upper() == CARD_PREFIX else 1

        self._read_metadata(node, polarity, metadata)

        for word in words[start:]:
            child = node.child(word)
            if child is None:
                break
            self._read_metadata(child, polarity, metadata)
            node = child

        return metadata

    def classify_credit(self, words: Sequence[str]) -> CategoryMetadata:
        """Classify a credit operation, ignoring the debit-only metadata."""
        return self.classify(words, Polarity.CREDIT)

    def classify_debit(self, words: Sequence[str]) -> CategoryMetadata:
        """Classify a debit operation, ignoring the credit-only metadata."""
        return self.classify(words, Polarity.DEBIT)

    def classify_label(self, label: str, polarity: Polarity) -> CategoryMetadata:
        return self.classify(tokenize_label(label), polarity)

    @staticmethod
    def _read_metadata(node: TreeNode, polarity: Polarity, metadata: CategoryMetadata) -> None:
        metadata.apply(node.defaults)
        if polarity is Polarity.CREDIT:
            metadata.apply(node.credit)
        elif polarity is Polarity.DEBIT:
            metadata.apply(node.debit)


@lru_cache(maxsize=1)
def get_default_engine() -> ClassificationEngine:
    """Engine loaded once from the configuration directory."""
    engine = ClassificationEngine.from_config()
    logger.info(f"Classification engine ready with {len(engine.tree)} roots")
    return engine


def classify_credit(words: Sequence[str]) -> CategoryMetadata:
    return get_default_engine().classify_credit(words)


def classify_debit(words: Sequence[str]) -> CategoryMetadata:
    return get_default_engine().classify_debit(words)

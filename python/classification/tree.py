"""
Classification Tree Module

Read-only rule tree used to categorize operations from the words of their
label. Loaded from config/classification.json.

Each node of the JSON file may hold metadata fields (``_id``, ``_proba``,
``_type``), ``_credit`` / ``_debit`` sub-records overriding them for one kind
of operation, and child nodes keyed by the next word of the label::

    {
      "VIR": {
        "_id": "200110",
        "_credit": {"_proba": 90},
        "SALAIRE": {"_id": "200110", "_proba": 100}
      }
    }
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

logger = logging.getLogger(__name__)

CREDIT_KEY = "_credit"
DEBIT_KEY = "_debit"

# Key in the JSON file -> CategoryMetadata field
METADATA_KEYS = {
    "_id": "id",
    "_proba": "probability",
    "_type": "category_type",
    "id": "id",
    "probability": "probability",
    "categoryType": "category_type",
}

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class TreeNode:
    """Node of the classification tree."""

    defaults: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    credit: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    debit: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    children: Mapping[str, "TreeNode"] = field(default_factory=lambda: _EMPTY)

    def child(self, word: str) -> "TreeNode | None":
        return self.children.get(word.upper())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: str = "") -> "TreeNode":
        """Build a node and its subtree from nested JSON data.

        Args:
            data: Node as found in the JSON file
            path: Words leading to this node, for log messages

        Returns:
            TreeNode
        """
        defaults = {}
        children = {}
        credit = _read_metadata(data.get(CREDIT_KEY) or {}, f"{path}/{CREDIT_KEY}")
        debit = _read_metadata(data.get(DEBIT_KEY) or {}, f"{path}/{DEBIT_KEY}")

        for key, value in data.items():
            if key in (CREDIT_KEY, DEBIT_KEY):
                continue
            if key in METADATA_KEYS:
                defaults[METADATA_KEYS[key]] = value
            elif key.startswith("_"):
                logger.warning(f"Ignoring unknown classification key {key!r} at {path or '/'}")
            elif isinstance(value, Mapping):
                word = key.upper()
                if word in children:
                    logger.warning(f"Duplicate classification word {word!r} at {path or '/'}, keeping {key!r}")
                children[word] = cls.from_dict(value, f"{path}/{word}")
            else:
                logger.warning(f"Ignoring non-node value for {key!r} at {path or '/'}")

        return cls(
            defaults=MappingProxyType(defaults),
            credit=credit,
            debit=debit,
            children=MappingProxyType(children),
        )


def _read_metadata(data: Mapping[str, Any], path: str) -> Mapping[str, Any]:
    metadata = {}
    for key, value in data.items():
        if key in METADATA_KEYS:
            metadata[METADATA_KEYS[key]] = value
        else:
            logger.warning(f"Ignoring unknown metadata key {key!r} at {path}")
    return MappingProxyType(metadata)


class ClassificationTree:
    """Root of the classification rules, keyed by the first word of a label."""

    def __init__(self, roots: Mapping[str, TreeNode] | None = None):
        self._roots = MappingProxyType(dict(roots or {}))

    def __len__(self) -> int:
        return len(self._roots)

    def __contains__(self, word: str) -> bool:
        return word.upper() in self._roots

    def root(self, word: str) -> TreeNode | None:
        return self._roots.get(word.upper())

    @property
    def words(self) -> list[str]:
        return sorted(self._roots)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClassificationTree":
        """Build a tree from the decoded JSON rules."""
        roots = {}
        for key, value in data.items():
            if not isinstance(value, Mapping):
                logger.warning(f"Ignoring non-node root entry {key!r}")
                continue
            word = key.upper()
            if word in roots:
                logger.warning(f"Duplicate classification root {word!r}, keeping {key!r}")
            roots[word] = TreeNode.from_dict(value, f"/{word}")
        return cls(roots)

    @classmethod
    def load(cls, path: Path | str) -> "ClassificationTree":
        """Load the rules from a JSON file.

        A missing file gives an empty tree, so every label stays unclassified.

        Args:
            path: Path to the classification JSON file

        Returns:
            ClassificationTree

        Raises:
            json.JSONDecodeError: If the file is not valid JSON
        """
        path = Path(path)

        if not path.exists():
            logger.warning(f"Classification file not found: {path}")
            return cls()

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        tree = cls.from_dict(data)
        logger.info(f"Loaded {len(tree)} classification roots from {path.name}")
        return tree

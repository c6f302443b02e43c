"""
Pytest configuration and fixtures for Fortuneo connector tests.
"""

import json
import sys
from pathlib import Path

import pytest
import yaml

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

sys.path.insert(0, str(PROJECT_ROOT / "python"))

from classification import ClassificationEngine, ClassificationTree


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def config_dir() -> Path:
    """Return the config directory path."""
    return PROJECT_ROOT / "config"


@pytest.fixture
def connector_config(config_dir: Path) -> dict:
    """Load the connector settings file."""
    with open(config_dir / "connector.yaml") as f:
        return yaml.safe_load(f)


@pytest.fixture
def classification_rules(config_dir: Path) -> dict:
    """Load the classification rules shipped with the connector."""
    with open(config_dir / "classification.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def sample_rules() -> dict:
    """Return a small classification tree for testing."""
    return {
        "VIR": {
            "_id": "5",
            "_credit": {"_proba": 90},
            "SEPA": {
                "_type": "transfer",
                "LOYER": {"_id": "401100", "_proba": 100},
            },
        },
        "CARTE": {
            "_id": "400100",
            "_proba": 10,
            "RESTAURANT": {"_id": "400160", "_proba": 80, "_type": "restaurant"},
        },
        "PRLV": {
            "_debit": {"_id": "400100", "_type": "expense"},
        },
    }


@pytest.fixture
def sample_engine(sample_rules: dict) -> ClassificationEngine:
    """Return an engine over the sample classification tree."""
    return ClassificationEngine(ClassificationTree.from_dict(sample_rules))


@pytest.fixture
def sample_operation_rows() -> list[dict]:
    """Return operation rows as scraped from an account history."""
    return [
        {
            "label": "CARTE 12/01 RESTAURANT LE ZINC",
            "amount": "-45,80",
            "date": "12/01/2025",
        },
        {
            "label": "VIR SEPA LOYER JANVIER",
            "amount": "1 250,00",
            "date": "05/01/2025",
        },
        {
            "label": "PRLV SEPA ASSURANCE",
            "amount": "-32,10",
            "date": "03/01/2025",
        },
        {
            "label": "RETRAIT DAB",
            "amount": "-60,00",
            "date": "32/01/2025",
        },
    ]

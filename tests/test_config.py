"""
Tests for EvaluatorConfig.
"""
import pytest
from pente.ai.config import EvaluatorConfig


def test_evaluator_config_defaults():
    """Test the default scoring weights."""
    config = EvaluatorConfig()

    assert config.win_weight == 10000
    assert config.capture_weight == 2000
    assert config.build_weight == 5


def test_evaluator_config_round_trip():
    """Test conversion to and from a dictionary."""
    config = EvaluatorConfig(win_weight=50000, capture_weight=3000, build_weight=7)

    config_dict = config.to_dict()
    assert config_dict == {'win_weight': 50000, 'capture_weight': 3000, 'build_weight': 7}

    restored = EvaluatorConfig.from_dict(config_dict)
    assert restored.to_dict() == config_dict


def test_evaluator_config_partial_dict():
    """Test that missing keys fall back to defaults."""
    config = EvaluatorConfig.from_dict({'build_weight': 1})

    assert config.build_weight == 1
    assert config.win_weight == 10000


def test_evaluator_config_unknown_key():
    """Test that unknown keys are rejected."""
    with pytest.raises(ValueError):
        EvaluatorConfig.from_dict({'learning_rate': 0.001})


@pytest.mark.parametrize("weights", [
    {'win_weight': 2000},                       # Win no better than capture
    {'capture_weight': 5},                      # Capture no better than build
    {'build_weight': 0},                        # Building worth nothing
    {'win_weight': 100, 'capture_weight': 1000},
])
def test_evaluator_config_invalid_ordering(weights):
    """Test that weights must be strictly ordered and positive."""
    with pytest.raises(ValueError):
        EvaluatorConfig(**weights)

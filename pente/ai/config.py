"""
Configuration for the computer opponent's move evaluation.
"""
from typing import Dict


class EvaluatorConfig:
    """Weights used when scoring a candidate move."""

    def __init__(self,
                 # Completing five in a row
                 win_weight: int = 10000,
                 # Each pair captured, and each pair exposed to capture
                 capture_weight: int = 2000,
                 # Building blocks of 2-4 stones, scaled by length squared
                 build_weight: int = 5):

        if not win_weight > capture_weight > build_weight > 0:
            raise ValueError(
                "Weights must satisfy win_weight > capture_weight > build_weight > 0, "
                f"got {win_weight}, {capture_weight}, {build_weight}"
            )

        self.win_weight = win_weight
        self.capture_weight = capture_weight
        self.build_weight = build_weight

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {k: v for k, v in self.__dict__.items()}

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'EvaluatorConfig':
        """Create config from dictionary."""
        unknown = set(config_dict) - {'win_weight', 'capture_weight', 'build_weight'}
        if unknown:
            raise ValueError(f"Unknown evaluator config keys: {sorted(unknown)}")
        return cls(**config_dict)

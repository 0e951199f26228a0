"""Sprint effort validation: decide whether a sprint shows genuine effort.

Modules:
- config: Thresholds, weights and sprint scheduling constants
- models: Sprint data, validation results, athlete profiles, live recorder
- metrics: Heart-rate, cadence and HR-derivative sub-scores
- validation: SprintValidator and batch validation
- io: Loading sprint submissions from JSON/CSV
- storage: Result export helpers
- aggregation: Per-athlete pass-rate summaries
- cli: Command line interface
"""

from .config import DEFAULT_CONFIG, SprintConfig
from .models.types import SprintData, ValidationResult
from .validation.validator import SprintValidator, validate_sprint

__all__ = [
    "DEFAULT_CONFIG",
    "SprintConfig",
    "SprintData",
    "ValidationResult",
    "SprintValidator",
    "validate_sprint",
]

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..io.submission_loader import SprintSubmission
from ..models.types import ValidationResult
from .validator import SprintValidator

logger = logging.getLogger(__name__)


def validate_many(
    submissions: Iterable[SprintSubmission],
    validator: Optional[SprintValidator] = None,
) -> List[ValidationResult]:
    """Validate independent submissions, preserving input order."""
    validator = validator if validator is not None else SprintValidator()
    results: List[ValidationResult] = []
    for sub in submissions:
        results.append(validator.validate(sub.data, sub.max_hr, sprint_id=sub.sprint_id))
    passed = sum(1 for r in results if r.is_valid)
    logger.info(f"Validated {len(results)} sprints ({passed} valid)")
    return results

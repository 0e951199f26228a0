from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from ..config import DEFAULT_MAX_HR

logger = logging.getLogger(__name__)


def estimate_max_hr(age: float, method: str = "fox") -> int:
    """Estimate maximum heart rate from age.

    Methods:
    - fox: 220 - age
    - tanaka: 208 - 0.7 * age
    """
    if age is None or age <= 0:
        raise ValueError(f"age must be positive, got {age}")
    if method == "fox":
        return int(220 - age)
    if method == "tanaka":
        return int(208.0 - 0.7 * float(age))
    raise ValueError(f"Unknown max HR method: {method}")


@dataclass
class AthleteProfile:
    name: str
    age: Optional[int] = None
    max_hr_bpm: Optional[int] = None
    resting_hr_bpm: Optional[int] = None
    notes: Optional[str] = None

    def effective_max_hr(self) -> int:
        if self.max_hr_bpm:
            return int(self.max_hr_bpm)
        if self.age:
            return estimate_max_hr(self.age)
        return DEFAULT_MAX_HR


def load_athlete_profile(athlete_dir: Path, write_defaults: bool = True) -> AthleteProfile:
    """Load athlete profile from profile.json in their directory.

    A missing or corrupted file yields a default profile, which is written back
    only when ``write_defaults`` is set. Batch lookups pass False to stay read-only.
    """
    profile_path = athlete_dir / "profile.json"

    if not profile_path.exists():
        default_profile = AthleteProfile(
            name=athlete_dir.name,
            notes="Default profile - please update with age or max HR",
        )
        if write_defaults:
            save_athlete_profile(athlete_dir, default_profile)
        return default_profile

    try:
        with open(profile_path, "r") as f:
            data = json.load(f)
        return AthleteProfile(**data)
    except (OSError, ValueError, TypeError) as e:
        logger.warning(f"Corrupted profile {profile_path}, using default: {e}")
        default_profile = AthleteProfile(
            name=athlete_dir.name,
            notes=f"Restored default profile due to error: {e}",
        )
        if write_defaults:
            save_athlete_profile(athlete_dir, default_profile)
        return default_profile


def save_athlete_profile(athlete_dir: Path, profile: AthleteProfile) -> None:
    """Save athlete profile to profile.json in their directory."""
    profile_path = athlete_dir / "profile.json"
    athlete_dir.mkdir(parents=True, exist_ok=True)

    with open(profile_path, "w") as f:
        json.dump(asdict(profile), f, indent=2)

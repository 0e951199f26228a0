from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .config import DEFAULT_MAX_HR
from .io.submission_loader import SUPPORTED_SUFFIXES, SprintSubmission, load_submissions
from .models.athlete_profile import load_athlete_profile
from .storage.export import export_results_csv, results_to_rows
from .aggregation.trends import summarize_results
from .validation.batch import validate_many
from .validation.validator import SprintValidator


def _iter_submission_files(inputs: List[str]) -> List[str]:
    files: List[str] = []
    for inp in inputs:
        p = Path(inp)
        if p.is_file():
            files.append(str(p))
        elif p.is_dir():
            files.extend(
                [str(fp) for fp in p.rglob("*") if fp.is_file() and not fp.name.startswith(".") and fp.suffix.lower() in SUPPORTED_SUFFIXES]
            )
    return sorted(list(dict.fromkeys(files)))


def _profile_max_hr_lookup(athletes_root: Optional[str]) -> Optional[Callable[[str], int]]:
    if not athletes_root:
        return None
    cache: Dict[str, int] = {}

    def lookup(athlete: str) -> int:
        if athlete not in cache:
            cache[athlete] = load_athlete_profile(Path(athletes_root) / athlete, write_defaults=False).effective_max_hr()
        return cache[athlete]

    return lookup


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sprint validation CLI: score sprint submissions and summarize pass rates")
    parser.add_argument("--input", nargs="+", required=True, help="One or more submission files (.json, .jsonl, .csv) or directories")
    parser.add_argument("--output", required=True, help="Output directory for exports")
    parser.add_argument("--max-hr", type=int, default=DEFAULT_MAX_HR, help=f"Fallback max HR when a submission has no max_hr/age (default: {DEFAULT_MAX_HR})")
    parser.add_argument("--athletes-root", help="Folder with <athlete>/profile.json used to resolve max HR per athlete")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    files = _iter_submission_files(args.input)
    if not files:
        print("No submission files found.")
        return 1

    os.makedirs(args.output, exist_ok=True)
    lookup = _profile_max_hr_lookup(args.athletes_root)
    validator = SprintValidator()

    submissions: List[SprintSubmission] = []
    for file_path in files:
        try:
            loaded = load_submissions(file_path, default_max_hr=args.max_hr, max_hr_for_athlete=lookup)
        except (OSError, ValueError) as e:
            print(f"Warning: could not read {file_path} ({e})")
            continue
        submissions.extend(loaded)
        print(f"Loaded {Path(file_path).name}: {len(loaded)} sprints")

    if not submissions:
        print("No sprint submissions found to validate.")
        return 1

    results = validate_many(submissions, validator)
    athletes = [s.athlete for s in submissions]

    results_path = os.path.join(args.output, "sprint_results.csv")
    export_results_csv(results, results_path, athletes=athletes)
    print(f"Wrote sprint results CSV: {results_path} ({len(results)} rows)")

    summary = summarize_results(results_to_rows(results, athletes))
    summary_path = os.path.join(args.output, "sprint_summary.csv")
    summary.to_csv(summary_path, index=False)
    print(f"Wrote sprint summary CSV: {summary_path}")

    valid = sum(1 for r in results if r.is_valid)
    print(f"Validated {len(results)} sprints: {valid} valid, {len(results) - valid} rejected")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

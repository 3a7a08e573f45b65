"""Per-run tally of SEDOL validation outcomes, broken down by error kind."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from . import config
from .errors import SedolError
from .models import ErrorKind

logger = logging.getLogger(__name__)

_KIND_LABELS = {
    ErrorKind.LENGTH: "Wrong length",
    ErrorKind.INVALID_CHARACTER: "Invalid character",
    ErrorKind.OLD_FORMAT: "Mixed old format",
    ErrorKind.CHECKSUM: "Check digit mismatch",
}


@dataclass
class ValidationMetrics:
    """Counts validated SEDOLs and the reasons rejected ones failed.

    One instance is owned by whoever drives a run (the CLI, a caller of
    normalize_sedol); the validation functions never create or share one.
    """

    valid: int = 0
    failures: Counter = field(default_factory=Counter)

    # First few rejected values per ErrorKind, for the report
    samples: dict[ErrorKind, list[str]] = field(default_factory=dict)

    @property
    def invalid(self) -> int:
        return sum(self.failures.values())

    @property
    def total(self) -> int:
        return self.valid + self.invalid

    def record(self, value: str, error: Optional[SedolError] = None) -> None:
        """Record one SEDOL: valid when error is None, otherwise rejected for error.kind."""
        if error is None:
            self.valid += 1
            return

        self.failures[error.kind] += 1
        kind_samples = self.samples.setdefault(error.kind, [])
        if len(kind_samples) < config.MAX_METRIC_SAMPLES:
            kind_samples.append(value)

    def report(self) -> dict:
        return {
            "total": self.total,
            "valid": self.valid,
            "invalid": self.invalid,
            "by_kind": {kind.value: self.failures[kind] for kind in ErrorKind if self.failures[kind]},
            "validation_rate": (f"{self.valid / self.total * 100:.1f}%" if self.total > 0 else "N/A"),
        }

    def print_report(self) -> None:
        """Log the tally, one line per rejection reason."""
        logger.info("=" * 60)
        logger.info("SEDOL Validation Metrics")
        logger.info("=" * 60)
        logger.info(f"  Total processed: {self.total:,}")
        if self.total == 0:
            return

        logger.info(f"  Valid: {self.valid:,} ({self.valid / self.total * 100:.1f}%)")
        for kind in ErrorKind:
            count = self.failures[kind]
            if not count:
                continue
            logger.info(f"  {_KIND_LABELS[kind]}: {count:,} ({count / self.total * 100:.1f}%)")
            logger.info(f"    Samples: {', '.join(self.samples[kind])}")

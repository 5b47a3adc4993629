"""Assertion helpers for ad-hoc script testing.

:class:`AssertionTally` records pass/fail outcomes without raising, so a
script can run every check and report at the end. :func:`assert_equal`
is the one-shot variant that raises on mismatch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


class AssertionMismatch(AssertionError):
    """Raised by :func:`assert_equal` when values differ."""

    def __init__(self, actual: Any, expected: Any, label: str = "") -> None:
        self.actual = actual
        self.expected = expected
        self.label = label
        prefix = f"{label}: " if label else ""
        super().__init__(f"{prefix}expected {expected!r}, got {actual!r}")


def assert_equal(actual: Any, expected: Any, label: str = "") -> None:
    """Raise :class:`AssertionMismatch` unless ``actual == expected``."""
    if actual != expected:
        raise AssertionMismatch(actual, expected, label)


@dataclass
class CheckOutcome:
    label: str
    passed: bool
    detail: str = ""


@dataclass
class AssertionTally:
    """Running record of ad-hoc checks."""

    outcomes: list[CheckOutcome] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.passed)

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def _record(self, label: str, passed: bool, detail: str = "") -> bool:
        self.outcomes.append(CheckOutcome(label=label, passed=passed, detail=detail))
        if passed:
            logger.debug("check passed: %s", label)
        else:
            logger.warning("check failed: %s %s", label, detail)
        return passed

    def equal(self, actual: Any, expected: Any, label: str = "equal") -> bool:
        detail = "" if actual == expected else f"expected {expected!r}, got {actual!r}"
        return self._record(label, actual == expected, detail)

    def true(self, condition: Any, label: str = "true") -> bool:
        return self._record(label, bool(condition), "" if condition else "condition is falsy")

    def false(self, condition: Any, label: str = "false") -> bool:
        return self._record(label, not condition, "condition is truthy" if condition else "")

    def contains(self, container: Any, item: Any, label: str = "contains") -> bool:
        found = item in container
        return self._record(label, found, "" if found else f"{item!r} not in {container!r}")

    def summary(self) -> dict[str, Any]:
        """Counts plus the labels and details of failed checks."""
        return {
            "total": len(self.outcomes),
            "passed": self.passed,
            "failed": self.failed,
            "failures": [
                {"label": o.label, "detail": o.detail} for o in self.outcomes if not o.passed
            ],
        }

"""Loader for the table-driven JSON cases under testdata/."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

# Root directory for test data
TESTDATA_DIR = Path(__file__).parent.parent.parent / "testdata"


class SharedTestDataLoader:
    """Loads one suite of test cases from ``testdata/<category>/<suite>.json``.

    Each file holds a version, a description and a list of cases with an
    ``id``, an ``input`` and one of ``expected``, ``expected_min`` or
    ``expected_max``.

    Example:
        loader = SharedTestDataLoader("matching", "matches")
        for case in loader.test_cases:
            assert matches(**case["input"]) == case["expected"]
    """

    def __init__(self, category: str, test_suite: str) -> None:
        self.category = category
        self.test_suite = test_suite
        self._data: dict[str, Any] | None = None

    @property
    def path(self) -> Path:
        return TESTDATA_DIR / self.category / f"{self.test_suite}.json"

    @property
    def data(self) -> dict[str, Any]:
        """Load and return the test data."""
        if self._data is None:
            if not self.path.exists():
                raise FileNotFoundError(f"Test data file not found: {self.path}")
            with open(self.path, encoding="utf-8") as f:
                self._data = json.load(f)
        return self._data

    @property
    def description(self) -> str:
        return self.data["description"]

    @property
    def test_cases(self) -> list[dict[str, Any]]:
        return self.data["test_cases"]

    def get_test_case(self, test_id: str) -> dict[str, Any] | None:
        for case in self.test_cases:
            if case["id"] == test_id:
                return case
        return None

    def get_pytest_params(self) -> list[tuple[str, dict[str, Any]]]:
        """Get test cases formatted for pytest.mark.parametrize."""
        return [(c["id"], c) for c in self.test_cases]


@lru_cache(maxsize=32)
def load_test_data(category: str, test_suite: str) -> SharedTestDataLoader:
    return SharedTestDataLoader(category, test_suite)


def pytest_generate_tests_from_data(
    category: str,
    test_suite: str,
) -> list[tuple[str, dict[str, Any]]]:
    """Generate pytest parameters from a test data file.

    Example:
        @pytest.mark.parametrize(
            "test_id, test_case",
            pytest_generate_tests_from_data("similarity", "distance"),
        )
        def test_distance(test_id, test_case):
            assert distance(**test_case["input"]) == test_case["expected"]
    """
    return load_test_data(category, test_suite).get_pytest_params()


def check_expectation(test_id: str, test_case: dict[str, Any], result: Any) -> None:
    """Assert a result against whichever expectation the case declares."""
    if "expected" in test_case:
        assert result == test_case["expected"], (
            f"Test {test_id}: expected {test_case['expected']}, got {result}"
        )
    if "expected_min" in test_case:
        assert result >= test_case["expected_min"], (
            f"Test {test_id}: expected >= {test_case['expected_min']}, got {result}"
        )
    if "expected_max" in test_case:
        assert result <= test_case["expected_max"], (
            f"Test {test_id}: expected <= {test_case['expected_max']}, got {result}"
        )

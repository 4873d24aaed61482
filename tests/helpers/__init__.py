"""Test helpers for loading shared test data."""

from .test_data_loader import SharedTestDataLoader, check_expectation, load_test_data

__all__ = ["SharedTestDataLoader", "check_expectation", "load_test_data"]

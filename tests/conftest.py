"""Pytest configuration for the valuegraph test suite.

Hypothesis profiles:
- dev: 200 examples, random seeds (default)
- ci: 50 examples, derandomized so failures reproduce across runs

Select one with HYPOTHESIS_PROFILE=<name>; CI=true implies "ci".

Tests marked ``fuzz`` render large generated value graphs and are skipped
unless selected with ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import HealthCheck, settings

# Value graph strategies build nested containers, which Hypothesis may
# report as slow to generate.
settings.register_profile(
    "dev",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile(
    "ci",
    max_examples=50,
    derandomize=True,
    print_blob=True,
    suppress_health_check=[HealthCheck.too_slow],
)


def _profile_name() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_profile_name())


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker."""
    config.addinivalue_line("markers", "fuzz: large generated value graphs (opt-in)")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless ``-m fuzz`` selects them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="large graph test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)

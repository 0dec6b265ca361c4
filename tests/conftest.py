"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def fresh_config():
    """Clear the cached engine config before and after a test."""
    from dynarith import get_config

    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def sample_int_texts():
    """Provide a set of interesting integer literals."""
    return [
        "0",
        "1",
        "-1",
        "9999",
        "10000",
        "-10000",
        "123456789012345678901234567890",
        "-123456789012345678901234567890",
        "9223372036854775807",
        "-9223372036854775808",
        "18446744073709551616",
    ]


@pytest.fixture
def all_type_samples():
    """Provide one variable of every type tag."""
    from dynarith import (
        make_function,
        make_int,
        make_invalid,
        make_num,
        make_object,
        make_string,
    )

    return [
        make_int(7),
        make_num(2.5),
        make_string("x"),
        make_function(lambda: None),
        make_object(object()),
        make_invalid(),
    ]

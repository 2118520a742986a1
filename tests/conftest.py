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
def engine():
    """Provide a fresh CalculatorEngine instance."""
    from ios_calculator import CalculatorEngine

    return CalculatorEngine()


@pytest.fixture
def keypad():
    """Provide a fresh Keypad instance."""
    from ios_calculator import Keypad

    return Keypad()


@pytest.fixture
def press():
    """Press a button sequence on a new keypad and return the display."""
    from ios_calculator import Keypad

    def _press(*buttons: str) -> str:
        keypad = Keypad()
        keypad.press_all(*buttons)
        return keypad.output

    return _press

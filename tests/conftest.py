import pytest

from bus_reservation.catalog import TripCatalog
from bus_reservation.config import DEFAULT_TRIPS


@pytest.fixture
def empty_catalog():
    return TripCatalog()


@pytest.fixture
def boston_catalog():
    catalog = TripCatalog()
    catalog.add("123A", "New York", "Boston", 50, 30.0)
    return catalog


@pytest.fixture
def default_catalog():
    return TripCatalog.from_seeds(DEFAULT_TRIPS)


@pytest.fixture
def scripted_input():
    """Build a prompt callable that replays the given answers, then raises EOFError."""

    def factory(*answers):
        remaining = list(answers)
        prompts = []

        def prompt(message):
            prompts.append(message)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        prompt.prompts = prompts
        return prompt

    return factory

"""
Pytest markers and collection rules for the puppy care test suite.

Markers are registered here so ``--strict-markers`` accepts them, and the
location-based ones are added automatically during collection.
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "domain: mark test as domain model test")
    config.addinivalue_line("markers", "services: mark test as service layer test")
    config.addinivalue_line("markers", "repositories: mark test as repository test")
    config.addinivalue_line("markers", "database: mark test as database-related")
    config.addinivalue_line("markers", "api: mark test as API endpoint test")
    config.addinivalue_line("markers", "puppy: mark test as puppy-related")
    config.addinivalue_line("markers", "calendar: mark test as calendar-related")
    config.addinivalue_line("markers", "user: mark test as user-related")
    config.addinivalue_line("markers", "config: mark test as configuration-related")


def pytest_collection_modifyitems(config, items):
    """Modify test items during collection."""
    for item in items:
        path = str(item.fspath)

        # Add markers based on test file location
        if "unit" in path:
            item.add_marker(pytest.mark.unit)

        if "integration" in path:
            item.add_marker(pytest.mark.integration)

        if "repo" in path:
            item.add_marker(pytest.mark.repositories)

        if "api" in path:
            item.add_marker(pytest.mark.api)

"""
Pytest configuration for the alert helpers.
"""
import os


def pytest_configure(config):
    """
    Hook called early in pytest startup to configure Django settings.
    This runs before pytest-django sets up Django.
    """
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'alertsite.settings')

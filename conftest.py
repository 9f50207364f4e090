"""Configures the Django environment for pytest."""
import os

import django


def pytest_configure(config):
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'TimezoneChoices.settings')
    django.setup()

"""This package defines the timezone choices app’s settings."""
import logging as _logging

APP_NAME = 'TzChoices'
# Region used for identifiers that have no path segment, e.g. 'UTC'
OTHER_REGION = 'Other'
# Joins the second and third segments of an identifier in its label
LABEL_SEPARATOR = ' - '
# Usable before init() is called, messages are then only handled at WARNING level and above
LOGGER = _logging.Logger(APP_NAME, level=_logging.WARNING)


def init(debug: bool):
    """Initialize the settings.

    :param debug: Whether the website is in debug mode or not.
    """
    LOGGER.setLevel(_logging.DEBUG if debug else _logging.INFO)
    if not LOGGER.handlers:
        sh = _logging.StreamHandler()
        sh.setFormatter(_logging.Formatter('%(name)s:%(levelname)s:%(message)s'))
        LOGGER.addHandler(sh)

from django.apps import AppConfig
from django.conf import settings as _dj_settings


class TzChoicesConfig(AppConfig):
    name = 'tzchoices'

    def ready(self):
        from . import settings
        settings.init(_dj_settings.DEBUG)

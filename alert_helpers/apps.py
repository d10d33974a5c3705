from django.apps import AppConfig


class AlertHelpersConfig(AppConfig):
    name = 'alert_helpers'
    verbose_name = 'Alert helpers'

    def ready(self):
        """Fail at startup rather than on first render when ALERT_HELPERS is wrong"""
        from alert_helpers.conf import get_overrides
        get_overrides()

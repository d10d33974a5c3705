"""
Settings for the alert helpers.

Projects override the defaults with an ``ALERT_HELPERS`` dict in their
Django settings:

    ALERT_HELPERS = {
        'BASE_CLASS': 'alert-box',
        'CLOSE_GLYPH': '×',
        'ESCAPE_TEXT': True,
    }
"""
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULTS = {
    'BASE_CLASS': 'alert-box',
    'CLOSE_GLYPH': '×',
    'ESCAPE_TEXT': True,
}


def get_overrides():
    """Return the project's ALERT_HELPERS dict, validated against DEFAULTS."""
    overrides = getattr(settings, 'ALERT_HELPERS', None) or {}
    if not isinstance(overrides, dict):
        raise ImproperlyConfigured("ALERT_HELPERS must be a dict")

    unknown = sorted(set(overrides) - set(DEFAULTS))
    if unknown:
        raise ImproperlyConfigured(
            f"Unknown ALERT_HELPERS keys: {', '.join(unknown)}"
        )
    return overrides


def get_setting(name):
    """
    Look up a single alert setting.

    Read on every call so override_settings() in tests takes effect.
    """
    if name not in DEFAULTS:
        raise ImproperlyConfigured(f"Unknown alert setting: {name}")
    return get_overrides().get(name, DEFAULTS[name])

"""
Alert box rendering.

Turns an AlertConfig (message text, style, close button toggle and extra
attributes) into a Foundation-style alert box fragment:

    <div class="alert-box success" data-id="1">Saved<a class="close" href="">×</a></div>

Usage:
    from alert_helpers.alerts import AlertBuilder, AlertConfig, AlertStyle, render_alert

    render_alert(AlertConfig("Saved", style=AlertStyle.SUCCESS))
    render_alert("Saved", style="success", hide_close_button=True)
    AlertBuilder("Saved").success().attr("data-id", "1").render()

Message text is escaped with conditional_escape(): plain strings are
escaped, strings already marked safe are inserted as-is.
"""
import dataclasses
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from django.db import models
from django.utils.html import conditional_escape, format_html
from django.utils.safestring import mark_safe

from alert_helpers.conf import get_setting

logger = logging.getLogger(__name__)

# Whitespace, quotes, tag/attribute delimiters and control characters
_INVALID_ATTRIBUTE_NAME = re.compile(r'[\s"\'<>/=\x00-\x1f\x7f]')


class InvalidConfiguration(ValueError):
    """Raised when an alert is configured with values it cannot render."""


class AlertStyle(models.TextChoices):
    DEFAULT = 'default', 'Default'
    SUCCESS = 'success', 'Success'
    WARNING = 'warning', 'Warning'
    INFO = 'info', 'Info'

    @classmethod
    def coerce(cls, value):
        """
        Resolve a member from a member, its name or its value.

        Matching is case-insensitive. None and '' mean DEFAULT; anything
        else that does not match raises InvalidConfiguration.
        """
        if isinstance(value, cls):
            return value
        if value is None or value == '':
            return cls.DEFAULT
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member

        allowed = ', '.join(member.label for member in cls)
        logger.warning("Rejected unknown alert style %r", value)
        raise InvalidConfiguration(
            f"Unknown alert style {value!r}; expected one of: {allowed}"
        )

    @property
    def css_class(self):
        """Class token for the wrapper, empty for the default style."""
        if self is AlertStyle.DEFAULT:
            return ''
        return self.value


def attributes_from_kwargs(kwargs):
    """
    Convert Python keyword arguments into markup attribute names.

    Underscores become hyphens (data_id -> data-id) and css_class maps
    onto class, since neither hyphens nor 'class' work as keywords.
    """
    attributes = {}
    for key, value in kwargs.items():
        name = 'class' if key == 'css_class' else key.replace('_', '-')
        attributes[name] = value
    return attributes


def _validate_attributes(extra_attributes):
    if extra_attributes is None:
        return {}
    if not isinstance(extra_attributes, Mapping):
        logger.warning(
            "Rejected alert attributes of type %s", type(extra_attributes).__name__
        )
        raise InvalidConfiguration(
            "extra_attributes must be a mapping of attribute names to values"
        )

    attributes = {}
    for name, value in extra_attributes.items():
        if not isinstance(name, str) or not name or _INVALID_ATTRIBUTE_NAME.search(name):
            logger.warning("Rejected invalid alert attribute name %r", name)
            raise InvalidConfiguration(f"Invalid attribute name {name!r}")

        # Markup attribute names are case-insensitive
        folded = {existing.lower() for existing in attributes}
        if name.lower() in folded:
            logger.warning("Rejected duplicate alert attribute name %r", name)
            raise InvalidConfiguration(f"Duplicate attribute name {name!r}")
        if name.lower() == 'class':
            name = 'class'
        attributes[name] = value
    return attributes


@dataclass(frozen=True)
class AlertConfig:
    """
    Everything needed to render one alert box.

    Values are normalised on construction: None text becomes '', style is
    coerced through AlertStyle.coerce() and extra_attributes is copied into
    a read-only mapping that keeps insertion order.
    """

    text: str
    style: AlertStyle = AlertStyle.DEFAULT
    hide_close_button: bool = False
    extra_attributes: Mapping = field(default_factory=dict)

    def __post_init__(self):
        text = '' if self.text is None else self.text
        if not isinstance(text, str):
            if hasattr(text, '__html__'):
                text = mark_safe(text.__html__())
            else:
                text = str(text)

        if isinstance(self.hide_close_button, str):
            logger.warning("Rejected string hide_close_button %r", self.hide_close_button)
            raise InvalidConfiguration(
                f"hide_close_button must be True or False, not {self.hide_close_button!r}"
            )

        object.__setattr__(self, 'text', text)
        object.__setattr__(self, 'style', AlertStyle.coerce(self.style))
        object.__setattr__(self, 'hide_close_button', bool(self.hide_close_button))
        object.__setattr__(
            self,
            'extra_attributes',
            MappingProxyType(_validate_attributes(self.extra_attributes)),
        )

    @property
    def css_classes(self):
        """Class tokens for the wrapper: base, style, then caller additions."""
        tokens = []
        caller_classes = self.extra_attributes.get('class') or ''
        if not isinstance(caller_classes, str):
            caller_classes = str(caller_classes)

        candidates = [get_setting('BASE_CLASS'), self.style.css_class]
        candidates.extend(caller_classes.split())
        for token in candidates:
            if token and token not in tokens:
                tokens.append(token)
        return tokens


def _render_attributes(config):
    """Render the wrapper's attributes, class first, the rest in insertion order."""
    parts = []
    classes = config.css_classes
    if classes:
        parts.append(format_html(' class="{}"', ' '.join(classes)))

    for name, value in config.extra_attributes.items():
        if name == 'class' or value is None or value is False:
            continue
        if value is True:
            parts.append(format_html(' {}', name))
        else:
            parts.append(format_html(' {}="{}"', name, value))
    return mark_safe(''.join(parts))


def render_alert(config, **overrides):
    """
    Render an alert box and return it as a SafeString.

    ``config`` is an AlertConfig or the message text. Keyword arguments
    (style, hide_close_button, extra_attributes) fill in the remaining
    fields, or replace them when an AlertConfig is passed.
    """
    if isinstance(config, AlertConfig):
        if overrides:
            config = dataclasses.replace(config, **overrides)
    else:
        config = AlertConfig(config, **overrides)

    if get_setting('ESCAPE_TEXT'):
        text = conditional_escape(config.text)
    else:
        text = mark_safe(config.text)

    close_button = ''
    if not config.hide_close_button:
        close_button = format_html(
            '<a class="close" href="">{}</a>', get_setting('CLOSE_GLYPH')
        )

    logger.debug(
        "Rendering %s alert (%d chars, close button: %s)",
        config.style.value, len(config.text), not config.hide_close_button,
    )
    return format_html(
        '<div{}>{}{}</div>', _render_attributes(config), text, close_button
    )


def write_alert(writer, config, **overrides):
    """Render an alert and write it to anything with a write(str) method."""
    writer.write(render_alert(config, **overrides))


class AlertBuilder:
    """
    Fluent alternative to building an AlertConfig by hand.

        AlertBuilder("Saved").success().attrs(data_id="1").render()

    Every setter returns the builder. Calling a setter twice keeps the
    last value. build() can be called repeatedly; each call returns a new
    AlertConfig that shares nothing mutable with the builder.
    """

    def __init__(self, text=''):
        self._text = text
        self._style = AlertStyle.DEFAULT
        self._hide_close_button = False
        self._attributes = {}

    def text(self, text):
        self._text = text
        return self

    def style(self, style):
        self._style = AlertStyle.coerce(style)
        return self

    def default(self):
        return self.style(AlertStyle.DEFAULT)

    def success(self):
        return self.style(AlertStyle.SUCCESS)

    def warning(self):
        return self.style(AlertStyle.WARNING)

    def info(self):
        return self.style(AlertStyle.INFO)

    def hide_close_button(self, hide=True):
        self._hide_close_button = bool(hide)
        return self

    def show_close_button(self):
        return self.hide_close_button(False)

    def attr(self, name, value):
        if name.lower() == 'class':
            name = 'class'
        self._attributes[name] = value
        return self

    def attrs(self, mapping=None, **kwargs):
        """Set several attributes; keyword names go through attributes_from_kwargs()."""
        for name, value in (mapping or {}).items():
            self.attr(name, value)
        for name, value in attributes_from_kwargs(kwargs).items():
            self.attr(name, value)
        return self

    def add_class(self, *tokens):
        existing = self._attributes.get('class') or ''
        self._attributes['class'] = ' '.join(filter(None, [existing, *tokens]))
        return self

    def build(self):
        return AlertConfig(
            text=self._text,
            style=self._style,
            hide_close_button=self._hide_close_button,
            extra_attributes=dict(self._attributes),
        )

    def render(self):
        return render_alert(self.build())

    def __html__(self):
        return self.render()

    def __str__(self):
        return self.render()

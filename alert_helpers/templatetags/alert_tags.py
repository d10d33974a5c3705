"""
Template tags for rendering alert boxes.

Usage:
    {% load alert_tags %}

    {% alert "Profile saved" style="success" %}
    {% alert message style="info" hide_close_button=True data_id=item.pk %}
    {% alert "Careful" style="warning" css_class="radius" as warning_box %}

    {{ form_error|alert:"warning" }}

    {% alert_messages messages %}

Keyword arguments other than style and hide_close_button become attributes
on the wrapper: underscores turn into hyphens (data_id -> data-id) and
css_class adds classes after the alert-box/style classes.
hide_close_button takes the literals True or False; a quoted string such
as "false" is rejected with a TemplateSyntaxError.
"""
import logging

from django import template
from django.utils.safestring import mark_safe

from alert_helpers.alerts import (
    AlertConfig,
    AlertStyle,
    InvalidConfiguration,
    attributes_from_kwargs,
    render_alert,
)

logger = logging.getLogger(__name__)

register = template.Library()

# django.contrib.messages level tags -> alert styles
MESSAGE_LEVEL_STYLES = {
    'success': AlertStyle.SUCCESS,
    'warning': AlertStyle.WARNING,
    'error': AlertStyle.WARNING,
    'info': AlertStyle.INFO,
}


def _render(text, style, hide_close_button, attributes):
    try:
        return render_alert(
            text,
            style=style,
            hide_close_button=hide_close_button,
            extra_attributes=attributes,
        )
    except InvalidConfiguration as exc:
        raise template.TemplateSyntaxError(str(exc)) from exc


@register.simple_tag
def alert(text, style=None, hide_close_button=False, **attributes):
    """
    Render an alert box.

    Usage in template:
        {% alert "Saved" style="success" data_id="1" %}

    Renders:
        <div class="alert-box success" data-id="1">Saved<a class="close" href="">×</a></div>
    """
    return _render(text, style, hide_close_button, attributes_from_kwargs(attributes))


@register.filter(name='alert', is_safe=True)
def alert_filter(value, style=None):
    """Render the value as an alert box: {{ message|alert:"info" }}"""
    return _render(value, style, False, None)


@register.simple_tag
def alert_messages(messages):
    """
    Render django.contrib.messages as alert boxes.

    Usage in template:
        {% alert_messages messages %}

    success/warning/info keep their style, error is shown as a warning
    and debug (or any custom level) uses the default style. Extra tags on
    a message are added as classes.
    """
    if not messages:
        return ''

    rendered = []
    for message in messages:
        style = MESSAGE_LEVEL_STYLES.get(message.level_tag, AlertStyle.DEFAULT)
        attributes = {}
        if message.extra_tags:
            attributes['class'] = message.extra_tags
        rendered.append(render_alert(AlertConfig(
            message.message,
            style=style,
            extra_attributes=attributes,
        )))

    logger.debug("Rendered %d message alerts", len(rendered))
    return mark_safe(''.join(rendered))

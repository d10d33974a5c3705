"""
Alert Template Tag Tests

Tests the alert_tags library:
- {% alert %} simple tag with styles and attributes
- |alert filter
- {% alert_messages %} for django.contrib.messages
"""
from django.contrib.messages import constants
from django.contrib.messages.storage.base import Message
from django.template import Context, Template, TemplateSyntaxError
from django.test import SimpleTestCase

CLOSE = '<a class="close" href="">×</a>'


class AlertTagTests(SimpleTestCase):
    """Test the {% alert %} tag."""

    def render(self, source, **context):
        return Template('{% load alert_tags %}' + source).render(Context(context))

    def test_default_alert(self):
        rendered = self.render('{% alert "message" %}')
        self.assertEqual(rendered, f'<div class="alert-box">message{CLOSE}</div>')

    def test_style_and_hidden_close_button(self):
        rendered = self.render('{% alert "message" style="warning" hide_close_button=True %}')
        self.assertEqual(rendered, '<div class="alert-box warning">message</div>')

    def test_keyword_attributes(self):
        rendered = self.render('{% alert "message" style="info" data_id="1" %}')
        self.assertEqual(
            rendered, f'<div class="alert-box info" data-id="1">message{CLOSE}</div>'
        )

    def test_css_class_is_merged(self):
        rendered = self.render(
            '{% alert "message" style="success" css_class="radius" hide_close_button=True %}'
        )
        self.assertEqual(rendered, '<div class="alert-box success radius">message</div>')

    def test_context_variables(self):
        rendered = self.render(
            '{% alert text style=level data_id=pk %}', text="Saved", level="Success", pk=5
        )
        self.assertEqual(
            rendered, f'<div class="alert-box success" data-id="5">Saved{CLOSE}</div>'
        )

    def test_context_text_is_escaped(self):
        rendered = self.render(
            '{% alert text hide_close_button=True %}', text='<script>alert(1)</script>'
        )
        self.assertEqual(
            rendered,
            '<div class="alert-box">&lt;script&gt;alert(1)&lt;/script&gt;</div>',
        )

    def test_as_variable(self):
        rendered = self.render(
            '{% alert "message" style="info" as box %}<section>{{ box }}</section>'
        )
        self.assertEqual(
            rendered, f'<section><div class="alert-box info">message{CLOSE}</div></section>'
        )

    def test_quoted_false_hide_close_button_raises_template_error(self):
        with self.assertRaises(TemplateSyntaxError):
            self.render('{% alert "message" hide_close_button="false" %}')

    def test_false_literal_keeps_close_button(self):
        rendered = self.render('{% alert "message" hide_close_button=False %}')
        self.assertEqual(rendered, f'<div class="alert-box">message{CLOSE}</div>')

    def test_unknown_style_raises_template_error(self):
        with self.assertRaises(TemplateSyntaxError):
            self.render('{% alert "message" style="danger" %}')


class AlertFilterTests(SimpleTestCase):
    """Test the |alert filter."""

    def test_filter_without_style(self):
        rendered = Template('{% load alert_tags %}{{ text|alert }}').render(
            Context({'text': 'message'})
        )
        self.assertEqual(rendered, f'<div class="alert-box">message{CLOSE}</div>')

    def test_filter_with_style_escapes_text(self):
        rendered = Template('{% load alert_tags %}{{ text|alert:"warning" }}').render(
            Context({'text': '<i>careful</i>'})
        )
        self.assertEqual(
            rendered,
            f'<div class="alert-box warning">&lt;i&gt;careful&lt;/i&gt;{CLOSE}</div>',
        )

    def test_filter_unknown_style(self):
        with self.assertRaises(TemplateSyntaxError):
            Template('{% load alert_tags %}{{ "m"|alert:"loud" }}').render(Context())


class AlertMessagesTagTests(SimpleTestCase):
    """Test {% alert_messages %} with django.contrib.messages."""

    def render(self, messages):
        template = Template('{% load alert_tags %}{% alert_messages messages %}')
        return template.render(Context({'messages': messages}))

    def test_levels_map_to_styles(self):
        messages = [
            Message(constants.SUCCESS, 'Saved'),
            Message(constants.ERROR, 'Failed', extra_tags='radius'),
            Message(constants.INFO, 'Note'),
            Message(constants.DEBUG, 'Debug'),
        ]
        self.assertEqual(
            self.render(messages),
            f'<div class="alert-box success">Saved{CLOSE}</div>'
            f'<div class="alert-box warning radius">Failed{CLOSE}</div>'
            f'<div class="alert-box info">Note{CLOSE}</div>'
            f'<div class="alert-box">Debug{CLOSE}</div>',
        )

    def test_warning_level(self):
        self.assertEqual(
            self.render([Message(constants.WARNING, 'Check your email')]),
            f'<div class="alert-box warning">Check your email{CLOSE}</div>',
        )

    def test_no_messages(self):
        self.assertEqual(self.render([]), '')
        self.assertEqual(self.render(None), '')

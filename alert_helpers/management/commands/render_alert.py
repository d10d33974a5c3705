"""
Print the markup for an alert box.

Handy for checking what a template will emit, or for pasting alert
markup into static pages and emails.

Usage:
    python manage.py render_alert "Saved"
    python manage.py render_alert "Careful" --style warning --hide-close-button
    python manage.py render_alert "New" --style info --attr data-id=1 --attr class=radius
"""
from django.core.management.base import BaseCommand, CommandError

from alert_helpers.alerts import AlertConfig, AlertStyle, InvalidConfiguration, write_alert


class Command(BaseCommand):
    help = "Render an alert box and print its markup"

    def add_arguments(self, parser):
        parser.add_argument("text", help="Message shown inside the alert")
        parser.add_argument(
            "--style",
            default=AlertStyle.DEFAULT.value,
            help=f"Alert style ({', '.join(AlertStyle.values)})",
        )
        parser.add_argument(
            "--hide-close-button",
            action="store_true",
            help="Leave out the close (×) link",
        )
        parser.add_argument(
            "--attr",
            action="append",
            default=[],
            metavar="NAME=VALUE",
            help="Extra attribute for the wrapper, may be repeated",
        )

    def handle(self, *args, **options):
        attributes = {}
        for item in options["attr"]:
            name, sep, value = item.partition("=")
            if not sep:
                raise CommandError(f"Attributes must look like NAME=VALUE, got {item!r}")
            attributes[name.strip()] = value

        try:
            config = AlertConfig(
                options["text"],
                style=options["style"],
                hide_close_button=options["hide_close_button"],
                extra_attributes=attributes,
            )
        except InvalidConfiguration as exc:
            raise CommandError(str(exc)) from exc

        write_alert(self.stdout, config)

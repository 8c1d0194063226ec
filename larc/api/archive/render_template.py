"""Thin wrapper around Jinja2 for rendering generated files."""

from typing import Any

from jinja2 import BaseLoader, Environment, StrictUndefined

_ENV = Environment(loader=BaseLoader(), trim_blocks=True, lstrip_blocks=True, undefined=StrictUndefined, autoescape=True)


def render_template(template: str, context: dict[str, Any]) -> str:
    tmpl = _ENV.from_string(template)
    return tmpl.render(**context)

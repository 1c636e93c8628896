# company_site/composition/renderer.py
from __future__ import annotations

from typing import Any, Mapping, Protocol

from flask import current_app, render_template
from jinja2 import TemplateError, TemplateNotFound

from company_site.domain.exceptions import RenderFailure


class ViewRenderer(Protocol):
    def render(self, template_path: str, context: Mapping[str, Any]) -> str:
        ...

    def has_template(self, template_path: str) -> bool:
        ...


class JinjaViewRenderer:
    """
    Renders through the Flask app's Jinja environment.

    Needs an application context. Any template error (missing layout,
    syntax error in a partial, undefined access in strict mode) becomes a
    RenderFailure.
    """

    def render(self, template_path: str, context: Mapping[str, Any]) -> str:
        try:
            return render_template(template_path, **context)
        except TemplateError as exc:
            raise RenderFailure(template_path) from exc

    def has_template(self, template_path: str) -> bool:
        env = current_app.jinja_env
        try:
            env.loader.get_source(env, template_path)
        except TemplateNotFound:
            return False
        return True

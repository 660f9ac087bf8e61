"""Renderers for classified chat segments."""

from chatparts.renderers.html import HtmlRenderer

__all__ = ["HtmlRenderer"]

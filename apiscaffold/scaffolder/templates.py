"""Jinja2 placeholder rendering for catalog templates.

Catalog templates are plain text with ``{{ name }}`` style expressions.  The
renderer is configured with ``StrictUndefined`` and checks every referenced
variable against the context up front, so a template can never ship a
literal placeholder or an empty substitution into a generated file.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError, UndefinedError, meta

from .context import VariableContext
from .errors import InvalidTemplate, UnboundVariable


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders catalog content templates against a ``VariableContext``.

    Substituted values are inserted verbatim: autoescaping is off because the
    output is JavaScript, JSON, Markdown and dotenv text, not HTML.
    Rendered content is trimmed of surrounding whitespace.
    """

    def __init__(self) -> None:
        self.env = Environment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )

    def variables(self, template: str) -> set[str]:
        """Return the names of every variable *template* references."""
        return set(meta.find_undeclared_variables(self.env.parse(template)))

    def check(
        self,
        template: str,
        known: Iterable[str],
        template_name: str | None = None,
    ) -> None:
        """Raise ``UnboundVariable`` if *template* uses a name outside *known*.

        A template Jinja2 cannot parse raises ``InvalidTemplate`` instead.
        """
        try:
            unknown = self.variables(template) - set(known)
        except TemplateSyntaxError as exc:
            raise InvalidTemplate(exc.message or str(exc), template_name, exc.lineno) from exc
        if unknown:
            raise UnboundVariable(sorted(unknown)[0], template_name)

    def render(
        self,
        template: str,
        context: VariableContext | Mapping[str, Any],
        template_name: str | None = None,
    ) -> str:
        """Render *template* with every placeholder substituted.

        Args:
            template: Template source text.
            context: A ``VariableContext`` or a plain mapping of variables.
            template_name: Optional label (usually the target relative path)
                used in error messages.

        Returns:
            The rendered content, stripped of leading/trailing whitespace.

        Raises:
            UnboundVariable: If the template references a variable that the
                context does not define.
        """
        values = context.as_dict() if isinstance(context, VariableContext) else dict(context)
        self.check(template, values.keys(), template_name)
        try:
            rendered = self.env.from_string(template).render(**values)
        except UndefinedError as exc:
            raise UnboundVariable(str(exc), template_name) from exc
        return rendered.strip()


_default_renderer = TemplateRenderer()


def render(template: str, context: VariableContext | Mapping[str, Any]) -> str:
    """Render *template* with the module-level renderer."""
    return _default_renderer.render(template, context)

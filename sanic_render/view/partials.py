"""
Partial Expander
Static <%- partial('view') %> includes

Rather than compiling partials at render time, the referenced view files
are inlined into the template source before it is compiled. Expansion runs
once per compile, so with caching on the expanded text is cached together
with the compiled template.
"""
from typing import Any, Callable, Dict, Optional, Tuple
from jinja2 import TemplateSyntaxError
from jinja2.sandbox import SandboxedEnvironment
from sanic_render.exceptions import CompileError, PartialReadError
from sanic_render.logging import getLogger
from sanic_render.support import ViewConfig


class PartialExpander:
    """
    Inline partial views into template source

    The partial name is an expression evaluated against the render locals
    by a sandboxed Jinja2 evaluator, so both partial('header.html') and
    partial(header_view) work, but arbitrary Python does not.

    A partial already being expanded further up the include chain
    resolves to an empty string, which covers self-inclusion (A -> A) and
    mutual inclusion (A -> B -> A).
    """

    def __init__(self, config: ViewConfig):
        self.config = config
        self.evaluator = SandboxedEnvironment()
        self.logger = getLogger(__name__)
        self._expressions: Dict[str, Callable] = {}

    def expand(
        self,
        source: str,
        excluded: Optional[str] = None,
        locals: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Replace every partial directive in source with the expanded partial

        Args:
            source: Raw template text
            excluded: View name that must not be included (current view)
            locals: Render locals used to evaluate partial names

        Returns:
            Template text with all reachable partials inlined
        """
        chain = (self.config.normalize_view_name(excluded),) if excluded else ()
        return self._expand(source, chain, locals or {})

    def _expand(self, source: str, chain: Tuple[str, ...], locals: Dict[str, Any]) -> str:
        def replace(match) -> str:
            name = self.resolve_name(match.group(1), locals)
            if not name:
                self.logger.warning(
                    "Partial expression %r did not resolve to a view name",
                    match.group(1),
                    extra={'expression': match.group(1)}
                )
                return ''

            name = self.config.normalize_view_name(name)
            if name in chain:
                return ''

            path = self.config.view_path(name)
            try:
                text = path.read_text(encoding='utf-8')
            except (OSError, UnicodeDecodeError) as e:
                error = PartialReadError(f"Cannot load view partial {path}", view=name, original=e)
                self.logger.warning(
                    "Cannot load view partial %s: %s",
                    path, e,
                    exc_info=error,
                    extra={'view': name}
                )
                return ''

            return self._expand(text, chain + (name,), locals)

        return self.config.partial_pattern.sub(replace, source)

    def resolve_name(self, expression: str, locals: Dict[str, Any]) -> Optional[str]:
        """
        Evaluate a partial() argument to a view name

        Undefined variables evaluate to None. A malformed expression is a
        template defect and raises CompileError.
        """
        evaluate = self._expressions.get(expression)
        if evaluate is None:
            try:
                evaluate = self.evaluator.compile_expression(expression, undefined_to_none=True)
            except TemplateSyntaxError as e:
                raise CompileError(
                    f"Invalid partial expression {expression!r}: {e}",
                    original=e
                ) from e
            self._expressions[expression] = evaluate

        try:
            value = evaluate(locals)
        except Exception as e:
            raise CompileError(
                f"Cannot evaluate partial expression {expression!r}: {e}",
                original=e
            ) from e
        if value is None:
            return None
        return str(value)

"""
Template Compiler
Turns view files into reusable compiled templates (Jinja2 backed)
"""
import asyncio
import re
from pathlib import Path
from typing import Any, Dict, Optional
from jinja2 import Environment, StrictUndefined, Template, TemplateSyntaxError
from sanic_render.exceptions import CompileError, ViewReadError
from sanic_render.logging import getLogger
from sanic_render.support import ViewConfig
from sanic_render.view.partials import PartialExpander


class CompiledTemplate:
    """Executable form of one view, reusable across renders"""

    def __init__(self, name: str, template: Template):
        self.name = name
        self.template = template

    def __call__(self, locals: Dict[str, Any]) -> str:
        return self.template.render(locals)

    def __repr__(self) -> str:
        return f"CompiledTemplate({self.name!r})"


class TemplateCache:
    """
    Compiled templates keyed by normalized view name

    Entries are never evicted or invalidated on their own: caching is only
    correct while view files do not change for the life of the process.
    Concurrent first renders of one view may both compile; the last write
    wins, which is harmless since the results are interchangeable.
    """

    def __init__(self):
        self._templates: Dict[str, CompiledTemplate] = {}

    def get(self, name: str) -> Optional[CompiledTemplate]:
        return self._templates.get(name)

    def set(self, name: str, template: CompiledTemplate):
        self._templates[name] = template

    def clear(self):
        """Drop every compiled template (development reload)"""
        self._templates.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)


class TemplateCompiler:
    """
    Resolve view names to compiled templates

    Template syntax, with the configured delimiters (default <% %>):
        <%= expr %>    escaped output
        <%- expr %>    raw output
        <% stmt %>     statements (for, if, set, ...)
        <%# text %>    comment
    """

    def __init__(self, config: ViewConfig, cache: Optional[TemplateCache] = None):
        self.config = config
        self.cache = cache if cache is not None else TemplateCache()
        self.expander = PartialExpander(config)
        self.environment = self._build_environment()
        self.logger = getLogger(__name__)

        # <%- expr %> is rewritten to an escaped-output tag marked safe
        self._raw_output_re = re.compile(
            re.escape(config.open) + r'-(.*?)' + re.escape(config.close),
            re.DOTALL
        )

    def _build_environment(self) -> Environment:
        open_tag, close_tag = self.config.open, self.config.close
        environment = Environment(
            block_start_string=open_tag,
            block_end_string=close_tag,
            variable_start_string=open_tag + '=',
            variable_end_string=close_tag,
            comment_start_string=open_tag + '#',
            comment_end_string=close_tag,
            autoescape=True,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        environment.filters.update(self.config.filters)
        return environment

    async def resolve(self, view: str, locals: Optional[Dict[str, Any]] = None) -> CompiledTemplate:
        """
        Get the compiled template for a view, compiling it on a cache miss

        Raises:
            ViewReadError: the view file cannot be read
            CompileError: the expanded source is not a valid template
        """
        name = self.config.normalize_view_name(view)

        if self.config.cache:
            compiled = self.cache.get(name)
            if compiled is not None:
                return compiled

        path = self.config.view_path(name)
        try:
            source = await asyncio.to_thread(path.read_text, encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ViewReadError(f"Cannot read view {path}", view=name, original=e) from e

        compiled = await asyncio.to_thread(self.compile, name, source, locals or {}, path)

        if self.config.cache:
            self.cache.set(name, compiled)
        return compiled

    def compile(
        self,
        name: str,
        source: str,
        locals: Optional[Dict[str, Any]] = None,
        path: Optional[Path] = None
    ) -> CompiledTemplate:
        """Expand partials in source and compile the result"""
        self.logger.debug("Compiling view %s", name, extra={'view': name})

        try:
            expanded = self.expander.expand(source, None, locals or {})
        except CompileError as e:
            e.view = e.view or name
            raise
        expanded = self.translate(expanded)

        try:
            code = self.environment.compile(
                expanded,
                name=name,
                filename=str(path) if path else None
            )
        except TemplateSyntaxError as e:
            raise CompileError(f"Cannot compile view {name}: {e}", view=name, original=e) from e

        template = self.environment.template_class.from_code(
            self.environment, code, self.environment.make_globals(None), None
        )
        return CompiledTemplate(name, template)

    def translate(self, source: str) -> str:
        """Rewrite raw output tags into the form Jinja2 understands"""
        open_tag, close_tag = self.config.open, self.config.close

        def replace(match) -> str:
            expression = match.group(1).strip()
            trim = ''
            if expression.endswith('-'):
                expression = expression[:-1].rstrip()
                trim = '-'
            return f"{open_tag}= ({expression})|safe {trim}{close_tag}"

        return self._raw_output_re.sub(replace, source)

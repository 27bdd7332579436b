"""
View Configuration
Settings shared by every render of one ViewEngine
"""

import re
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Pattern, Union


class ViewConfig:
    """
    Configuration for the render pipeline

    Built once at application setup and handed to ViewEngine. The render
    path only reads it; calling configure() after views are cached does not
    invalidate them (use ViewEngine.clear_cache()).

    Usage:
        config = ViewConfig(
            root='templates',
            cache=True,           # must be True in production
            layout='layout.html', # or False for no layout
            helpers={'sitename': 'My Blog'},
        )

        # Same keys as the .env driven setup
        config = ViewConfig.from_env()
    """

    # Alternate spellings accepted by configure()
    ALIASES = {
        'viewExt': 'view_ext',
    }

    KNOWN_KEYS = ('root', 'cache', 'layout', 'view_ext', 'open', 'close', 'filters', 'helpers')

    def __init__(self, **options: Any):
        from sanic_render.defaults import (
            DEFAULT_VIEW_ROOT, DEFAULT_VIEW_CACHE, DEFAULT_VIEW_LAYOUT,
            DEFAULT_VIEW_EXT, DEFAULT_TEMPLATE_OPEN, DEFAULT_TEMPLATE_CLOSE
        )
        self.root: Path = Path(DEFAULT_VIEW_ROOT)
        self.cache: bool = DEFAULT_VIEW_CACHE
        self.layout: Union[str, bool, None] = DEFAULT_VIEW_LAYOUT
        self.view_ext: str = DEFAULT_VIEW_EXT
        self.open: str = DEFAULT_TEMPLATE_OPEN
        self.close: str = DEFAULT_TEMPLATE_CLOSE
        self.filters: Dict[str, Callable] = {}
        self.helpers: Dict[str, Any] = {}

        # Unrecognized keys are kept but never read by the pipeline
        self.extra: Dict[str, Any] = {}

        self.partial_pattern: Pattern = None
        self.configure(options)

    def configure(self, options: Optional[Dict[str, Any]] = None) -> 'ViewConfig':
        """
        Merge options into the configuration, overwriting prior values

        Rebuilds the partial-include matcher from the current delimiters.
        """
        for key, value in (options or {}).items():
            key = self.ALIASES.get(key, key)
            if key not in self.KNOWN_KEYS:
                self.extra[key] = value
                continue
            if key == 'root':
                value = Path(value)
            elif key in ('filters', 'helpers'):
                value = dict(value or {})
            elif key == 'view_ext':
                value = value or ''
            setattr(self, key, value)

        self.partial_pattern = self.build_partial_pattern(self.open, self.close)
        return self

    @staticmethod
    def build_partial_pattern(open_tag: str, close_tag: str) -> Pattern:
        """
        Matcher for <open>- partial(expr) <close> and <open>= partial(expr) <close>

        Group 1 captures the expression between the parentheses.
        """
        return re.compile(
            re.escape(open_tag)
            + r'[-=]\s*partial\((.+?)\)\s*'
            + re.escape(close_tag)
        )

    def normalize_view_name(self, name: str) -> str:
        """Append view_ext unless the name already carries it"""
        if self.view_ext and not name.endswith(self.view_ext):
            return name + self.view_ext
        return name

    def view_path(self, name: str) -> Path:
        """Filesystem path of a (normalized) view name"""
        return self.root / self.normalize_view_name(name)

    @classmethod
    def from_env(cls, env_path=None, **overrides: Any) -> 'ViewConfig':
        """
        Build configuration from environment variables (.env aware)

        Reads VIEW_ROOT, VIEW_CACHE, VIEW_LAYOUT, VIEW_EXT, VIEW_OPEN and
        VIEW_CLOSE. VIEW_LAYOUT=false (or empty) disables the layout.
        Keyword overrides win over the environment.
        """
        from sanic_render.support.env_helper import EnvHelper
        from sanic_render.defaults import (
            DEFAULT_VIEW_ROOT, DEFAULT_VIEW_CACHE, DEFAULT_VIEW_LAYOUT,
            DEFAULT_VIEW_EXT, DEFAULT_TEMPLATE_OPEN, DEFAULT_TEMPLATE_CLOSE
        )
        EnvHelper.load(env_path)

        layout = EnvHelper.get('VIEW_LAYOUT', DEFAULT_VIEW_LAYOUT)
        if layout.strip().lower() in ('', 'false', 'none', 'off'):
            layout = False

        options = {
            'root': EnvHelper.get('VIEW_ROOT', DEFAULT_VIEW_ROOT),
            'cache': EnvHelper.get_bool('VIEW_CACHE', DEFAULT_VIEW_CACHE),
            'layout': layout,
            'view_ext': EnvHelper.get('VIEW_EXT', DEFAULT_VIEW_EXT),
            'open': EnvHelper.get('VIEW_OPEN', DEFAULT_TEMPLATE_OPEN),
            'close': EnvHelper.get('VIEW_CLOSE', DEFAULT_TEMPLATE_CLOSE),
        }
        options.update(overrides)
        return cls(**options)

    def __repr__(self) -> str:
        return (
            f"ViewConfig(root={str(self.root)!r}, cache={self.cache!r}, "
            f"layout={self.layout!r}, view_ext={self.view_ext!r})"
        )

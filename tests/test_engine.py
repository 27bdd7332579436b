"""Tests for view rendering, layouts and caching."""

from types import SimpleNamespace

import pytest
from jinja2 import UndefinedError
from sanic.response import HTTPResponse

from sanic_render import CompileError, ExecutionError, ViewReadError


class TestRender:
    async def test_view_in_layout(self, views, make_engine, request_stub):
        views.write("layout.html", "<%- body %>!")
        views.write("index.html", "Hi <%= name %>")
        engine = make_engine()

        response = await engine.render(request_stub, "index.html", {"name": "Ann"})

        assert response.body == b"Hi Ann!"
        assert response.headers["Content-Type"] == "text/html"
        assert response.headers["Content-Length"] == "7"

    async def test_layout_false_returns_view_verbatim(self, views, make_engine, request_stub):
        views.write("layout.html", "<main><%- body %></main>")
        views.write("index.html", "Hi <%= name %>")
        engine = make_engine()

        response = await engine.render(request_stub, "index.html", {"name": "Ann", "layout": False})

        assert response.body == b"Hi Ann"

    async def test_layout_empty_string_disables_layout(self, views, make_engine):
        views.write("layout.html", "<main><%- body %></main>")
        views.write("index.html", "plain")
        engine = make_engine()

        assert await engine.render_to_string("index.html", {"layout": ""}) == "plain"

    async def test_layout_option_overrides_default(self, views, make_engine):
        views.write("layout.html", "default <%- body %>")
        views.write("admin.html", "admin <%- body %>")
        views.write("index.html", "page")
        engine = make_engine()

        assert await engine.render_to_string("index.html", {"layout": "admin.html"}) == "admin page"

    async def test_configured_layout_disabled(self, views, make_engine):
        views.write("index.html", "page")
        engine = make_engine(layout=False)

        assert await engine.render_to_string("index.html") == "page"

    async def test_escaped_and_raw_output(self, views, make_engine):
        views.write("index.html", "<%= html %>|<%- html %>")
        engine = make_engine(layout=False)

        result = await engine.render_to_string("index.html", {"html": "<b>"})

        assert result == "&lt;b&gt;|<b>"

    async def test_statements_and_comments(self, views, make_engine):
        views.write(
            "list.html",
            "<%# items %><% for item in items %>[<%= item %>]<% endfor %>",
        )
        engine = make_engine(layout=False)

        assert await engine.render_to_string("list.html", {"items": [1, 2]}) == "[1][2]"

    async def test_request_is_exposed(self, views, make_engine, request_stub):
        views.write("index.html", "<%= request.path %>")
        engine = make_engine(layout=False)

        response = await engine.render(request_stub, "index.html")

        assert response.body == b"/articles"

    async def test_scope_is_bound_as_this(self, views, make_engine):
        views.write("index.html", "<%= this.name %>")
        engine = make_engine(layout=False)

        result = await engine.render_to_string("index.html", {"scope": SimpleNamespace(name="scoped")})

        assert result == "scoped"

    async def test_custom_delimiters(self, views, make_engine):
        views.write("part.html", "[?= greeting ?]")
        views.write("index.html", "[?- partial('part.html') ?], [?= name ?]")
        engine = make_engine(layout=False, open="[?", close="?]")

        result = await engine.render_to_string("index.html", {"greeting": "Hello", "name": "Ann"})

        assert result == "Hello, Ann"

    async def test_view_ext(self, views, make_engine):
        views.write("layout.html", "<%- body %>.")
        views.write("index.html", "ext")
        engine = make_engine(view_ext=".html", layout="layout")

        assert await engine.render_to_string("index") == "ext."


class TestLocals:
    async def test_caller_option_beats_helper(self, views, make_engine):
        views.write("index.html", "<%= title %>")
        engine = make_engine(layout=False, helpers={"title": "from helper"})

        assert await engine.render_to_string("index.html", {"title": "from caller"}) == "from caller"
        assert await engine.render_to_string("index.html") == "from helper"

    async def test_filter_beats_caller_option(self, views, make_engine):
        views.write("index.html", "<%= shout('hey') %>")
        engine = make_engine(layout=False, filters={"shout": str.upper})

        assert await engine.render_to_string("index.html", {"shout": "caller"}) == "HEY"

    async def test_filters_are_template_filters_too(self, views, make_engine):
        views.write("index.html", "<%= name|shout %>")
        engine = make_engine(layout=False, filters={"shout": str.upper})

        assert await engine.render_to_string("index.html", {"name": "ann"}) == "ANN"

    async def test_helper_factories_get_request_and_response(self, views, make_engine, request_stub):
        views.write("index.html", "<%= current_path %>")
        seen = {}

        def current_path(request, response):
            seen["response"] = response
            return request.path

        engine = make_engine(layout=False, helpers={"current_path": current_path})
        response = await engine.render(request_stub, "index.html")

        assert response.body == b"/articles"
        assert seen["response"] is response


class TestPartialsInViews:
    async def test_missing_partial_renders_empty(self, views, make_engine):
        views.write("index.html", "<%- partial('header.html') %>content")
        engine = make_engine(layout=False)

        assert await engine.render_to_string("index.html") == "content"

    async def test_view_including_itself(self, views, make_engine):
        views.write("index.html", "A<%- partial('index.html') %>")
        engine = make_engine(layout=False)

        # The first include is inlined, the nested self-reference is empty
        assert await engine.render_to_string("index.html") == "AA"

    async def test_mutual_inclusion(self, views, make_engine):
        views.write("a.html", "a<%- partial('b.html') %>")
        views.write("b.html", "b<%- partial('a.html') %>")
        engine = make_engine(layout=False)

        assert await engine.render_to_string("a.html") == "aba"

    async def test_partial_sees_render_locals(self, views, make_engine):
        views.write("user.html", "<%= user %>")
        views.write("index.html", "<%- partial('user.html') %>")
        engine = make_engine(layout=False, cache=False)

        assert await engine.render_to_string("index.html", {"user": "ann"}) == "ann"
        assert await engine.render_to_string("index.html", {"user": "bob"}) == "bob"


class TestCache:
    async def test_cached_view_is_not_read_again(self, views, make_engine):
        views.write("index.html", "first")
        engine = make_engine(layout=False, cache=True)

        assert await engine.render_to_string("index.html") == "first"
        views.remove("index.html")
        assert await engine.render_to_string("index.html") == "first"
        assert "index.html" in engine.cache

    async def test_uncached_view_is_read_every_time(self, views, make_engine):
        views.write("index.html", "first")
        engine = make_engine(layout=False, cache=False)

        assert await engine.render_to_string("index.html") == "first"
        views.write("index.html", "second")
        assert await engine.render_to_string("index.html") == "second"
        assert len(engine.cache) == 0

    async def test_partials_are_cached_with_the_view(self, views, make_engine):
        views.write("index.html", "<%- partial('part.html') %>")
        views.write("part.html", "old")
        engine = make_engine(layout=False, cache=True)

        assert await engine.render_to_string("index.html") == "old"
        views.write("part.html", "new")
        assert await engine.render_to_string("index.html") == "old"

    async def test_clear_cache_reloads(self, views, make_engine):
        views.write("index.html", "first")
        engine = make_engine(layout=False, cache=True)

        await engine.render_to_string("index.html")
        views.write("index.html", "second")
        engine.clear_cache()

        assert await engine.render_to_string("index.html") == "second"


class TestFailures:
    async def test_missing_view(self, make_engine, request_stub):
        engine = make_engine()
        response = HTTPResponse()

        with pytest.raises(ViewReadError) as exc_info:
            await engine.render(request_stub, "missing.html", {}, response=response)

        assert exc_info.value.view == "missing.html"
        assert isinstance(exc_info.value.original, FileNotFoundError)
        assert not response.body
        assert "Content-Length" not in response.headers

    async def test_missing_layout(self, views, make_engine):
        views.write("index.html", "page")
        engine = make_engine(layout="nope.html")

        with pytest.raises(ViewReadError) as exc_info:
            await engine.render_to_string("index.html")

        assert exc_info.value.view == "nope.html"

    async def test_compile_error(self, views, make_engine):
        views.write("index.html", "<% if %>")
        engine = make_engine(layout=False)

        with pytest.raises(CompileError):
            await engine.render_to_string("index.html")

    async def test_execution_error_keeps_original(self, views, make_engine):
        views.write("index.html", "<%= missing %>")
        engine = make_engine(layout=False)

        with pytest.raises(ExecutionError) as exc_info:
            await engine.render_to_string("index.html")

        assert isinstance(exc_info.value.original, UndefinedError)
        assert exc_info.value.__cause__ is exc_info.value.original

    async def test_helper_raising_is_execution_error(self, views, make_engine):
        def explode():
            raise ValueError("boom")

        views.write("index.html", "<%= explode() %>")
        engine = make_engine(layout=False)

        with pytest.raises(ExecutionError) as exc_info:
            await engine.render_to_string("index.html", {"explode": explode})

        assert isinstance(exc_info.value.original, ValueError)

    async def test_failing_helper_factory_is_execution_error(self, views, make_engine):
        def current_user(request, response):
            raise ValueError("no session")

        views.write("index.html", "<%= current_user %>")
        engine = make_engine(layout=False, helpers={"current_user": current_user})

        with pytest.raises(ExecutionError) as exc_info:
            await engine.render_to_string("index.html")

        assert exc_info.value.view == "index.html"
        assert isinstance(exc_info.value.original, ValueError)
        assert exc_info.value.__cause__ is exc_info.value.original

    async def test_helper_factory_with_wrong_signature(self, views, make_engine, request_stub):
        views.write("index.html", "<%= path %>")
        engine = make_engine(layout=False, helpers={"path": lambda request: request.path})
        response = HTTPResponse()

        with pytest.raises(ExecutionError) as exc_info:
            await engine.render(request_stub, "index.html", response=response)

        assert isinstance(exc_info.value.original, TypeError)
        assert not response.body

    async def test_layout_failure_after_view_success(self, views, make_engine):
        views.write("layout.html", "<%= undefined_thing %><%- body %>")
        views.write("index.html", "page")
        engine = make_engine()
        response = HTTPResponse()

        with pytest.raises(ExecutionError) as exc_info:
            await engine.render(None, "index.html", response=response)

        assert exc_info.value.view == "layout.html"
        assert not response.body

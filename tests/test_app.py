"""End-to-end tests through a Sanic application."""

from uuid import uuid4

import pytest
from sanic import Sanic

from sanic_render import RenderServiceProvider, ViewEngine, render


def make_app(views, debug=False, **options):
    app = Sanic(f"render_{uuid4().hex[:12]}")
    options.setdefault("root", str(views.root))
    RenderServiceProvider.install(app, options, debug=debug)

    @app.get("/")
    async def index(request):
        return await render(request, "index.html", {"name": "Ann"})

    @app.get("/missing")
    async def missing(request):
        return await render(request, "missing.html", {})

    @app.get("/bare")
    async def bare(request):
        return await render(request, "index.html", {"name": "Bob", "layout": False})

    return app


@pytest.fixture
def site(views):
    views.write("layout.html", "<%- body %>!")
    views.write("index.html", "Hi <%= name %>")
    return views


class TestApplication:
    def test_install_registers_engine(self, site):
        app = make_app(site)
        assert isinstance(app.ctx.view_engine, ViewEngine)

    def test_renders_view_in_layout(self, site):
        app = make_app(site)
        _, response = app.test_client.get("/")

        assert response.status == 200
        assert response.text == "Hi Ann!"
        assert response.headers["content-type"] == "text/html"
        assert response.headers["content-length"] == "7"

    def test_renders_without_layout(self, site):
        app = make_app(site)
        _, response = app.test_client.get("/bare")

        assert response.text == "Hi Bob"

    def test_missing_view_goes_to_error_handler(self, site):
        app = make_app(site)
        _, response = app.test_client.get("/missing")

        assert response.status == 500
        assert "Hi" not in response.text
        assert response.text == "An error occurred while processing your request"

    def test_debug_errors_name_the_view(self, site):
        app = make_app(site, debug=True)
        _, response = app.test_client.get("/missing")

        assert response.status == 500
        assert "missing.html" in response.text

    def test_helpers_see_the_request(self, site):
        site.write("path.html", "<%= here %>")
        app = make_app(site, layout=False, helpers={"here": lambda request, response: request.path})

        @app.get("/where")
        async def where(request):
            return await render(request, "path.html")

        _, response = app.test_client.get("/where")

        assert response.text == "/where"

"""Unit tests for the session-bound composition helpers."""

from unittest.mock import Mock

import pytest
from markupsafe import Markup

from gofr_view.config import ViewConfig
from gofr_view.exceptions import ModelDecodeError, ViewNotFoundError
from gofr_view.logger import Logger
from gofr_view.models.view import ViewKind, ViewRequest
from gofr_view.rendering import HelperTable, decode_model
from gofr_view.sessions import RenderSession, SessionState


@pytest.fixture
def session() -> RenderSession:
    session = RenderSession(ViewRequest(view="page"), ViewConfig())
    session.state = SessionState.BODY_RENDERING
    return session


@pytest.fixture
def mock_logger():
    return Mock(spec=Logger)


@pytest.fixture
def mock_pipeline():
    return Mock()


@pytest.fixture
def helpers(session, mock_pipeline, mock_logger) -> HelperTable:
    return HelperTable(session, mock_pipeline, mock_logger)


class TestHeadValues:
    def test_title_set_then_get(self, helpers, session):
        assert helpers.title("Hi") == ""
        assert session.head.title == "Hi"
        assert helpers.title() == "Hi"

    def test_title_defaults_to_empty(self, helpers):
        assert helpers.title() == ""

    def test_last_set_wins(self, helpers):
        helpers.title("First")
        helpers.title("Second")

        assert helpers.title() == "Second"

    @pytest.mark.parametrize("field", ["author", "keywords", "description"])
    def test_other_head_fields(self, helpers, session, field):
        getter = getattr(helpers, field)

        getter("value")

        assert getattr(session.head, field) == "value"
        assert getter() == "value"

    def test_getter_returns_markup(self, helpers):
        helpers.title("Tom & Jerry")

        value = helpers.title()

        assert isinstance(value, Markup)
        assert str(value) == "Tom & Jerry"

    def test_non_string_values_are_stored_as_text(self, helpers, session):
        helpers.keywords(42)
        assert session.head.keywords == "42"


class TestHeadElements:
    def test_meta_by_name(self, helpers):
        assert helpers.meta("x", "y") == ""
        assert helpers.metas() == '<meta name="x" content="y" />'

    def test_meta_http_equiv(self, helpers):
        helpers.meta("refresh", "5", True)
        assert helpers.metas() == '<meta http-equiv="refresh" content="5" />'

    def test_metas_joined_with_newlines_in_call_order(self, helpers):
        helpers.meta("a", "1")
        helpers.meta("b", "2")

        assert helpers.metas() == (
            '<meta name="a" content="1" />\n<meta name="b" content="2" />'
        )

    def test_empty_lists_render_nothing(self, helpers):
        assert helpers.metas() == ""
        assert helpers.styles() == ""
        assert helpers.scripts() == ""

    def test_style_without_media(self, helpers):
        helpers.style("/site.css")
        assert helpers.styles() == '<link type="text/css" rel="stylesheet" href="/site.css" />'

    def test_style_with_media(self, helpers):
        helpers.style("/print.css", "print")
        assert helpers.styles() == (
            '<link type="text/css" rel="stylesheet" href="/print.css" media="print" />'
        )

    def test_script_default_type(self, helpers):
        helpers.script("/app.js")
        assert helpers.scripts() == '<script type="text/javascript" src="/app.js"></script>'

    def test_script_custom_type(self, helpers):
        helpers.script("/app.mjs", "module")
        assert helpers.scripts() == '<script type="module" src="/app.mjs"></script>'

    def test_attribute_values_are_escaped(self, helpers):
        helpers.meta('x" onload="evil', "<y>")
        assert helpers.metas() == (
            '<meta name="x&#34; onload=&#34;evil" content="&lt;y&gt;" />'
        )


class TestLayout:
    def test_select_with_mapping_model(self, helpers, session):
        assert helpers.layout("main", {"a": 1}) == ""

        assert session.layout_name == "main"
        assert session.layout_model == {"a": 1}
        assert session.has_layout

    def test_select_without_model(self, helpers, session):
        helpers.layout("main")
        assert session.layout_model == {}

    def test_json_string_model_is_decoded(self, helpers, session):
        helpers.layout("main", '{"section": "users"}')
        assert session.layout_model == {"section": "users"}

    def test_invalid_json_model_is_skipped(self, helpers, session, mock_logger):
        helpers.layout("main", "{not json")

        assert session.layout_name == "main"
        assert session.layout_model == {}
        mock_logger.warning.assert_called_once()

    def test_first_usable_model_is_used(self, helpers, session):
        helpers.layout("main", "[1, 2]", {"b": 2})
        assert session.layout_model == {"b": 2}

    def test_last_call_wins(self, helpers, session):
        helpers.layout("first", {"a": 1})
        helpers.layout("second")

        assert session.layout_name == "second"
        assert session.layout_model == {}


class TestBodyAndRender:
    def test_body_returns_recorded_output_as_markup(self, helpers, session):
        session.body_output = "<p>body</p>"

        value = helpers.body()

        assert isinstance(value, Markup)
        assert value == "<p>body</p>"

    def test_body_is_empty_before_body_completes(self, helpers):
        assert helpers.body() == ""

    def test_render_delegates_to_pipeline(self, helpers, session, mock_pipeline):
        mock_pipeline.render.return_value = "<li>item</li>"

        value = helpers.render("item", {"n": 1})

        assert value == Markup("<li>item</li>")
        mock_pipeline.render.assert_called_once_with(session, "item", {"n": 1})

    def test_render_without_model(self, helpers, session, mock_pipeline):
        mock_pipeline.render.return_value = ""

        helpers.render("item")

        mock_pipeline.render.assert_called_once_with(session, "item", None)

    def test_render_failure_becomes_inline_error_text(self, helpers, mock_pipeline, mock_logger):
        mock_pipeline.render.side_effect = ViewNotFoundError(ViewKind.PARTIAL, "nav")

        value = helpers.render("nav")

        assert value == "render error: partial &#39;nav&#39; not found"
        mock_logger.warning.assert_called_once()

    def test_render_error_text_is_escaped(self, helpers, mock_pipeline):
        mock_pipeline.render.side_effect = ViewNotFoundError(ViewKind.PARTIAL, "<x>")

        value = helpers.render("<x>")

        assert value == "render error: partial &#39;&lt;x&gt;&#39; not found"

    def test_unexpected_errors_propagate(self, helpers, mock_pipeline):
        mock_pipeline.render.side_effect = KeyError("boom")

        with pytest.raises(KeyError):
            helpers.render("nav")


class TestDispatch:
    def test_call_dispatches_by_name(self, helpers, session):
        helpers.call("title", "Dispatched")
        assert session.head.title == "Dispatched"

    def test_globals_cover_every_helper(self, helpers):
        names = set(helpers.as_globals())
        assert {"layout", "title", "body", "render", "meta", "metas", "style", "scripts"} <= names


class TestDecodeModel:
    def test_decodes_object(self):
        assert decode_model('{"a": [1, 2]}') == {"a": [1, 2]}

    def test_rejects_invalid_json(self):
        with pytest.raises(ModelDecodeError):
            decode_model("{")

    def test_rejects_non_object(self):
        with pytest.raises(ModelDecodeError) as exc_info:
            decode_model("[1]")
        assert "list" in exc_info.value.detail

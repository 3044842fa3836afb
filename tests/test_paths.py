"""Path builder and argument validator."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from opsmngr.core.domain.common import EventListOptions, ListOptions, OpsManagerModel
from opsmngr.core.errors import ArgumentError, EncodingError
from opsmngr.core.paths import API_PUBLIC_V1_PATH, build_path, query_params, set_query_params
from opsmngr.core.validation import require_body, require_id

pytestmark = pytest.mark.unit


class TestBuildPath:
    def test_fills_placeholders_in_order(self) -> None:
        path = build_path(API_PUBLIC_V1_PATH + "groups/%s/backupConfigs/%s", "g1", "c1")
        assert path == "api/public/v1.0/groups/g1/backupConfigs/c1"

    def test_encodes_reserved_characters(self) -> None:
        assert build_path("admin/%s", "a/b c") == "admin/a%2Fb%20c"

    def test_dot_segments_are_encoded(self) -> None:
        assert build_path("admin/apiKeys/%s", "..") == "admin/apiKeys/%2E%2E"
        assert build_path("admin/apiKeys/%s", ".") == "admin/apiKeys/%2E"
        assert build_path("admin/apiKeys/%s", "v1.0") == "admin/apiKeys/v1.0"

    def test_appends_suffix(self) -> None:
        assert build_path("groups/%s/agents", "g1", suffix="versions") == "groups/g1/agents/versions"

    def test_placeholder_mismatch_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            build_path("groups/%s/agents/%s", "g1")


class TestQueryParams:
    def test_none_options_leave_path_untouched(self) -> None:
        assert set_query_params("groups/g1/events", None) == "groups/g1/events"

    def test_zero_values_are_omitted(self) -> None:
        options = ListOptions(include_count=False, envelope=False)
        assert set_query_params("groups/g1/events", options) == "groups/g1/events"

    def test_pagination_uses_wire_names(self) -> None:
        options = ListOptions(page_num=2, items_per_page=50, include_count=True)
        assert query_params(options) == [
            ("pageNum", "2"),
            ("itemsPerPage", "50"),
            ("includeCount", "true"),
        ]

    def test_lists_repeat_the_key_and_dates_use_iso_format(self) -> None:
        options = EventListOptions(
            event_type=["ALERT_OPENED", "ALERT_CLOSED"],
            min_date=datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        )
        assert query_params(options) == [
            ("eventType", "ALERT_OPENED"),
            ("eventType", "ALERT_CLOSED"),
            ("minDate", "2020-01-02T03:04:05+00:00"),
        ]

    def test_merges_with_existing_query(self) -> None:
        path = set_query_params("admin/apiKeys?pageNum=1&foo=bar", ListOptions(page_num=3))
        assert path == "admin/apiKeys?foo=bar&pageNum=3"

    def test_mappings_cannot_be_encoded(self) -> None:
        class BadOptions(OpsManagerModel):
            filters: dict[str, str] | None = None

        with pytest.raises(EncodingError):
            query_params(BadOptions(filters={"a": "b"}))


class TestValidation:
    def test_empty_identifier(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            require_id("group_id", "")
        assert exc_info.value.name == "group_id"
        assert exc_info.value.reason == "must be set"
        assert str(exc_info.value) == "group_id is invalid because must be set"

    def test_missing_body(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            require_body("store", None)
        assert exc_info.value.reason == "cannot be None"

    def test_valid_values_pass_through(self) -> None:
        assert require_id("org_id", "o1") == "o1"
        assert require_body("enabled", False) is False

    def test_argument_error_is_a_value_error(self) -> None:
        assert issubclass(ArgumentError, ValueError)

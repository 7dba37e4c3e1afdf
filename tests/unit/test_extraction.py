"""Unit tests for response path extraction."""

import pytest

from metaquery.resolution.extraction import extract


class TestExtract:
    """Test suite for dotted-path extraction."""

    @pytest.mark.parametrize("payload", [None, 5, "text", [1, 2], {"a": 1}])
    def test_dot_returns_payload(self, payload) -> None:
        """Test '.' returns the payload unchanged."""
        assert extract(payload, ".") is payload

    @pytest.mark.parametrize("path", ["", None])
    def test_empty_path_returns_payload(self, path) -> None:
        """Test an empty path returns the payload unchanged."""
        payload = {"a": 1}
        assert extract(payload, path) is payload

    def test_nested_key(self) -> None:
        """Test a nested key is reached."""
        assert extract({"a": {"b": 5}}, "a.b") == 5

    def test_missing_key_is_none(self) -> None:
        """Test a missing key yields None."""
        assert extract({"a": {"b": 5}}, "a.c") is None

    def test_none_payload_short_circuits(self) -> None:
        """Test a None payload yields None without raising."""
        assert extract(None, "a.b") is None

    def test_scalar_in_the_middle_yields_none(self) -> None:
        """Test descending into a scalar yields None."""
        assert extract({"a": 5}, "a.b.c") is None

    def test_text_payload_yields_none(self) -> None:
        """Test a raw-text response has no sub-values."""
        assert extract("<html>Bad Gateway</html>", "data.items") is None

    def test_numeric_segment_indexes_list(self) -> None:
        """Test numeric segments index into lists."""
        assert extract({"items": [{"id": 1}, {"id": 2}]}, "items.1.id") == 2

    def test_numeric_segment_out_of_range(self) -> None:
        """Test out-of-range indexes yield None."""
        assert extract({"items": []}, "items.0") is None

    def test_empty_segment_yields_none(self) -> None:
        """Test a doubled dot does not skip a level."""
        assert extract({"a": {"b": 1}}, "a..b") is None

    def test_trailing_dot_yields_none(self) -> None:
        """Test a trailing dot reads an empty key instead of the value."""
        assert extract({"a": 1}, "a.") is None
        assert extract({"a": [1, 2]}, "a.") is None


class TestArrayMarker:
    """Test suite for the ``[]`` per-element mapping."""

    def test_trailing_marker_returns_list(self) -> None:
        """Test a trailing marker returns the list itself."""
        payload = {"data": {"issues": {"nodes": [{"id": 1}, {"id": 2}]}}}
        assert extract(payload, "data.issues.nodes[]") == [{"id": 1}, {"id": 2}]

    def test_marker_maps_remaining_path(self) -> None:
        """Test the remaining path is applied to each element."""
        payload = {"nodes": [{"issue": {"title": "a"}}, {"issue": {"title": "b"}}]}
        assert extract(payload, "nodes[].issue.title") == ["a", "b"]

    def test_marker_mapping_keeps_misses(self) -> None:
        """Test elements without the path map to None, keeping positions."""
        payload = {"nodes": [{"title": "a"}, {}, None]}
        assert extract(payload, "nodes[].title") == ["a", None, None]

    def test_nested_markers(self) -> None:
        """Test markers compose."""
        payload = {"repos": [{"issues": [{"n": 1}, {"n": 2}]}, {"issues": [{"n": 3}]}]}
        assert extract(payload, "repos[].issues[].n") == [[1, 2], [3]]

    def test_marker_on_non_list_continues_on_value(self) -> None:
        """Test a marker on a mapping value just reads the key."""
        payload = {"node": {"title": "a"}}
        assert extract(payload, "node[].title") == "a"

    def test_marker_on_missing_key(self) -> None:
        """Test a marker on a missing key yields None."""
        assert extract({"data": {}}, "data.nodes[].id") is None

    def test_bare_marker_maps_top_level_list(self) -> None:
        """Test '[]' alone maps over a top-level list."""
        assert extract([{"id": 1}, {"id": 2}], "[].id") == [1, 2]

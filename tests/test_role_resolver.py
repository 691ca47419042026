"""
Unit tests for RoleConflictResolver (WCAG 4.1.2 name, role, value).
"""

import pytest

from widget_accessibility_utility.annotate.role_resolver import RoleConflictResolver


@pytest.fixture
def resolver():
    """RoleConflictResolver with the default slider marker"""
    return RoleConflictResolver()


class TestRoleConflictResolver:
    """Test role removal on slider containers"""

    def test_role_removed_for_swiper_class(self, resolver):
        attributes = {"class": ["loop-item", "swiper-slide"], "role": "list"}
        result = resolver.resolve(attributes)
        assert "role" not in result
        assert result["class"] == ["loop-item", "swiper-slide"]

    def test_input_mapping_is_not_mutated(self, resolver):
        attributes = {"class": ["swiper"], "role": "list"}
        resolver.resolve(attributes)
        assert attributes == {"class": ["swiper"], "role": "list"}

    def test_role_kept_without_swiper_class(self, resolver):
        attributes = {"class": ["loop-item"], "role": "list"}
        assert resolver.resolve(attributes) == attributes

    @pytest.mark.parametrize(
        "attributes",
        [
            {"role": "list"},
            {"class": "swiper-slide", "role": "list"},
            {"class": [], "role": "list"},
            {"class": None, "role": "list"},
        ],
    )
    def test_no_op_on_missing_or_invalid_class(self, resolver, attributes):
        assert resolver.resolve(attributes) == attributes

    def test_match_is_case_sensitive(self, resolver):
        attributes = {"class": ["Swiper-Slide"], "role": "list"}
        assert resolver.resolve(attributes) == attributes

    def test_substring_match(self, resolver):
        result = resolver.resolve({"class": ["elementor-loop-swiper-wrapper"], "role": "list"})
        assert "role" not in result

    def test_no_role_present(self, resolver):
        attributes = {"class": ["swiper-slide"], "data-id": "7"}
        assert resolver.resolve(attributes) == attributes

    def test_other_attributes_pass_through(self, resolver):
        result = resolver.resolve(
            {"class": ["swiper-slide"], "role": "list", "id": "loop", "data-x": "1"}
        )
        assert result == {"class": ["swiper-slide"], "id": "loop", "data-x": "1"}

    def test_before_and_after_snapshots(self, resolver):
        result = resolver.resolve_attributes({"class": ["swiper"], "role": "list"})
        messages = [event.message for event in result.events]
        assert messages[0] == "Loop header attributes before"
        assert messages[-1] == "Loop header attributes after"
        assert result.events[0].fields["attributes"]["role"] == "list"
        assert "role" not in result.events[-1].fields["attributes"]
        assert result.role_removed
        assert result.events[1].fields["wcag_criterion"] == "4.1.2"

    def test_snapshots_emitted_without_change(self, resolver):
        received = []
        resolver.resolve({"class": ["loop-item"], "role": "list"}, sink=received.append)
        assert [event.message for event in received] == [
            "Loop header attributes before",
            "Loop header attributes after",
        ]

    def test_failing_sink_is_swallowed(self, resolver):
        def failing_sink(event):
            raise RuntimeError("sink down")

        result = resolver.resolve({"class": ["swiper"], "role": "list"}, sink=failing_sink)
        assert result == {"class": ["swiper"]}

    def test_invalid_attributes_returned_unchanged(self, resolver):
        assert resolver.resolve(None) is None

    def test_custom_marker(self):
        resolver = RoleConflictResolver(marker="slick")
        assert "role" not in resolver.resolve({"class": ["slick-track"], "role": "list"})
        assert resolver.resolve({"class": ["swiper"], "role": "list"})["role"] == "list"

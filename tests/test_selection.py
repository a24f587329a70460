"""Tests for common/partial tag analysis and multi-image edits."""
import pytest

from errors import ValidationError
from paths import PathTranslator
from selection import add_new_tag, add_tag, analyze_tags, commit_changes, remove_tag, toggle_tag


@pytest.fixture
def selection():
    return {"A": ["x", "y"], "B": ["x"], "C": ["x", "y", "z"]}


def test_analysis_counts_and_classifies(selection):
    analysis = analyze_tags(list(selection.values()))
    assert analysis.total_images == 3
    summary = [(t.tag, t.count, t.is_common) for t in analysis.tags]
    assert summary == [("x", 3, True), ("y", 2, False), ("z", 1, False)]
    assert [t.tag for t in analysis.common] == ["x"]
    assert [t.tag for t in analysis.partial] == ["y", "z"]


def test_analysis_sort_order():
    analysis = analyze_tags([["b", "a", "d", "c"], ["d", "c", "b", "a"], ["c", "d", "e"]])
    assert [t.tag for t in analysis.tags] == ["c", "d", "a", "b", "e"]


def test_analysis_sort_ignores_case():
    analysis = analyze_tags([["Zebra", "apple", "Mango"]])
    assert [t.tag for t in analysis.tags] == ["apple", "Mango", "Zebra"]


def test_analysis_counts_a_duplicate_once_per_image():
    analysis = analyze_tags([["x", "x"], ["y"]])
    x = analysis.get("x")
    assert x.count == 1
    assert not x.is_common


def test_analysis_of_empty_selection():
    analysis = analyze_tags([])
    assert analysis.tags == []
    assert analysis.total_images == 0


def test_single_list_helpers():
    assert remove_tag(["a", "b", "a", "c"], "a") == ["b", "c"]
    assert add_tag(["a"], "b") == ["a", "b"]
    assert add_tag(["a", "b"], "a") == ["a", "b"]


def test_toggle_common_tag_removes_it_everywhere(selection):
    changes = toggle_tag(selection, "x")
    assert changes == {"A": ["y"], "B": [], "C": ["y", "z"]}


def test_toggle_partial_tag_adds_it_where_missing(selection):
    assert toggle_tag(selection, "y") == {"B": ["x", "y"]}
    assert toggle_tag(selection, "z") == {"A": ["x", "y", "z"], "B": ["x", "z"]}


def test_toggle_does_not_mutate_input(selection):
    toggle_tag(selection, "x")
    assert selection["A"] == ["x", "y"]


def test_add_new_tag_appends_where_missing(selection):
    assert add_new_tag(selection, "  outdoor ") == {
        "A": ["x", "y", "outdoor"],
        "B": ["x", "outdoor"],
        "C": ["x", "y", "z", "outdoor"],
    }
    assert add_new_tag(selection, "x") == {}


@pytest.mark.parametrize("tag", [None, "", "   "])
def test_add_new_tag_requires_a_tag(selection, tag):
    with pytest.raises(ValidationError):
        add_new_tag(selection, tag)


def test_commit_changes_reports_failures_per_image(tmp_path):
    ok = tmp_path / "a.txt"
    text_files = {"a": str(ok), "b": str(tmp_path / "missing-dir" / "b.txt"), "c": None}
    changes = {"a": ["cat"], "b": ["cat"], "c": ["cat"]}

    result = commit_changes(changes, text_files, PathTranslator())

    assert not result.success
    assert result.updated == {"a": ["cat"]}
    assert set(result.failed) == {"b", "c"}
    assert ok.read_text(encoding="utf-8") == "cat"


def test_commit_changes_translates_paths(tmp_path):
    translator = PathTranslator(user_root="/Users/me", service_root=str(tmp_path))
    result = commit_changes({"a": ["cat", "grey"]}, {"a": "/Users/me/a.txt"}, translator)
    assert result.success
    assert (tmp_path / "a.txt").read_text(encoding="utf-8") == "cat, grey"

"""
Tests for the demonstration driver, using the student roster.
"""

import logging

import pytest

from bstmap.models import Student
from bstmap.models.exceptions import EmptyResultError, KeyNotFoundError
from demo import ROSTER, build_student_tree, main


class TestStudentTree:
    """Tests for a tree of students keyed by name."""

    def test_ascending_order(self, student_tree, sample_students):
        """Test that students come out sorted by name."""
        assert student_tree.in_order() == sample_students
        assert [s.name for s in student_tree.descending()] == [
            "Eduardo", "Carlos", "Amanda",
        ]

    def test_min_and_predecessor(self, student_tree, sample_students):
        """Test the smallest key and predecessor queries."""
        amanda, carlos, _ = sample_students

        assert student_tree.min() is amanda
        assert student_tree.predecessor("Eduardo") is carlos
        with pytest.raises(KeyNotFoundError):
            student_tree.predecessor("Amanda")

    def test_subset(self, student_tree):
        """Test threshold subsets over names."""
        subset = student_tree.subset_at_least("B")

        assert subset.size() == 2
        assert [s.name for s in subset.in_order()] == ["Carlos", "Eduardo"]
        with pytest.raises(EmptyResultError):
            student_tree.subset_at_least("Z")

    def test_remove_twice(self, student_tree):
        """Test that a second removal of the same key fails."""
        assert student_tree.size() == 3
        student_tree.remove("Amanda")
        assert student_tree.size() == 2

        with pytest.raises(KeyNotFoundError):
            student_tree.remove("Amanda")
        assert student_tree.size() == 2

    def test_folds(self, student_tree):
        """Test grade mean and predicate counts."""
        assert student_tree.aggregate(lambda s: s.grade) == pytest.approx(256.0 / 3)
        assert student_tree.count_matching(lambda s: s.grade > 80.0) == 2


class TestDemo:
    """Tests for the demo driver."""

    def test_build_student_tree(self):
        """Test that the full roster is inserted."""
        tree = build_student_tree()

        assert tree.size() == len(ROSTER)
        assert tree.is_root("Amanda")
        assert tree.search("Maria") == Student(709, "Maria", 95.5)

    def test_default_roster_is_immutable(self):
        """Test that the default roster is a tuple left untouched by building."""
        before = ROSTER
        build_student_tree()

        assert isinstance(ROSTER, tuple)
        assert ROSTER == before
        assert len(ROSTER) == 9

    def test_build_reports_duplicates(self, caplog):
        """Test that a failed insertion is logged instead of raised."""
        roster = [(1, "Ana", 10.0), (2, "Ana", 20.0)]

        with caplog.at_level(logging.ERROR):
            tree = build_student_tree(roster)

        assert tree.size() == 1
        assert tree.search("Ana").registration == 1
        assert "Could not insert student Ana" in caplog.text

    def test_main_output(self, capsys):
        """Test the key lines of the demo report."""
        main()
        out = capsys.readouterr().out

        assert "Tree size: 9" in out
        assert "Original size after removal: 8" in out
        assert "Clone size (unchanged): 9" in out
        assert "Subset size: 4" in out
        assert "Expected error: No entry with key >= 'Z'" in out
        assert "Is 'Amanda' the root: True" in out
        assert "Is 'Pedro' the root: False" in out
        assert "Expected error: Key 'Amanda' has no predecessor" in out
        assert "Class grade mean: 84.94" in out
        assert "Registration mean: 506.6" in out
        assert "Students with grade > 80: 6" in out
        assert "Students whose name starts with 'M': 1" in out

"""Tests for changelog assembly and ordering."""

import pytest

from chronicle.models import (
    UNCLASSIFIED_HEADING,
    UNRELEASED_LABEL,
    CommitType,
    SortOrder,
    UnclassifiedPolicy,
)
from chronicle.processing.assembler import ChangelogAssembler, group_commits, order_versions
from chronicle.processing.classifier import classify
from chronicle.processing.patterns import compile_commit_pattern, compile_version_pattern
from chronicle.processing.segmenter import segment


@pytest.fixture
def history(make_commit):
    """Three releases plus unreleased work, newest first."""
    return [
        make_commit("feat(ui): dark mode", day=9),
        make_commit("wip", day=8),
        make_commit("chore: v0.3.0", tag="v0.3.0", day=7),
        make_commit("fix: crash on start", day=6),
        make_commit("chore: v0.2.0", tag="v0.2.0", day=5),
        make_commit("feat: export", day=4),
        make_commit("doc: readme", day=3),
        make_commit("chore: v0.1.0", tag="v0.1.0", day=2),
        make_commit("initial import", day=1),
    ]


@pytest.fixture
def buckets(history):
    return segment(history, compile_version_pattern())


def labels(items):
    return [item.label for item in items]


class TestGrouping:
    """Test grouping of classified commits."""

    def test_groups_follow_rank_order(self, make_commit):
        pattern = compile_commit_pattern()
        commits = [
            classify(make_commit(message), pattern)
            for message in ["chore: a", "test: b", "feat: c", "fix: d", "ci: e"]
        ]

        groups = group_commits(commits)

        assert [group.commit_type for group in groups] == [
            CommitType.FEATURES,
            CommitType.BUG_FIXES,
            CommitType.TESTING,
            CommitType.CONTINUOUS_INTEGRATION,
            CommitType.CHORE,
        ]

    def test_relative_order_is_kept_within_group(self, make_commit):
        """Interleaved types do not disturb the order inside a group."""
        pattern = compile_commit_pattern()
        messages = ["feat: one", "fix: x", "feat: two", "chore: y", "feat: three"]
        commits = [classify(make_commit(message), pattern) for message in messages]

        groups = group_commits(commits)

        assert [commit.message for commit in groups[0].commits] == ["one", "two", "three"]

    def test_relative_order_ignores_dates(self, make_commit):
        pattern = compile_commit_pattern()
        commits = [
            classify(make_commit("feat: older listed first", day=1), pattern),
            classify(make_commit("feat: newer listed second", day=5), pattern),
            classify(make_commit("feat: same date", day=5), pattern),
        ]

        groups = group_commits(commits)

        assert [commit.message for commit in groups[0].commits] == [
            "older listed first",
            "newer listed second",
            "same date",
        ]

    def test_drop_policy_excludes_unclassified(self, make_commit):
        pattern = compile_commit_pattern()
        commits = [classify(make_commit(m), pattern) for m in ["updated stuff", "feat: a"]]

        groups = group_commits(commits, UnclassifiedPolicy.DROP)

        assert len(groups) == 1
        assert all(commit.is_classified for group in groups for commit in group.commits)

    def test_group_policy_collects_unclassified_last(self, make_commit):
        pattern = compile_commit_pattern()
        commits = [
            classify(make_commit(m), pattern)
            for m in ["updated stuff", "chore: a", "misc tweak", "feat: b"]
        ]

        groups = group_commits(commits, UnclassifiedPolicy.GROUP)

        assert [group.commit_type for group in groups] == [
            CommitType.FEATURES,
            CommitType.CHORE,
            None,
        ]
        assert groups[-1].heading == UNCLASSIFIED_HEADING
        assert [commit.message for commit in groups[-1].commits] == ["updated stuff", "misc tweak"]

    def test_no_empty_groups(self):
        assert group_commits([]) == []


class TestOrdering:
    """Test version ordering."""

    def test_newest_first_keeps_segmenter_order(self, buckets):
        ordered = order_versions(buckets, SortOrder.NEWEST)
        assert labels(ordered) == [UNRELEASED_LABEL, "v0.3.0", "v0.2.0", "v0.1.0"]

    def test_oldest_first_keeps_unreleased_at_newest_end(self, buckets):
        ordered = order_versions(buckets, SortOrder.OLDEST)
        assert labels(ordered) == ["v0.1.0", "v0.2.0", "v0.3.0", UNRELEASED_LABEL]

    @pytest.mark.parametrize("sort_order", list(SortOrder))
    def test_ordering_is_idempotent(self, buckets, sort_order):
        once = order_versions(buckets, sort_order)
        twice = order_versions(once, sort_order)
        assert labels(once) == labels(twice)

    def test_ordering_without_unreleased(self, buckets):
        released = [bucket for bucket in buckets if not bucket.is_unreleased]

        assert labels(order_versions(released, SortOrder.OLDEST)) == ["v0.1.0", "v0.2.0", "v0.3.0"]


class TestAssembler:
    """Test full document assembly."""

    def test_assemble_newest_first(self, buckets):
        document = ChangelogAssembler().assemble("Changelog", buckets, SortOrder.NEWEST)

        assert document.title == "Changelog"
        assert document.sort_order == SortOrder.NEWEST
        assert labels(document.versions) == [UNRELEASED_LABEL, "v0.3.0", "v0.2.0", "v0.1.0"]

        unreleased = document.versions[0]
        assert [group.commit_type for group in unreleased.groups] == [CommitType.FEATURES]
        assert unreleased.groups[0].commits[0].scope == "ui"

    def test_sort_order_only_moves_versions(self, buckets):
        assembler = ChangelogAssembler()
        newest = assembler.assemble("Changelog", buckets, SortOrder.NEWEST)
        oldest = assembler.assemble("Changelog", buckets, SortOrder.OLDEST)

        assert labels(oldest.versions) == ["v0.1.0", "v0.2.0", "v0.3.0", UNRELEASED_LABEL]

        by_label = {version.label: version for version in newest.versions}
        for version in oldest.versions:
            assert version.groups == by_label[version.label].groups

    def test_unclassified_dropped_by_default(self, buckets):
        document = ChangelogAssembler().assemble("Changelog", buckets)

        v010 = document.versions[-1]
        assert v010.label == "v0.1.0"
        assert [group.commit_type for group in v010.groups] == [CommitType.CHORE]
        assert v010.commit_count == 1

        messages = [
            commit.message
            for version in document.versions
            for group in version.groups
            for commit in group.commits
        ]
        assert "wip" not in messages
        assert "initial import" not in messages

    def test_unclassified_grouped(self, buckets):
        assembler = ChangelogAssembler(unclassified=UnclassifiedPolicy.GROUP)
        document = assembler.assemble("Changelog", buckets)

        v010 = document.versions[-1]
        assert [group.heading for group in v010.groups] == ["🧹 Chore", UNCLASSIFIED_HEADING]
        assert document.versions[0].groups[-1].commits[0].message == "wip"

    def test_release_with_only_dropped_commits_is_kept(self, make_commit):
        buckets = segment([make_commit("release", tag="v1.0.0")], compile_version_pattern())

        document = ChangelogAssembler().assemble("Changelog", buckets)

        assert labels(document.versions) == ["v1.0.0"]
        assert document.versions[0].groups == []

    def test_empty_input(self):
        document = ChangelogAssembler().assemble("Changelog", [])

        assert document.versions == []
        assert document.is_empty

    def test_round_trip_scenario(self, make_commit):
        commits = [
            make_commit("chore: v0.1.1", tag="v0.1.1", day=3),
            make_commit("fix: split code into separate files", day=2),
            make_commit("feat: implement changelog processor", day=1),
        ]

        buckets = segment(commits, compile_version_pattern())
        document = ChangelogAssembler().assemble("Changelog", buckets)

        assert len(document.versions) == 1
        version = document.versions[0]
        assert version.label == "v0.1.1"
        assert version.date == commits[0].author_date
        assert [group.heading for group in version.groups] == [
            "🚀 Features",
            "🐛 Bug Fixes",
            "🧹 Chore",
        ]
        assert [group.commits[0].message for group in version.groups] == [
            "implement changelog processor",
            "split code into separate files",
            "v0.1.1",
        ]

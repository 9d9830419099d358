"""Tests for the repository-wide file index."""

import pytest

from churn_forensics.exceptions import FileNotTrackedError, InvalidFileLinkError
from churn_forensics.miner.hashing import file_link, file_name_hash
from churn_forensics.miner.models import Commit
from churn_forensics.miner.repository import RepositoryStatistics


def touch(revision_id, path, added=1, deleted=0, author="alice"):
    return (
        Commit(revision_id, author, 0)
        .set_old_path(path)
        .set_new_path(path)
        .add_lines(added)
        .delete_lines(deleted)
    )


class TestAddAll:
    """Test routing of commits to files."""

    def test_empty_repository(self):
        repository = RepositoryStatistics().add_all([])

        assert repository.is_empty
        assert len(repository) == 0
        assert repository.all() == []

    def test_different_files_get_separate_entries(self):
        repository = RepositoryStatistics().add_all([touch("1", "a.py"), touch("2", "b.py")])

        assert len(repository) == 2
        assert repository.get("a.py").commits == ["1"]
        assert repository.get("b.py").commits == ["2"]

    def test_same_file_shares_entry(self):
        repository = RepositoryStatistics().add_all([touch("1", "a.py"), touch("2", "a.py")])

        assert len(repository) == 1
        assert repository.get("a.py").commits == ["1", "2"]

    def test_repeated_add_all_extends(self):
        repository = RepositoryStatistics()
        repository.add_all([touch("1", "a.py")])
        repository.add_all([touch("2", "a.py"), touch("3", "c.py")])

        assert repository.get("a.py").commits == ["1", "2"]
        assert repository.file_names == ["a.py", "c.py"]

    def test_all_in_first_seen_order(self):
        repository = RepositoryStatistics().add_all(
            [touch("1", "z.py"), touch("2", "a.py"), touch("3", "z.py")]
        )
        assert [fs.file_name for fs in repository.all()] == ["z.py", "a.py"]
        assert [fs.file_name for fs in repository] == ["z.py", "a.py"]

    def test_history_fixture(self, history):
        repository = RepositoryStatistics().add_all(history)

        assert repository.file_names == ["src/app.py", "README.md", "docs/README.md"]

        app = repository.get("src/app.py")
        assert app.commits == ["r1", "r2", "r3", "r5"]
        assert app.total_added_lines == 14
        assert app.total_deleted_lines == 18
        assert app.number_of_authors == 2
        assert app.is_deleted

        assert repository.get("docs/README.md").previous_names == ["README.md"]
        assert not repository.get("README.md").is_deleted

    def test_deleted_files_stay_tracked(self, history):
        repository = RepositoryStatistics().add_all(history)
        assert "src/app.py" in repository
        assert repository.contains("src/app.py")


class TestLookups:
    """Test get, get_by_hash and get_by_link."""

    def test_unknown_file_raises(self):
        repository = RepositoryStatistics().add_all([touch("1", "a.py")])

        with pytest.raises(FileNotTrackedError) as exc_info:
            repository.get("missing.py")
        assert exc_info.value.file_name == "missing.py"

    def test_hash_lookup_matches_name_lookup(self, history):
        repository = RepositoryStatistics().add_all(history)

        for name in repository.file_names:
            assert repository.get_by_hash(file_name_hash(name)) is repository.get(name)

    def test_unknown_hash_raises(self):
        repository = RepositoryStatistics().add_all([touch("1", "a.py")])

        with pytest.raises(FileNotTrackedError) as exc_info:
            repository.get_by_hash(12345)
        assert exc_info.value.file_hash == 12345
        assert "12345" in str(exc_info.value)

    def test_link_lookup(self):
        repository = RepositoryStatistics().add_all([touch("1", "a.py")])
        assert repository.get_by_link(file_link("a.py")).file_name == "a.py"

    def test_malformed_link(self):
        repository = RepositoryStatistics().add_all([touch("1", "a.py")])

        with pytest.raises(InvalidFileLinkError):
            repository.get_by_link("a.py")

    def test_hash_collision_first_seen_wins(self):
        """'Aa' and 'BB' share a hash; the link resolves to the first file."""
        repository = RepositoryStatistics().add_all([touch("1", "Aa"), touch("2", "BB")])

        assert repository.get_by_hash(file_name_hash("BB")).file_name == "Aa"
        assert repository.get("BB").file_name == "BB"

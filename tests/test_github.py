"""Tests for clone URLs and repository models"""

import pytest

from ghext.models import Project, RepositoryIdentifier, Transport
from ghext.utils.file_handler import is_local_directory
from ghext.utils.github import build_clone_url


class TestBuildCloneUrl:

    def test_read_only(self):
        assert build_clone_url("gh", "jingweno", False) == "git://github.com/jingweno/gh.git"

    def test_ssh(self):
        assert build_clone_url("gh", "jingweno", True) == "git@github.com:jingweno/gh.git"

    def test_other_host(self):
        url = build_clone_url("gh", "jingweno", True, host="ghe.example.com")
        assert url == "git@ghe.example.com:jingweno/gh.git"


class TestRepositoryIdentifier:

    def test_owner_and_name(self):
        repo = RepositoryIdentifier.parse("jingweno/gh")
        assert repo == RepositoryIdentifier(name="gh", owner="jingweno")

    def test_bare_name(self):
        repo = RepositoryIdentifier.parse("jekyll_and_hyde")
        assert repo.name == "jekyll_and_hyde"
        assert repo.owner == ""

    def test_splits_on_first_slash_only(self):
        repo = RepositoryIdentifier.parse("a/b/c")
        assert (repo.owner, repo.name) == ("a", "b/c")

    def test_resolve_fills_missing_owner(self):
        project = RepositoryIdentifier.parse("gh").resolve("foo")
        assert project == Project(name="gh", owner="foo")

    def test_resolve_keeps_owner(self):
        project = RepositoryIdentifier.parse("jingweno/gh").resolve("foo")
        assert project.name_with_owner == "jingweno/gh"


class TestProject:

    def test_git_url(self):
        project = Project(name="gh", owner="jingweno")
        assert project.git_url() == "git://github.com/jingweno/gh.git"
        assert project.git_url(use_ssh=True) == "git@github.com:jingweno/gh.git"

    @pytest.mark.parametrize("use_ssh,expected", [
        (True, Transport.SSH),
        (False, Transport.READ_ONLY),
    ])
    def test_transport_from_flag(self, use_ssh, expected):
        assert Transport.from_flag(use_ssh) is expected


class TestIsLocalDirectory:

    def test_directory(self, tmp_path):
        assert is_local_directory(str(tmp_path))

    def test_file_is_not_a_directory(self, tmp_path):
        path = tmp_path / "file"
        path.write_text("x")
        assert not is_local_directory(str(path))

    def test_missing(self, tmp_path):
        assert not is_local_directory(str(tmp_path / "nope"))

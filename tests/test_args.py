"""Tests for the argument vector"""

from ghext.args import Args


class TestArgs:

    def test_defaults(self):
        args = Args()
        assert args.params == []
        assert args.noop is False
        assert args.is_params_empty()

    def test_copies_input(self):
        original = ("clone", "me")
        args = Args(original)
        args.replace_param(0, "x")
        assert original == ("clone", "me")
        assert list(args) == ["x", "me"]

    def test_index_of_param(self):
        args = Args(["a", "-p", "b"])
        assert args.index_of_param("-p") == 1
        assert args.index_of_param("missing") == -1

    def test_remove_param(self):
        args = Args(["a", "-p", "b"])
        assert args.remove_param(1) == "-p"
        assert args.params == ["a", "b"]
        assert len(args) == 2

    def test_to_command(self):
        args = Args(["--depth", "1", "git://github.com/a/b.git"])
        assert args.to_command("clone") == "git clone --depth 1 git://github.com/a/b.git"

    def test_to_command_without_params(self):
        assert Args().to_command("clone") == "git clone"

    def test_equality(self):
        assert Args(["a"], noop=True) == Args(["a"], noop=True)
        assert Args(["a"]) != Args(["a"], noop=True)

"""Shared fixtures: offscreen Qt and small git repositories built with pygit2."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pygit2
import pytest

from darkpig.graph.types import Commit


def make_commit(oid, *parents, message=None):
    """Layout-only commit record"""
    return Commit(id=oid, parent_ids=tuple(parents), author="Test <test@example.com>", message=message or oid)


class RepoBuilder:
    """Writes commits into a fresh repository, one file per commit"""

    def __init__(self, path):
        self.repo = pygit2.init_repository(str(path))
        self._time = 1700000000

    def _signature(self):
        self._time += 60
        return pygit2.Signature("Test", "test@example.com", self._time, 0)

    def commit(self, message, files, parents=None, ref="HEAD"):
        """Commit a tree holding exactly `files` (name -> text)"""
        builder = self.repo.TreeBuilder()
        for name, text in files.items():
            blob = self.repo.create_blob(text.encode())
            builder.insert(name, blob, pygit2.enums.FileMode.BLOB)
        tree = builder.write()
        sig = self._signature()
        oid = self.repo.create_commit(ref, sig, sig, message, tree, list(parents or []))
        return str(oid)


@pytest.fixture
def repo_builder(tmp_path):
    return RepoBuilder(tmp_path / "repo")


@pytest.fixture
def merge_repo(repo_builder):
    """
    root - second ------ merge   (HEAD)
        \\             /
         side --------
    """
    root = repo_builder.commit("Initial commit\n", {"file.txt": "one\n"})
    second = repo_builder.commit("Second commit\n", {"file.txt": "two\n"}, parents=[root])
    side = repo_builder.commit("Side commit\n", {"file.txt": "one\n", "side.txt": "side\n"}, parents=[root], ref=None)
    merge = repo_builder.commit(
        "Merge side\n", {"file.txt": "two\n", "side.txt": "side\n"}, parents=[second, side]
    )
    ids = {"root": root, "second": second, "side": side, "merge": merge}
    return repo_builder.repo.workdir, ids

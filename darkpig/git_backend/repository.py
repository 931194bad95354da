"""
Git repository access using pygit2
"""

import itertools
import logging
from pathlib import Path

import pygit2

from darkpig.errors import RepositoryAccessError
from darkpig.graph.types import Commit, CommitId

logger = logging.getLogger(__name__)

# Errors pygit2 raises for missing, malformed or unreadable objects
_LOOKUP_ERRORS = (KeyError, ValueError, TypeError, pygit2.GitError)


class DarkPigRepository:
    """Reads commits and diffs for the graph view"""

    def __init__(self, repo_path: str | None = None) -> None:
        """Open the repository at repo_path, or the one containing the cwd"""
        if repo_path is None:
            repo_path = self._find_repo()

        try:
            self.repo = pygit2.Repository(repo_path)
        except _LOOKUP_ERRORS as e:
            raise RepositoryAccessError(f"open {repo_path}", str(e)) from e
        self.path = repo_path
        logger.info("Opened repository %s", self.repo.workdir or self.repo.path)

    def _find_repo(self) -> str:
        """Find git repository in current directory or parents"""
        current = Path.cwd()
        while current != current.parent:
            if (current / ".git").exists():
                return str(current)
            current = current.parent
        raise RepositoryAccessError("discover repository", f"no .git above {Path.cwd()}")

    def walk_commits(
        self,
        start: str | None = None,
        limit: int | None = None,
        all_branches: bool = False,
    ) -> list[Commit]:
        """
        Walk history children-first.

        Starts at `start` (any revision), or HEAD, or every local branch tip
        when all_branches is set. Topological order guarantees each commit
        comes after all of its children in the walk.
        """
        tips = self._walk_tips(start, all_branches)
        if not tips:
            return []

        try:
            walker = self.repo.walk(tips[0], pygit2.enums.SortMode.TOPOLOGICAL | pygit2.enums.SortMode.TIME)
            for tip in tips[1:]:
                walker.push(tip)
            commits = [self._to_commit(c) for c in itertools.islice(walker, limit)]
        except _LOOKUP_ERRORS as e:
            raise RepositoryAccessError("walk history", str(e)) from e

        logger.debug("Walked %d commits from %d tip(s)", len(commits), len(tips))
        return commits

    def _walk_tips(self, start: str | None, all_branches: bool) -> list[pygit2.Oid]:
        if start is not None:
            return [self._peel_commit(start).id]

        if all_branches:
            tips: list[pygit2.Oid] = []
            for branch_name in self.repo.branches.local:
                branch = self.repo.branches[branch_name]
                tips.append(branch.peel(pygit2.Commit).id)
            return tips

        if self.repo.head_is_unborn:
            return []
        try:
            return [self.repo.head.peel(pygit2.Commit).id]
        except _LOOKUP_ERRORS as e:
            raise RepositoryAccessError("resolve HEAD", str(e)) from e

    def get_commit(self, oid: CommitId) -> Commit:
        """Get a single commit record"""
        return self._to_commit(self._peel_commit(oid))

    def resolve(self, ref: str) -> CommitId:
        """Resolve a branch, tag, or (partial) SHA to a full commit id"""
        return str(self._peel_commit(ref).id)

    def diff(self, old_oid: CommitId, new_oid: CommitId) -> str:
        """
        Unified diff between two tree states.

        Each id may name a commit or a tree. Missing objects raise
        RepositoryAccessError for this request only.
        """
        old_tree = self._peel_tree(old_oid)
        new_tree = self._peel_tree(new_oid)
        try:
            diff = self.repo.diff(old_tree, new_tree)
            return diff.patch or ""
        except _LOOKUP_ERRORS as e:
            raise RepositoryAccessError(f"diff {old_oid[:7]}..{new_oid[:7]}", str(e)) from e

    def diff_commit(self, oid: CommitId) -> str:
        """Diff a commit against its first parent (or the empty tree for a root commit)"""
        commit = self._peel_commit(oid)
        if commit.parents:
            return self.diff(str(commit.parent_ids[0]), str(commit.id))

        try:
            # Initial commit - diff against empty tree
            diff = commit.tree.diff_to_tree(swap=True)
            return diff.patch or ""
        except _LOOKUP_ERRORS as e:
            raise RepositoryAccessError(f"diff {oid[:7]}", str(e)) from e

    def _peel_commit(self, ref: str) -> pygit2.Commit:
        try:
            obj = self.repo.revparse_single(ref)
            commit = obj if isinstance(obj, pygit2.Commit) else obj.peel(pygit2.Commit)
        except _LOOKUP_ERRORS as e:
            raise RepositoryAccessError(f"read commit {ref}", str(e)) from e
        assert isinstance(commit, pygit2.Commit)
        return commit

    def _peel_tree(self, ref: str) -> pygit2.Tree:
        try:
            obj = self.repo.revparse_single(ref)
            tree = obj if isinstance(obj, pygit2.Tree) else obj.peel(pygit2.Tree)
        except _LOOKUP_ERRORS as e:
            raise RepositoryAccessError(f"read tree {ref}", str(e)) from e
        assert isinstance(tree, pygit2.Tree)
        return tree

    @staticmethod
    def _to_commit(commit: pygit2.Commit) -> Commit:
        author = commit.author
        return Commit(
            id=str(commit.id),
            parent_ids=tuple(str(p) for p in commit.parent_ids),
            author=f"{author.name} <{author.email}>",
            message=commit.message,
            timestamp=commit.commit_time,
        )

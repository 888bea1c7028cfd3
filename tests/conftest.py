"""Test fixtures for Latest Tag Finder.

This module provides shared fixtures used across multiple test modules.

Fixtures:
    git_repo: Creates a throwaway git repository with a few commits
    tagged_repo: git_repo with a mix of stable and prerelease tags
"""

import pytest
from git import Actor, Repo

AUTHOR = Actor("Demo User", "demo@example.com")


def make_commit(repo: Repo, line: str) -> None:
    """Append a line to file.txt and commit it."""
    file_path = repo.working_tree_dir + "/file.txt"
    with open(file_path, "a", encoding="utf-8") as f:
        f.write(line + "\n")
    repo.index.add(["file.txt"])
    repo.index.commit(f"Add {line}", author=AUTHOR, committer=AUTHOR)


@pytest.fixture
def git_repo(tmp_path):
    """Creates a temporary git repository on branch 'main'.

    The repository mimics a small project history:
    tmp_path/
    └── repo/
        └── file.txt   (two commits)

    Returns:
        Repo: GitPython repository object
    """
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    repo = Repo.init(repo_dir)

    # Annotated tags need a tagger identity
    with repo.config_writer() as writer:
        writer.set_value("user", "name", AUTHOR.name)
        writer.set_value("user", "email", AUTHOR.email)

    make_commit(repo, "Hello World")
    make_commit(repo, "Second line")
    repo.git.branch("-M", "main")
    return repo


@pytest.fixture
def tagged_repo(git_repo):
    """git_repo with stable and prerelease tags, lightweight and annotated.

    Tags:
        v1.0.0, v1.1.5 (lightweight), v1.2.0 (annotated),
        v2.0.0-beta.2, v2.0.0-beta.10, other-3.0.0
    """
    git_repo.create_tag("v1.0.0")
    git_repo.create_tag("v1.1.5")
    git_repo.create_tag("v1.2.0", message="Release version 1.2.0")
    make_commit(git_repo, "Third line")
    git_repo.create_tag("v2.0.0-beta.2")
    git_repo.create_tag("v2.0.0-beta.10")
    git_repo.create_tag("other-3.0.0")
    return git_repo

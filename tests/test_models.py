"""Tests for worktree models"""
from pathlib import Path

import pytest

from wtadd.models.worktree import (
    BranchOrigin,
    CopyManifest,
    WorktreeLocation,
    branch_to_dir_name,
)


class TestBranchToDirName:
    """Test branch name to directory name translation."""

    @pytest.mark.parametrize("branch,expected", [
        ("alu/something-other", "alu_something-other"),
        ("quick-fix", "quick-fix"),
        ("team/alu/deep/branch", "team_alu_deep_branch"),
        ("trailing/", "trailing_"),
    ])
    def test_slashes_become_underscores(self, branch, expected):
        assert branch_to_dir_name(branch) == expected

    def test_result_has_no_separator(self):
        assert "/" not in branch_to_dir_name("a/b/c/d")


class TestWorktreeLocation:
    """Test where new worktrees are placed."""

    def test_sibling_when_inside_work_tree(self):
        location = WorktreeLocation.for_branch("feature/login", inside_work_tree=True)
        assert location.path == "../feature_login"

    def test_child_when_in_bare_root(self):
        location = WorktreeLocation.for_branch("feature/login", inside_work_tree=False)
        assert location.path == "./feature_login"

    def test_resolve_against_invocation_dir(self, temp_dir):
        base = temp_dir / "repo"
        location = WorktreeLocation.for_branch("fix", inside_work_tree=True)
        assert location.resolve(str(base)) == temp_dir / "fix"

    def test_str_is_display_path(self):
        assert str(WorktreeLocation(".", "quick-fix")) == "./quick-fix"


class TestCopyManifest:
    """Test the CopyManifest container."""

    def test_membership_and_length(self):
        manifest = CopyManifest(Path("."), [Path(".env"), Path("config/application-local.yml")])
        assert len(manifest) == 2
        assert ".env" in manifest
        assert "config/application-local.yml" in manifest
        assert ".envrc" not in manifest

    def test_branch_origin_values(self):
        assert {o.value for o in BranchOrigin} == {"local", "remote", "new"}

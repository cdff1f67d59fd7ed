"""Pytest fixtures for wtadd tests"""
import logging
import tempfile
from pathlib import Path
from unittest.mock import Mock
import pytest
import git

from wtadd.services.display_service import DisplayService
from wtadd.utils.logging import setup_logging


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'verbose': False,
        'debug': False,
        'remote_name': 'origin',
        'copy_node_modules': True,
        'pull': True,
        'allow_direnv': True,
    }


@pytest.fixture
def mock_display():
    """Create a mock DisplayService."""
    return Mock(spec=DisplayService)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    # Initialize repository
    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    # Create initial commit on main branch
    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except Exception:
        pass

    yield repo

    # Cleanup
    repo.close()


@pytest.fixture
def repo_with_untracked_files(git_repo):
    """Git repository holding the kind of untracked files worktrees need."""
    repo_path = Path(git_repo.working_dir)

    files = {
        ".env": "SECRET=1\n",
        ".envrc": "dotenv\n",
        ".tool-versions": "nodejs 20.0.0\n",
        "config/application-local.yml": "server:\n  port: 8081\n",
        "config/application-other.yml": "server:\n  port: 8082\n",
        "node_modules/pkg/index.js": "module.exports = 1;\n",
        "node_modules/pkg/.env": "PKG=1\n",
        "dist/.env": "DIST=1\n",
    }
    for name, content in files.items():
        path = repo_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)

    yield git_repo


@pytest.fixture
def cloned_repo(git_repo, temp_dir):
    """Clone of git_repo whose origin has a branch that doesn't exist locally."""
    git_repo.git.branch('feature/remote-only')

    clone = git_repo.clone(str(temp_dir / "clone"))
    clone.config_writer().set_value("user", "name", "Test User").release()
    clone.config_writer().set_value("user", "email", "test@example.com").release()

    yield clone

    clone.close()


@pytest.fixture
def bare_layout(git_repo, temp_dir):
    """Bare repository root with the main branch checked out in ./main."""
    bare_path = temp_dir / "project"
    bare = git.Repo.clone_from(git_repo.working_dir, str(bare_path), bare=True)
    bare.git.worktree('add', 'main', 'main')

    # Untracked files live in the checked out branch directory
    (bare_path / "main" / ".env").write_text("FROM_MAIN=1\n")
    (bare_path / "main" / "api").mkdir()
    (bare_path / "main" / "api" / ".mise.toml").write_text("[tools]\n")

    yield bare_path

    bare.close()


@pytest.fixture
def verbose_logging(caplog):
    """Configure logging as `wtadd -v` does, still capturing records with caplog."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    git_logger_level = logging.getLogger("git").level

    setup_logging(verbose=True)
    root_logger.addHandler(caplog.handler)

    yield caplog

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in saved_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)
    logging.getLogger("git").setLevel(git_logger_level)

"""Pytest configuration and fixtures for git-subtrees tests"""

import re
import shlex
import subprocess
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / 'lib' / 'git_subtrees.py'


def _has_git_subtree():
    result = subprocess.run(
        ['git', 'subtree', '-h'], capture_output=True, text=True, check=False
    )
    return 'usage' in (result.stdout + result.stderr).lower()


needs_subtree = pytest.mark.skipif(
    not _has_git_subtree(), reason="'git subtree' is not installed"
)


class TestEnvironment:
    """Test environment with helper functions"""

    def __init__(self, tmp_dir: Path):
        self.tmp = tmp_dir
        self.upstream = tmp_dir / "upstream" / "bar"
        self.owner = tmp_dir / "owner" / "foo"
        self.test_home = tmp_dir / "home"

    def run(self, cmd, cwd=None, check=True, capture_output=True):
        """Run a shell command"""
        result = subprocess.run(
            cmd,
            shell=isinstance(cmd, str),
            cwd=cwd,
            capture_output=capture_output,
            text=True,
            check=check,
        )
        return result

    def init_repo(self, path: Path, *files):
        """Create a repository with an initial commit"""
        path.mkdir(parents=True)
        self.run(['git', 'init', '--quiet'], cwd=path)
        self.add_new_files(*files, cwd=path)

    def init_upstream_and_owner(self):
        """Create the upstream 'bar' and the owner 'foo' repositories"""
        self.init_repo(self.upstream, 'Bar', 'src/bar.c')
        self.init_repo(self.owner, 'Foo')

    def subtree_add_bar_into_foo(self):
        """Vendor upstream bar into foo under 'bar'"""
        git_subtrees(['add', 'bar', str(self.upstream), 'master'], cwd=self.owner)

    def add_new_files(self, *files, cwd=None):
        """Add new files and commit"""
        for file in files:
            file_path = Path(cwd) / file
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(f"new file {file}\n")
            self.run(['git', 'add', '--force', str(file)], cwd=cwd)
        self.run(
            ['git', 'commit', '--quiet', '-m', f'add new file: {files[-1]}'], cwd=cwd
        )

    def modify_files(self, *files, cwd=None):
        """Modify files and commit"""
        for file in files:
            with open(Path(cwd) / file, 'a') as f:
                f.write('a new line\n')
            self.run(['git', 'add', str(file)], cwd=cwd)
        self.run(['git', 'commit', '--quiet', '-m', f'modified file: {files[-1]}'], cwd=cwd)

    def catch(self, args, cwd=None, **kwargs):
        """Run git-subtrees and return stderr on failure, stdout otherwise"""
        result = git_subtrees(args, cwd=cwd, check=False, **kwargs)
        return (
            result.stderr.strip() if result.returncode != 0 else result.stdout.strip()
        )


@pytest.fixture(scope='function')
def env(tmp_path, monkeypatch):
    """Setup test environment for each test"""
    test_env = TestEnvironment(tmp_path)

    test_home = tmp_path / "home"
    test_home.mkdir()

    monkeypatch.setenv('HOME', str(test_home))
    monkeypatch.setenv('GIT_CONFIG_GLOBAL', str(test_home / '.gitconfig'))
    monkeypatch.setenv('GIT_CONFIG_SYSTEM', '/dev/null')
    monkeypatch.setenv('PAGER', 'cat')
    for var in ['GIT_SUBTREES_PAGER', 'GIT_SUBTREES_QUIET', 'GIT_SUBTREES_VERBOSE',
                'GIT_SUBTREES_DEBUG']:
        monkeypatch.delenv(var, raising=False)

    for key, value in [
        ('user.name', 'Test User'),
        ('user.email', 'test@example.com'),
        ('core.autocrlf', 'input'),
        ('advice.detachedHead', 'false'),
        ('color.ui', 'false'),
        ('init.defaultBranch', 'master'),
    ]:
        subprocess.run(['git', 'config', '--global', key, value], check=True)

    yield test_env


def git_subtrees(args, cwd, check=True, input=None, env=None):
    """Run git-subtrees command"""
    if isinstance(args, str):
        args = shlex.split(args)

    return subprocess.run(
        [sys.executable, str(SCRIPT)] + list(args),
        cwd=cwd,
        capture_output=True,
        text=True,
        check=check,
        input=input,
        env=env,
    )


def git_rev_parse(ref, cwd):
    """Get commit SHA for a ref"""
    result = subprocess.run(
        ['git', 'rev-parse', ref], cwd=cwd, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


def git_config(key, cwd):
    """Get git config value"""
    result = subprocess.run(
        ['git', 'config', key], cwd=cwd, capture_output=True, text=True, check=False
    )
    return result.stdout.strip() if result.returncode == 0 else None


def git_branches(cwd):
    """Names of all local branches"""
    result = subprocess.run(
        ['git', 'for-each-ref', '--format=%(refname:short)', 'refs/heads/'],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.split()


# Assertion helpers
def assert_exists(path, should_exist=True):
    """Assert that a path exists or doesn't exist"""
    path = Path(path)
    if should_exist:
        assert path.exists(), f"Path '{path}' should exist but doesn't"
    else:
        assert not path.exists(), f"Path '{path}' should not exist but does"


def assert_output_matches(actual, expected, description=""):
    """Assert that output matches expected value"""
    assert actual == expected, f"{description}\nExpected: {expected}\nActual: {actual}"


def assert_output_contains(output, pattern, description=""):
    """Assert that output contains pattern"""
    assert pattern in output, (
        f"{description}\nPattern '{pattern}' not found in:\n{output}"
    )


def assert_output_like(output, pattern, description=""):
    """Assert that output matches regex pattern"""
    assert re.search(pattern, output), (
        f"{description}\nPattern '{pattern}' not found in:\n{output}"
    )


def assert_output_unlike(output, pattern, description=""):
    """Assert that output doesn't match regex pattern"""
    assert not re.search(pattern, output), (
        f"{description}\nPattern '{pattern}' should not be found in:\n{output}"
    )

#!/usr/bin/env python3
"""
git-subtrees - Manage vendored git subtrees and their upstream remotes

Every subtree prefix is paired with a remote named '<prefix>-upstream'.
The 'ls' command rebuilds the list of known subtrees from the
'git-subtree-dir:' / 'git-subtree-split:' lines git subtree writes into
its commit messages.
"""

import sys
import os
import subprocess
import argparse
import re
import shlex
import shutil
import tempfile
import textwrap
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple
from dataclasses import dataclass, replace

VERSION = "0.1.0"
REQUIRED_GIT_VERSION = "1.8.0"

DIR_MARKER = 'git-subtree-dir:'
SPLIT_MARKER = 'git-subtree-split:'
REMOTE_SUFFIX = '-upstream'
UNKNOWN_REMOTE = 'unknown'
SHORT_HASH = 10

# (title, width) of every column printed by 'ls'
TABLE_COLUMNS = [
    ('Prefix', 20),
    ('Remote URL', 55),
    ('Subtree Split', 20),
    ('Local Commit', 12),
]

USAGE = textwrap.dedent("""\
    usage: git subtrees add <prefix> <remote-url> <branch>
       or: git subtrees ls
       or: git subtrees pull <prefix> <branch>
       or: git subtrees diff <prefix> <branch>
       or: git subtrees branch <prefix> [<branch-name>]
       or: git subtrees pr <prefix>
       or: git subtrees rm <prefix>

    See 'git subtrees help' for more.
    """)

# Positional parameters per command. '+name' is required, 'name' optional.
COMMAND_PARAMS = {
    'add': ['+prefix', '+remote_url', '+branch'],
    'ls': [],
    'pull': ['+prefix', '+branch'],
    'update': ['+prefix', '+branch'],
    'diff': ['+prefix', '+branch'],
    'branch': ['+prefix', 'branch_name'],
    'pr': ['+prefix'],
    'rm': ['+prefix'],
    'help': [],
    'version': [],
}

Commit = Tuple[str, str]


class GitSubtreesError(Exception):
    """Base exception for git-subtrees errors"""

    def __init__(self, message, code=1):
        self.message = message
        self.code = code
        super().__init__(self.message)


@dataclass
class Flags:
    """Command-line flags"""

    quiet: bool = False
    verbose: bool = False
    debug: bool = False


@dataclass
class SubtreeRecord:
    """One known subtree, as recovered from commit history"""

    prefix: str
    upstream_commit: str
    local_commit: str
    remote_url: str = UNKNOWN_REMOTE


def remote_name(prefix: str) -> str:
    """Name of the remote tracking a subtree prefix"""
    return f'{prefix}{REMOTE_SUFFIX}'


def patch_branch(prefix: str) -> str:
    """Default name of the split branch for a subtree prefix"""
    return f'subtree-{prefix}-patch'


# ===== Subtree Registry =====


def parse_subtree_commit(sha: str, message: str) -> Optional[SubtreeRecord]:
    """Extract subtree metadata from one commit message.

    Returns None unless the message has both a non-empty
    'git-subtree-dir:' and a non-empty 'git-subtree-split:' line.
    """
    prefix = ''
    upstream = ''
    for line in message.splitlines():
        if line.startswith(DIR_MARKER) and not prefix:
            prefix = line[len(DIR_MARKER):].strip().rstrip('/')
        elif line.startswith(SPLIT_MARKER) and not upstream:
            upstream = line[len(SPLIT_MARKER):].strip()

    if not prefix or not upstream:
        return None
    return SubtreeRecord(prefix=prefix, upstream_commit=upstream, local_commit=sha)


def scan_history(commits: Iterable[Commit]) -> Iterator[SubtreeRecord]:
    """Yield a record for every qualifying commit, in history order"""
    for sha, message in commits:
        if DIR_MARKER not in message:
            continue
        record = parse_subtree_commit(sha, message)
        if record:
            yield record


def dedupe_records(records: Iterable[SubtreeRecord]) -> List[SubtreeRecord]:
    """Keep the first record seen for every prefix"""
    seen = set()
    result = []
    for record in records:
        if record.prefix in seen:
            continue
        seen.add(record.prefix)
        result.append(record)
    return result


def filter_existing(
    records: Iterable[SubtreeRecord], root: str = '.'
) -> List[SubtreeRecord]:
    """Drop records whose prefix is no longer a directory under root"""
    return [r for r in records if os.path.isdir(os.path.join(root, r.prefix))]


def resolve_remotes(
    records: Iterable[SubtreeRecord], lookup: Callable[[str], Optional[str]]
) -> List[SubtreeRecord]:
    """Fill in the URL of each record's '<prefix>-upstream' remote"""
    result = []
    for record in records:
        try:
            url = lookup(remote_name(record.prefix))
        except (GitSubtreesError, OSError):
            url = None
        result.append(replace(record, remote_url=url or UNKNOWN_REMOTE))
    return result


def parse_history(
    commits: Iterable[Commit],
    root: str = '.',
    lookup: Callable[[str], Optional[str]] = lambda name: None,
) -> List[SubtreeRecord]:
    """Build the subtree listing from newest-first (sha, message) pairs"""
    records = dedupe_records(scan_history(commits))
    return resolve_remotes(filter_existing(records, root), lookup)


def format_table(records: Iterable[SubtreeRecord]) -> str:
    """Render records as the fixed-width 'ls' table"""
    lines = [''.join(f'{title:<{width}}' for title, width in TABLE_COLUMNS)]
    for r in records:
        values = [
            r.prefix,
            r.remote_url,
            r.upstream_commit[:SHORT_HASH],
            r.local_commit[:SHORT_HASH],
        ]
        lines.append(
            ''.join(
                f'{value:<{width}}' for value, (_, width) in zip(values, TABLE_COLUMNS)
            )
        )
    return '\n'.join(lines) + '\n'


def github_repo(url: str) -> str:
    """Turn a remote URL into the [HOST/]OWNER/REPO form 'gh --repo' takes"""
    m = re.match(
        r'^(?:[a-z][a-z0-9+.-]*://)?(?:[^@/]+@)?([^/:]+)[:/]+(.+?)(?:\.git)?/*$', url
    )
    if not m:
        return url
    host, path = m.group(1), m.group(2)
    return path if host == 'github.com' else f'{host}/{path}'


class GitRunner:
    """Simplified git command execution"""

    def __init__(self, verbose=False, debug=False, quiet=False):
        self.verbose = verbose
        self.debug = debug
        self.quiet = quiet

    def call(
        self,
        cmd: List[str],
        capture=False,
        fail=True,
        show=False,
        ok_codes=(0,),
    ) -> Optional[str]:
        """Run an external command"""
        if self.debug:
            print(f">>> {shlex.join(cmd)}", file=sys.stderr)

        try:
            if show:
                sys.stdout.flush()
                result = subprocess.run(cmd, check=False)
            else:
                result = subprocess.run(
                    cmd,
                    capture_output=True,
                    text=True,
                    errors='replace',
                    check=False,
                )
        except OSError as e:
            raise GitSubtreesError(f"Command failed: '{shlex.join(cmd)}'.\n{e}")

        if result.returncode not in ok_codes and fail:
            msg = f"Command failed: '{shlex.join(cmd)}'."
            if not show and result.stderr:
                msg += f"\n{result.stderr.rstrip()}"
            raise GitSubtreesError(msg, result.returncode)

        if capture:
            return result.stdout
        return None

    def run(self, args: List[str], **kwargs) -> Optional[str]:
        """Run git command"""
        return self.call(['git'] + args, **kwargs)

    def config_get(self, key: str, default=None) -> Optional[str]:
        """Get value from git config"""
        result = self.run(['config', '--get', key], capture=True, fail=False)
        return result.strip() if result and result.strip() else default

    def remote_url(self, remote: str) -> Optional[str]:
        """URL git uses for a remote, None if there is no such remote"""
        result = self.run(['remote', 'get-url', remote], capture=True, fail=False)
        return result.strip() if result and result.strip() else None

    def rev_exists(self, rev: str) -> bool:
        """Check if revision exists"""
        if not rev:
            return False
        result = subprocess.run(
            ['git', 'rev-parse', '--verify', '--quiet', rev], capture_output=True
        )
        return result.returncode == 0

    def branch_exists(self, branch: str) -> bool:
        """Check if branch exists"""
        return self.rev_exists(f'refs/heads/{branch}')

    def log(self, msg: str):
        """Print verbose message"""
        if self.verbose:
            print(f"* {msg}")

    def say(self, msg: str):
        """Print message unless quiet"""
        if not self.quiet:
            print(msg)


def read_history(git: GitRunner) -> List[Commit]:
    """All commits reachable from HEAD as (sha, message), newest first"""
    if not git.rev_exists('HEAD'):
        return []

    output = git.run(['log', '--format=%H%n%B%x00'], capture=True) or ''
    commits = []
    for entry in output.split('\x00'):
        entry = entry.lstrip('\n')
        if not entry:
            continue
        sha, _, message = entry.partition('\n')
        commits.append((sha.strip(), message))
    return commits


class GitSubtrees:
    """Main git-subtrees implementation"""

    def __init__(self):
        self.command = None
        self.args = []
        self.flags = Flags()
        self.git = GitRunner()
        self.git_version = None

    def main(self, args):
        """Main entry point"""
        for env_var, flag_attr in [
            ('GIT_SUBTREES_QUIET', 'quiet'),
            ('GIT_SUBTREES_VERBOSE', 'verbose'),
            ('GIT_SUBTREES_DEBUG', 'debug'),
        ]:
            if os.getenv(env_var):
                setattr(self.flags, flag_attr, True)

        self.parse_args(args)
        try:
            self.check_environment()
            self.check_repository()
        except GitSubtreesError as e:
            self.exit_with_error(e)
        self.dispatch_command()

    def parse_args(self, args):
        """Parse command line arguments"""
        parser = self._create_parser()
        try:
            parsed = parser.parse_intermixed_args(args)
        except argparse.ArgumentError as e:
            msg = str(e.message) if hasattr(e, 'message') else str(e)
            if 'unrecognized arguments:' in msg:
                arg = msg.split('unrecognized arguments:')[1].strip()
                msg = f"error: unknown option `{arg.lstrip('-')}'"
            self.usage_error(msg)

        if parsed.version:
            print(VERSION)
            sys.exit(0)

        for flag in ['quiet', 'verbose', 'debug']:
            if getattr(parsed, flag, False):
                setattr(self.flags, flag, True)

        self.git.verbose = self.flags.verbose
        self.git.debug = self.flags.debug
        self.git.quiet = self.flags.quiet

        if parsed.help_flag:
            self.command = 'help'
            self.args = []
            return

        self.command = parsed.command
        if not self.command:
            sys.stderr.write(USAGE)
            sys.exit(1)

        if self.command not in COMMAND_PARAMS:
            print(f"git-subtrees: '{self.command}' is not a command.", file=sys.stderr)
            sys.stderr.write(USAGE)
            sys.exit(1)

        self.args = parsed.arguments or []

    def _create_parser(self):
        """Create argument parser"""

        class CustomArgumentParser(argparse.ArgumentParser):
            def error(self, message):
                raise argparse.ArgumentError(None, message)

        parser = CustomArgumentParser(prog='git subtrees', add_help=False)
        parser.add_argument('-h', '--help', action='store_true', dest='help_flag')
        parser.add_argument('--version', action='store_true')
        parser.add_argument('-q', '--quiet', action='store_true')
        parser.add_argument('-v', '--verbose', action='store_true')
        parser.add_argument('-d', '--debug', action='store_true')
        parser.add_argument('command', nargs='?')
        parser.add_argument('arguments', nargs='*')
        return parser

    def parse_params(self) -> Dict[str, Optional[str]]:
        """Map positional arguments onto the command's parameters"""
        params = COMMAND_PARAMS[self.command]
        num = len(self.args)
        values = {}

        for i, spec in enumerate(params):
            name = spec.lstrip('+')
            if i < num:
                values[name] = self.args[i]
            elif spec.startswith('+'):
                self.usage_error(
                    f"Command '{self.command}' requires arg '{name.replace('_', '-')}'."
                )
            else:
                values[name] = None

        if num > len(params):
            extra = ' '.join(self.args[len(params):])
            self.usage_error(
                f"Unknown argument(s) '{extra}' for '{self.command}' command."
            )

        if values.get('prefix') is not None:
            values['prefix'] = self.normalize_prefix(values['prefix'])
        return values

    def dispatch_command(self):
        """Dispatch to command function"""
        commands = {
            'add': self.cmd_add,
            'ls': self.cmd_ls,
            'pull': self.cmd_pull,
            'update': self.cmd_pull,
            'diff': self.cmd_diff,
            'branch': self.cmd_branch,
            'pr': self.cmd_pr,
            'rm': self.cmd_rm,
            'help': self.cmd_help,
            'version': self.cmd_version,
        }

        params = self.parse_params()
        try:
            commands[self.command](**params)
        except GitSubtreesError as e:
            self.exit_with_error(e)

    # ===== Commands =====

    def cmd_add(self, prefix, remote_url, branch):
        """Merge an upstream branch into a new subtree prefix"""
        self.check_working_copy_clean()

        remote = remote_name(prefix)
        self.git.log(f"Merge '{remote_url}' ({branch}) into '{prefix}'.")
        cmd = ['subtree', 'add', f'--prefix={prefix}', '--squash']
        if self.flags.quiet:
            cmd.append('--quiet')
        self.git.run(cmd + [remote_url, branch], show=True)

        self.add_remote(remote, remote_url)
        self.git.say(
            f"Subtree '{prefix}' added from '{remote_url}' ({branch}), "
            f"tracked by remote '{remote}'."
        )

    def cmd_ls(self):
        """List known subtrees"""
        records = self.list_subtrees()
        if self.flags.quiet:
            for record in records:
                print(record.prefix)
            return
        print(format_table(records), end='')

    def cmd_pull(self, prefix, branch):
        """Merge new upstream commits into a subtree"""
        self.check_working_copy_clean()

        remote = remote_name(prefix)
        self.git.log(f"Fetch the upstream: {remote}.")
        self.git.run(['fetch', '--no-tags', '--quiet', remote], show=True)

        self.git.log(f"Merge '{remote}' ({branch}) into '{prefix}'.")
        cmd = ['subtree', 'pull', f'--prefix={prefix}', '--squash']
        if self.flags.quiet:
            cmd.append('--quiet')
        self.git.run(cmd + [remote, branch], show=True)

        self.git.say(f"Subtree '{prefix}' pulled from '{remote}' ({branch}).")

    def cmd_diff(self, prefix, branch):
        """Show how a subtree differs from its upstream branch"""
        self.check_prefix_exists(prefix)

        remote = remote_name(prefix)
        self.git.log(f"Fetch the upstream: {remote} ({branch}).")
        self.git.run(['fetch', '--no-tags', '--quiet', remote, branch], show=True)

        with tempfile.TemporaryDirectory(prefix='git-subtrees-') as tmp:
            snapshot = os.path.join(tmp, remote.replace('/', '_'))
            os.mkdir(snapshot)
            self.extract_tree('FETCH_HEAD', snapshot)

            self.git.log(f"Compare '{remote}' ({branch}) with '{prefix}/'.")
            # diff exits 1 when the trees differ
            output = self.git.call(
                ['diff', '-ruN', snapshot, f'{prefix}/'], capture=True, ok_codes=(0, 1)
            )

        if output:
            self.page(output)
        else:
            self.git.say(f"Subtree '{prefix}' is identical to '{remote}' ({branch}).")

    def cmd_branch(self, prefix, branch_name=None):
        """Create a branch holding only the subtree's history"""
        self.check_prefix_exists(prefix)

        branch = branch_name or patch_branch(prefix)
        self.create_split_branch(prefix, branch)
        self.git.say(f"Created branch '{branch}' from subtree '{prefix}'.")

    def cmd_pr(self, prefix):
        """Open a draft pull request with the subtree's local changes"""
        if not shutil.which('gh'):
            raise GitSubtreesError(
                "Can't find the GitHub CLI 'gh' in '$PATH'. "
                "Install it from https://cli.github.com/ to open pull requests."
            )
        self.check_prefix_exists(prefix)

        remote = remote_name(prefix)
        branch = patch_branch(prefix)
        self.create_split_branch(prefix, branch)

        self.git.log(f"Push '{branch}' to '{remote}'.")
        self.git.run(['push', remote, branch], show=True)

        url = self.git.remote_url(remote)
        self.git.log(f"Open a draft pull request on '{url}'.")
        self.git.call(
            [
                'gh',
                'pr',
                'create',
                '--draft',
                '--fill',
                '--repo',
                github_repo(url),
                '--head',
                branch,
            ],
            show=True,
        )

    def cmd_rm(self, prefix):
        """Remove a subtree and its upstream remote"""
        self.check_working_copy_clean()
        self.check_prefix_exists(prefix)

        remote = remote_name(prefix)
        if not self.confirm(f"Remove subtree '{prefix}' and remote '{remote}'? [y/N] "):
            raise GitSubtreesError("Aborted. Nothing was removed.")

        self.git.log(f"Remove '{prefix}' from the working tree.")
        self.git.run(['rm', '-r', '-q', '--', prefix], show=True)
        if os.path.isdir(prefix):
            shutil.rmtree(prefix)
        self.git.run(['commit', '-q', '-m', f"Remove subtree '{prefix}'"], show=True)

        if self.git.remote_url(remote) is not None:
            self.git.log(f"Remove remote '{remote}'.")
            self.git.run(['remote', 'remove', remote])
        else:
            self.git.log(f"No remote '{remote}' to remove.")

        self.git.say(f"Removed subtree '{prefix}'.")

    def cmd_help(self):
        """Show help documentation"""
        print(
            textwrap.dedent("""
            git subtrees - Manage vendored git subtrees

            Commands:
              add       Merge <branch> of <remote-url> into <prefix> (squashed)
                        and register the remote '<prefix>-upstream'
              ls        List subtrees with their remote and last split commit
              pull      Merge new commits of '<prefix>-upstream' <branch>
              update    Same as pull
              diff      Show local changes of <prefix> against its upstream
              branch    Split <prefix>'s history into a new branch
                        (default name 'subtree-<prefix>-patch')
              pr        Push the split branch upstream and open a draft
                        pull request with the GitHub CLI
              rm        Remove <prefix> and its upstream remote
              help      Show this documentation
              version   Display git-subtrees version info

            Options:
              -q, --quiet     Show less output
              -v, --verbose   Show the steps being performed
              -d, --debug     Show every command being run
            """)
        )

    def cmd_version(self):
        """Print version info"""
        print(f"git-subtrees version {VERSION}")
        if self.git_version:
            print(f"git version {self.git_version}")

    # ===== Support Functions =====

    def list_subtrees(self) -> List[SubtreeRecord]:
        """Known subtrees of the current repository"""
        commits = read_history(self.git)
        self.git.log(f"Scanned {len(commits)} commits for subtree metadata.")
        return parse_history(commits, root='.', lookup=self.git.remote_url)

    def add_remote(self, remote: str, url: str):
        """Register a remote, leaving an existing one alone"""
        existing = self.git.remote_url(remote)
        if existing is None:
            self.git.log(f"Add remote '{remote}' ({url}).")
            self.git.run(['remote', 'add', remote, url])
        elif existing != url:
            self.git.say(
                f"Remote '{remote}' already exists with URL '{existing}'. "
                "Leaving it unchanged."
            )
        else:
            self.git.log(f"Remote '{remote}' already exists.")

    def create_split_branch(self, prefix: str, branch: str):
        """Create a branch with the isolated history of a prefix"""
        self.git.log(f"Check if the '{branch}' branch already exists.")
        if self.git.branch_exists(branch):
            raise GitSubtreesError(f"Branch '{branch}' already exists.")

        self.git.log(f"Split '{prefix}' into branch '{branch}'.")
        cmd = ['subtree', 'split', f'--prefix={prefix}', '-b', branch]
        if self.flags.quiet:
            cmd.append('--quiet')
        self.git.run(cmd, show=True)

    def extract_tree(self, rev: str, dest: str):
        """Write the tree of a revision into a directory"""
        self.git.log(f"Extract '{rev}' into '{dest}'.")
        archive_cmd = ['git', 'archive', '--format=tar', rev]
        tar_cmd = ['tar', '-x', '-C', dest]
        if self.flags.debug:
            print(
                f">>> {shlex.join(archive_cmd)} | {shlex.join(tar_cmd)}",
                file=sys.stderr,
            )

        try:
            archive = subprocess.Popen(archive_cmd, stdout=subprocess.PIPE)
            try:
                tar = subprocess.run(tar_cmd, stdin=archive.stdout, check=False)
            finally:
                archive.stdout.close()
                archive_code = archive.wait()
        except OSError as e:
            raise GitSubtreesError(f"Can't extract '{rev}'.\n{e}")

        if archive_code != 0:
            raise GitSubtreesError(
                f"Command failed: '{shlex.join(archive_cmd)}'.", archive_code
            )
        if tar.returncode != 0:
            raise GitSubtreesError(
                f"Command failed: '{shlex.join(tar_cmd)}'.", tar.returncode
            )

    def page(self, output: str):
        """Show output through the configured pager"""
        pager = os.getenv('GIT_SUBTREES_PAGER') or os.getenv('PAGER') or 'less -FRX'
        if pager == 'less':
            pager = 'less -FRX'

        argv = shlex.split(pager)
        sys.stdout.flush()
        if not argv:
            print(output, end='')
            return

        try:
            proc = subprocess.Popen(argv, stdin=subprocess.PIPE, text=True)
            proc.communicate(output)
        except (BrokenPipeError, OSError):
            print(output, end='')

    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question, only 'y' or 'Y' count as yes"""
        try:
            answer = input(prompt)
        except EOFError:
            answer = ''
        return answer in ('y', 'Y')

    def normalize_prefix(self, prefix: str) -> str:
        """Normalize prefix path"""
        if prefix.startswith('/') or (len(prefix) > 1 and prefix[1] == ':'):
            self.usage_error(f"The prefix '{prefix}' should not be absolute path.")

        if prefix.startswith('./'):
            prefix = prefix[2:]

        # Compress multiple slashes
        prefix = re.sub(r'/+', '/', prefix).rstrip('/')
        if not prefix or prefix == '.':
            self.usage_error("The prefix must name a subdirectory.")
        return prefix

    # ===== Checks and Validations =====

    def check_environment(self):
        """Check that environment is suitable"""
        if not shutil.which('git'):
            raise GitSubtreesError("Can't find your 'git' command in '$PATH'.")

        result = subprocess.run(['git', '--version'], capture_output=True, text=True)
        version_match = re.search(r'(\d+\.\d+(?:\.\d+)?)', result.stdout)
        if not version_match:
            raise GitSubtreesError("Can't determine git version")
        self.git_version = version_match.group(1)

        if not self.check_version(self.git_version, REQUIRED_GIT_VERSION):
            raise GitSubtreesError(
                f"Requires git version {REQUIRED_GIT_VERSION} or higher; "
                f"you have '{self.git_version}'."
            )

    def check_repository(self):
        """Check that we are inside a work tree and move to its top"""
        if self.command in ['help', 'version']:
            return

        result = subprocess.run(
            ['git', 'rev-parse', '--show-toplevel'], capture_output=True, text=True
        )
        toplevel = result.stdout.strip()
        if result.returncode != 0 or not toplevel:
            raise GitSubtreesError("Not inside a git work tree.")

        os.chdir(toplevel)

    def check_working_copy_clean(self):
        """Ensure working copy has no uncommitted changes"""
        pwd = os.getcwd()
        self.git.log(f"Assert that working copy is clean: {pwd}")

        subprocess.run(
            ['git', 'update-index', '-q', '--ignore-submodules', '--refresh'],
            capture_output=True,
        )

        result = subprocess.run(
            ['git', 'diff-files', '--quiet', '--ignore-submodules'], capture_output=True
        )
        if result.returncode != 0:
            raise GitSubtreesError(
                f"Can't {self.command} subtree. Unstaged changes. ({pwd})"
            )

        if not self.git.rev_exists('HEAD'):
            return

        result = subprocess.run(
            ['git', 'diff-index', '--quiet', '--cached', '--ignore-submodules', 'HEAD'],
            capture_output=True,
        )
        if result.returncode != 0:
            raise GitSubtreesError(
                f"Can't {self.command} subtree. Index has changes. ({pwd})"
            )

    def check_prefix_exists(self, prefix: str):
        """Ensure the prefix is an existing directory"""
        if not os.path.isdir(prefix):
            raise GitSubtreesError(f"The prefix '{prefix}' does not exist.")

    def check_version(self, got: str, want: str) -> bool:
        """Check version is sufficient"""
        got_parts = got.split('.')
        want_parts = want.split('.')

        while len(got_parts) < 3:
            got_parts.append('0')
        while len(want_parts) < 3:
            want_parts.append('0')

        got_nums = [int(p) for p in got_parts[:3]]
        want_nums = [int(p) for p in want_parts[:3]]
        return got_nums >= want_nums

    def exit_with_error(self, e: GitSubtreesError):
        """Report an error and exit with its code"""
        print(f"git-subtrees: {e.message}", file=sys.stderr)
        sys.exit(e.code)

    def usage_error(self, msg: str):
        """Print usage error and exit"""
        print(f"git-subtrees: {msg}", file=sys.stderr)
        sys.exit(1)


def main():
    """Main entry point"""
    try:
        app = GitSubtrees()
        app.main(sys.argv[1:])
    except GitSubtreesError as e:
        sys.exit(e.code)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == '__main__':
    main()

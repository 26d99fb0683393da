from __future__ import annotations
from dataclasses import dataclass
import logging
import re
import subprocess
from .styles import Painter
from .styles import StyleClass as SC

#: Branch names shown in the "protected" (red) colors instead of green
PROTECTED_BRANCHES = frozenset(
    {"master", "main", "trunk", "root", "prod", "production"}
)

#: Displayed in place of a branch name when the repository is in a detached
#: ``HEAD`` state
DETACHED_HEAD = "(detached-HEAD)"

#: Default number of seconds to wait for each Git command
GIT_TIMEOUT: float = 3

log = logging.getLogger(__name__)


@dataclass
class Tracking:
    """Commit counts parsed from a ``git status --branch`` header line"""

    #: The number of commits by which ``HEAD`` is ahead of its upstream
    ahead: int = 0

    #: The number of commits by which ``HEAD`` is behind its upstream
    behind: int = 0


@dataclass
class RepositoryStatus:
    #: The name of the current branch, or `DETACHED_HEAD` if there is none
    branch: str

    #: `True` iff there are staged, unstaged, or untracked changes
    dirty: bool

    #: The number of commits by which ``HEAD`` is ahead of its upstream; 0 if
    #: there is no upstream
    ahead: int = 0

    #: The number of commits by which ``HEAD`` is behind its upstream; 0 if
    #: there is no upstream
    behind: int = 0

    #: The number of untracked, non-ignored files in the working tree
    untracked: int = 0

    @property
    def protected(self) -> bool:
        return is_protected(self.branch)

    def display(self, paint: Painter) -> str:
        if self.protected:
            paren = SC.GIT_PAREN_PROTECTED
            head = SC.GIT_DIRTY_PROTECTED if self.dirty else SC.GIT_BRANCH_PROTECTED
        else:
            paren = SC.GIT_PAREN
            head = SC.GIT_DIRTY if self.dirty else SC.GIT_BRANCH
        p = " " + paint("(", paren)
        # Show the branch; a dirty tree gets a background color:
        p += paint(self.branch, head)
        if self.ahead > 0:
            # Show commits ahead of upstream:
            p += " " + paint(f"↑{self.ahead}", SC.GIT_AHEAD)
        if self.behind > 0:
            # Show commits behind upstream:
            p += " " + paint(f"↓{self.behind}", SC.GIT_BEHIND)
        if self.untracked > 0:
            # Show number of untracked files:
            p += " " + paint(f"?{self.untracked}", SC.GIT_UNTRACKED)
        p += paint(")", paren) + " "
        return p


def repository_status(timeout: float = GIT_TIMEOUT) -> RepositoryStatus | None:
    """
    If the current directory is in a Git repository with a resolvable
    ``HEAD``, return a `RepositoryStatus` instance describing the repository's
    current state.

    If the current directory is not in a Git repository, or if Git is not
    installed, or if looking up the current branch fails or takes longer than
    ``timeout`` seconds, return `None`.  Failures of the later queries only
    zero out the corresponding fields.
    """
    branch = current_branch(timeout=timeout)
    if branch is None:
        return None
    tr = tracking(timeout=timeout)
    return RepositoryStatus(
        branch=branch,
        dirty=is_dirty(timeout=timeout),
        ahead=tr.ahead,
        behind=tr.behind,
        untracked=count_untracked(timeout=timeout),
    )


def current_branch(timeout: float = GIT_TIMEOUT) -> str | None:
    """
    Return the name of the currently checked-out branch, `DETACHED_HEAD` if
    no branch is checked out, or `None` if the current directory is not in a
    Git repository (or Git can't tell us)
    """
    head = git("rev-parse", "--abbrev-ref", "HEAD", timeout=timeout)
    if not head:
        return None
    elif head == "HEAD":
        return DETACHED_HEAD
    else:
        return head


def is_dirty(timeout: float = GIT_TIMEOUT) -> bool:
    """
    Return `True` iff the working tree has any staged, unstaged, or untracked
    changes.  If Git fails, the tree is reported as clean.
    """
    return bool(git("status", "--porcelain", timeout=timeout))


def tracking(timeout: float = GIT_TIMEOUT) -> Tracking:
    """
    Return how far ``HEAD`` is ahead of & behind its upstream, as reported by
    ``git status --branch``.  If there is no upstream or Git fails, both
    counts are 0.
    """
    out = git("status", "--porcelain", "--branch", timeout=timeout)
    if not out:
        return Tracking()
    return parse_branch_header(out.splitlines()[0])


def parse_branch_header(line: str) -> Tracking:
    """
    Parse the ``##`` header line from ``git status --porcelain --branch``.
    Headers that don't mention an upstream, or that don't match a known
    format, yield zero counts.

    >>> parse_branch_header("## main...origin/main [ahead 2, behind 5]")
    Tracking(ahead=2, behind=5)
    """
    m = re.fullmatch(
        r"""
        \#\#\s*(?:(?:Initial\ commit|No\ commits\ yet)\ on\ )?
        (?P<branch>(?:[^\s.]|\.(?!\.))+)
        (?:\.\.\.\S+
            (?:
                \s*\[
                    (?:ahead\s*(?P<ahead>\d+))?
                    (?:(?(ahead)[,\s]+)behind\s*(?P<behind>\d+))?
                \]
            )?
        )?\s*
        """,
        line,
        flags=re.X,
    )
    if m is None:
        log.debug("Unrecognized branch header: %r", line)
        return Tracking()
    return Tracking(
        ahead=int(m["ahead"] or 0),
        behind=int(m["behind"] or 0),
    )


def count_untracked(timeout: float = GIT_TIMEOUT) -> int:
    """
    Return the number of untracked files in the whole working tree that are
    not ignored.  If Git fails, return 0.
    """
    out = git("ls-files", "--others", "--exclude-standard", "--", ":/", timeout=timeout)
    return len(out.splitlines()) if out else 0


def is_protected(branch: str) -> bool:
    """Return `True` iff ``branch`` is one of `PROTECTED_BRANCHES`"""
    return branch in PROTECTED_BRANCHES


def git(*args: str, timeout: float = GIT_TIMEOUT) -> str | None:
    """
    Run a Git command (suppressing stderr) and return its stdout with leading &
    trailing whitespace stripped.  If the command fails, Git is not installed,
    or the command takes longer than ``timeout`` seconds, return `None`.
    """
    cmd = " ".join(["git", *args])
    try:
        return subprocess.run(
            ["git", *args],
            check=True,
            encoding="utf-8",
            errors="replace",
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            timeout=timeout,
        ).stdout.strip()
    except subprocess.CalledProcessError as e:
        log.debug("`%s` exited with return code %d", cmd, e.returncode)
        return None
    except subprocess.TimeoutExpired:
        log.debug("`%s` timed out after %s seconds", cmd, timeout)
        return None
    except OSError as e:
        # Most likely Git is not installed
        log.debug("Could not run `%s`: %s", cmd, e)
        return None

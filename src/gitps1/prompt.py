from __future__ import annotations
from .git import GIT_TIMEOUT, repository_status
from .styles import Painter


def compose(paint: Painter, timeout: float = GIT_TIMEOUT) -> str:
    """
    Construct & return the Git segment of the prompt for the repository
    containing the current directory, e.g. ``" (main ↑1 ?2) "`` with colors
    applied by ``paint``.  If the current directory is not in a Git
    repository, or if Git is unavailable, return the empty string.
    """
    if (status := repository_status(timeout=timeout)) is not None:
        return status.display(paint)
    else:
        return ""

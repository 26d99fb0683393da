r"""
Colorized Git status for your shell prompt

``gitps1`` prints a short, colorized summary of the current Git repository for
splicing into a Bash or zsh ``PS1``: the current branch, commits ahead of &
behind the upstream, and the number of untracked files.  The branch is shown
in red on ``master``, ``main``, ``trunk``, ``root``, ``prod``, and
``production`` and in green everywhere else, and it gets a background color
when the working tree has uncommitted changes.

Usage with Bash (the segment is stored in a variable that PS1 refers to, so
that Bash never expands text taken from a branch name):

.. code:: shell

    PROMPT_COMMAND="${PROMPT_COMMAND:+$PROMPT_COMMAND; }"'_gitps1=$(gitps1 "${PS1_GIT:-}")'
    PS1='\u@\h:\w${_gitps1}\$ '

Usage with zsh (with the ``PROMPT_SUBST`` option off, as it is by default):

.. code:: shell

    precmd_gitps1() { PS1="%n@%m:%~$(gitps1 --zsh "${PS1_GIT:-}")%# " }
    precmd_functions+=( precmd_gitps1 )

If Git is slow or misbehaving, run ``PS1_GIT=off`` to turn the segment off.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from __future__ import annotations
import argparse
import logging
from . import __version__
from .git import GIT_TIMEOUT
from .prompt import compose
from .styles import THEMES, ANSIStyler, BashStyler, Painter, ZshStyler


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Print a colorized Git status segment for a shell prompt"
    )
    parser.add_argument(
        "--ansi",
        action="store_const",
        dest="stylecls",
        const=ANSIStyler,
        help="Format segment for direct display",
    )
    parser.add_argument(
        "--bash",
        action="store_const",
        dest="stylecls",
        const=BashStyler,
        help="Format segment for a variable used in Bash's PS1 (default)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log failed Git commands to stderr",
    )
    parser.add_argument(
        "--git-timeout",
        type=float,
        metavar="SECONDS",
        default=GIT_TIMEOUT,
        help=(
            "Give up on Git if any single command runs longer than this"
            f"  [default: {GIT_TIMEOUT}]"
        ),
    )
    parser.add_argument(
        "-T",
        "--theme",
        choices=list(THEMES.keys()),
        default="dark",
        help="Select the color theme to use  [default: dark]",
    )
    parser.add_argument(
        "--zsh",
        action="store_const",
        dest="stylecls",
        const=ZshStyler,
        help="Format segment for zsh's PS1",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "git_flag", nargs="?", help='Set to "off" to disable Git integration'
    )
    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(
            format="[%(levelname)-8s] %(name)s: %(message)s",
            level=logging.DEBUG,
        )
    if args.git_flag == "off":
        s = ""
    else:
        styler = (args.stylecls or BashStyler)()
        paint = Painter(styler=styler, theme=THEMES[args.theme])
        s = compose(paint, timeout=args.git_timeout)
    print(s)


if __name__ == "__main__":
    main()

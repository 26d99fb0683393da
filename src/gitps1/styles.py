from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Color(Enum):
    """
    An enumeration of the supported colors.  Each color's value equals its
    xterm number.
    """

    RED = 1
    GREEN = 2
    YELLOW = 3
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    LIGHT_RED = 9
    LIGHT_GREEN = 10
    LIGHT_YELLOW = 11
    LIGHT_MAGENTA = 13
    LIGHT_CYAN = 14
    LIGHT_WHITE = 15

    def asfg(self) -> int:
        """
        Return the ANSI SGR parameter for setting the color as the foreground
        color
        """
        c = self.value
        return c + 30 if c < 8 else c + 82

    def asbg(self) -> int:
        """
        Return the ANSI SGR parameter for setting the color as the background
        color
        """
        c = self.value
        return c + 40 if c < 8 else c + 92


@dataclass
class Style:
    color: Color | None = None
    background: Color | None = None
    bold: bool = False

    def as_params(self) -> list[str]:
        params = []
        if self.color is not None:
            params.append(str(self.color.asfg()))
        if self.background is not None:
            params.append(str(self.background.asbg()))
        if self.bold:
            params.append("1")
        return params


class Styler(Protocol):
    def __call__(self, s: str, style: Style) -> str: ...


class BashStyler:
    """
    Class for styling strings for use in a variable that Bash's PS1 refers
    to, e.g. ``PS1='\\w${_gitps1}\\$ '``
    """

    def __call__(self, s: str, style: Style) -> str:
        """
        Stylize the string ``s`` with ANSI escape sequences, resetting all
        attributes before & after the styled text.  Each escape sequence is
        wrapped in readline's ``\\x01 ... \\x02`` markers so that Bash does not
        count it towards the width of the prompt.  (Bash's ``\\[ ... \\]``
        can't be used here, as those are only decoded in PS1 itself, not in
        the values of variables it expands.)

        :param str s: the string to stylize
        :param Style style: the colors & weight to stylize the string with
        """
        if params := style.as_params():
            s = f"\x01\x1B[0;{';'.join(params)}m\x02{s}\x01\x1B[m\x02"
        return s


class ANSIStyler:
    """Class for styling strings for display immediately in the terminal"""

    def __call__(self, s: str, style: Style) -> str:
        """
        Stylize the string ``s`` with ANSI escape sequences, resetting all
        attributes before & after the styled text.

        :param str s: the string to stylize
        :param Style style: the colors & weight to stylize the string with
        """
        if params := style.as_params():
            s = f"\x1B[0;{';'.join(params)}m{s}\x1B[m"
        return s


class ZshStyler:
    """Class for escaping & styling strings for use in zsh's PS1 variable"""

    def __call__(self, s: str, style: Style) -> str:
        """
        Return the string ``s`` escaped for use in a zsh PS1 variable and
        wrapped in zsh's prompt escapes for the given style.  Each attribute
        is turned off again by its matching closing escape.

        :param str s: the string to stylize
        :param Style style: the colors & weight to stylize the string with
        """
        s = self.escape(s)
        if style.bold:
            s = f"%B{s}%b"
        if style.background is not None:
            s = f"%K{{{style.background.value}}}{s}%k"
        if style.color is not None:
            s = f"%F{{{style.color.value}}}{s}%f"
        return s

    def escape(self, s: str) -> str:
        return s.replace("%", "%%")


StyleClass = Enum(
    "StyleClass",
    [
        "GIT_PAREN",
        "GIT_PAREN_PROTECTED",
        "GIT_BRANCH",
        "GIT_BRANCH_PROTECTED",
        "GIT_DIRTY",
        "GIT_DIRTY_PROTECTED",
        "GIT_AHEAD",
        "GIT_BEHIND",
        "GIT_UNTRACKED",
    ],
)

Theme = dict[StyleClass, Style]

DARK_THEME = {
    StyleClass.GIT_PAREN: Style(Color.GREEN),
    StyleClass.GIT_PAREN_PROTECTED: Style(Color.RED),
    StyleClass.GIT_BRANCH: Style(Color.LIGHT_GREEN),
    StyleClass.GIT_BRANCH_PROTECTED: Style(Color.LIGHT_RED),
    StyleClass.GIT_DIRTY: Style(Color.LIGHT_WHITE, background=Color.GREEN),
    StyleClass.GIT_DIRTY_PROTECTED: Style(Color.LIGHT_WHITE, background=Color.RED),
    StyleClass.GIT_AHEAD: Style(Color.LIGHT_CYAN),
    StyleClass.GIT_BEHIND: Style(Color.LIGHT_MAGENTA),
    StyleClass.GIT_UNTRACKED: Style(Color.LIGHT_YELLOW),
}

LIGHT_THEME = DARK_THEME | {
    StyleClass.GIT_BRANCH: Style(Color.GREEN, bold=True),
    StyleClass.GIT_BRANCH_PROTECTED: Style(Color.RED, bold=True),
    StyleClass.GIT_AHEAD: Style(Color.CYAN),
    StyleClass.GIT_BEHIND: Style(Color.MAGENTA),
    StyleClass.GIT_UNTRACKED: Style(Color.YELLOW),
}

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}


@dataclass
class Painter:
    styler: Styler
    theme: Theme

    def __call__(self, s: str, klass: StyleClass) -> str:
        return self.styler(s, self.theme[klass])

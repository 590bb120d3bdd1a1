"""
Small text helpers shared by the parsers.
"""

from __future__ import annotations

import html
import re

from bs4 import BeautifulSoup, Tag


# Inline line break as rendered by any HTML serializer: <br>, <br/>, <br />
LINE_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)

_PAREN_RE = re.compile(r"\(([^()]*)\)")


def element_text(el: Tag) -> str:
    """
    Visible text of an element with whitespace runs collapsed to one space.
    """
    return " ".join(el.get_text(" ").split())


def split_lines(markup: str) -> list[str]:
    """
    Split inner markup on line break tags and trim every line.
    """
    return [line.strip() for line in LINE_BREAK_RE.split(markup)]


def remove_html_tags(fragment: str) -> str:
    # fragments come from splitting markup, so tags may be unbalanced
    return BeautifulSoup(fragment, "html.parser").get_text()


def unescape_trim(text: str) -> str:
    """
    Resolve HTML character references and trim.
    """
    return html.unescape(text).strip()


def shrink_content_in_parentheses(text: str) -> str:
    """
    Condense text inside parentheses: whitespace runs collapse to one space,
    whitespace right after "(" or right before ")" is dropped.

        "( CS 18000   or CS 18200 )" -> "(CS 18000 or CS 18200)"
    """

    def _shrink(m: re.Match) -> str:
        # placeholders hide the processed group from the next pass
        return "\x00" + " ".join(m.group(1).split()) + "\x01"

    # innermost groups first, so nested parentheses get condensed too
    previous = None
    out = text
    while previous != out:
        previous = out
        out = _PAREN_RE.sub(_shrink, out)
    return out.replace("\x00", "(").replace("\x01", ")")

"""
Requirement text classifier.

The lower half of the detail cell is a flat list of lines separated by <br>
tags. Some lines are labels ("Prerequisites:", "Restrictions:", ...), the
lines after a label belong to that category until the next label shows up.
Before the first label the lines hold single-value fields (term, levels,
campus, ...), which the caller handles through `labeled_field`.

The classifier is a small state machine:

    NONE --"Restrictions:"--> RESTRICTIONS --"Prerequisites:"--> PREREQUISITES ...

`transition` is a pure function (state, line) -> (next state, emission) and
`classify_lines` drives it over the lines and collects the emitted fragments.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Iterable, List, NamedTuple, Optional, Set, Tuple

from schedule_detail.model import RequirementCategory
from schedule_detail.textutil import remove_html_tags, shrink_content_in_parentheses

logger = logging.getLogger(__name__)


class RequirementState(Enum):
    NONE = None
    PREREQUISITES = RequirementCategory.PREREQUISITES
    RESTRICTIONS = RequirementCategory.RESTRICTIONS
    GENERAL_REQUIREMENTS = RequirementCategory.GENERAL_REQUIREMENTS
    COREQUISITES = RequirementCategory.COREQUISITES

    @property
    def category(self) -> Optional[RequirementCategory]:
        return self.value


# Checked in this order, the first label found in a line wins.
SECTION_LABELS: Tuple[Tuple[str, RequirementState], ...] = (
    ("Restrictions:", RequirementState.RESTRICTIONS),
    ("Prerequisites:", RequirementState.PREREQUISITES),
    ("General Requirements:", RequirementState.GENERAL_REQUIREMENTS),
    ("Corequisites:", RequirementState.COREQUISITES),
)


class Emission(NamedTuple):
    """
    Output of one transition while inside a category.

    text is None when the line was seen inside the category but carries the
    label of another one; the category still counts as present.
    """

    category: RequirementCategory
    text: Optional[str]


def clean_fragment(line: str) -> str:
    # &nbsp; padding shows up escaped or already decoded depending on the serializer,
    # either way it becomes a plain space; get_text resolves the other references
    return remove_html_tags(line.replace("&nbsp;", " ")).replace("\xa0", " ").strip()


def _mentions_other_label(state: RequirementState, line: str) -> bool:
    return any(label in line for label, target in SECTION_LABELS if target is not state)


def transition(state: RequirementState, line: str) -> Tuple[RequirementState, Optional[Emission]]:
    """
    Classify one trimmed line.

    Returns the state for the next line and what this line contributes to
    the current category (None while no category is open).
    """
    emission: Optional[Emission] = None
    category = state.category
    if category is not None:
        if _mentions_other_label(state, line):
            emission = Emission(category, None)
        else:
            emission = Emission(category, clean_fragment(line))

    next_state = state
    for label, target in SECTION_LABELS:
        if label in line:
            next_state = target
            break

    return next_state, emission


class RequirementAccumulator:
    """
    Fragments per category, joined once when the result is requested.
    """

    def __init__(self) -> None:
        self._fragments: Dict[RequirementCategory, List[str]] = {c: [] for c in RequirementCategory}
        self._touched: Set[RequirementCategory] = set()

    def feed(self, emission: Emission) -> None:
        self._touched.add(emission.category)
        if emission.text is not None:
            self._fragments[emission.category].append(emission.text)

    def is_touched(self, category: RequirementCategory) -> bool:
        return category in self._touched

    def raw_text(self, category: RequirementCategory) -> Optional[str]:
        if category not in self._touched:
            return None
        return " ".join(" ".join(self._fragments[category]).split())

    def results(self) -> Dict[RequirementCategory, str]:
        """
        Final text for every touched category. Fragments are already decoded
        by clean_fragment; general requirements get their parentheses condensed.
        """
        out: Dict[RequirementCategory, str] = {}
        for category in RequirementCategory:
            raw = self.raw_text(category)
            if raw is None:
                continue
            text = raw
            if category is RequirementCategory.GENERAL_REQUIREMENTS:
                text = shrink_content_in_parentheses(text)
            out[category] = text
        return out


def classify_lines(
    lines: Iterable[str],
    labeled_field: Optional[Callable[[str], bool]] = None,
) -> Dict[RequirementCategory, str]:
    """
    Run the classifier over trimmed lines.

    labeled_field is offered every line seen before the first section label;
    when it returns True the line is consumed and not classified further.
    """
    state = RequirementState.NONE
    acc = RequirementAccumulator()

    for line in lines:
        if state is RequirementState.NONE and labeled_field is not None and labeled_field(line):
            continue

        next_state, emission = transition(state, line)
        if emission is not None:
            acc.feed(emission)
        if next_state is not state:
            logger.debug("Requirement section %s -> %s", state.name, next_state.name)
        state = next_state

    return acc.results()

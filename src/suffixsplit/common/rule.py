from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from suffixsplit.common.defaults import EXCEPTION_MARKER, LABEL_SEPARATOR, WILDCARD_LABEL

Labels = Tuple[str, ...]


class RuleKind(Enum):
    NORMAL = "normal"
    WILDCARD = "wildcard"
    EXCEPTION = "exception"


def _split_value(value: str) -> Labels:
    # root-first: "co.uk" -> ("uk", "co")
    if not value:
        return ()
    return tuple(reversed(value.split(LABEL_SEPARATOR)))


@dataclass(frozen=True)
class Rule:
    """
    One entry of the Public Suffix List.

    ``value`` is the rule text without its ``*.`` or ``!`` marker, so
    ``*.kawasaki.jp`` has value ``kawasaki.jp`` and ``!city.kawasaki.jp``
    has value ``city.kawasaki.jp``. Two rules are equal when kind and value
    are equal; the private flag is metadata.

    All label sequences handled here are root-first: ``www.example.co.uk``
    is ``("uk", "co", "example", "www")``.
    """

    kind: RuleKind
    value: str
    private: bool = field(default=False, compare=False)

    @classmethod
    def from_text(cls, text: str, private: bool = False) -> Rule:
        text = text.strip()
        if text.startswith(WILDCARD_LABEL):
            # "*" alone is the default rule, "*.uk" has value "uk"
            return cls(RuleKind.WILDCARD, text[2:], private)
        if text.startswith(EXCEPTION_MARKER):
            return cls(RuleKind.EXCEPTION, text[1:], private)
        return cls(RuleKind.NORMAL, text, private)

    @property
    def text(self) -> str:
        if self.kind is RuleKind.WILDCARD:
            return WILDCARD_LABEL + LABEL_SEPARATOR + self.value if self.value else WILDCARD_LABEL
        if self.kind is RuleKind.EXCEPTION:
            return EXCEPTION_MARKER + self.value
        return self.value

    @property
    def parts(self) -> Labels:
        return _split_value(self.value)

    @property
    def labels(self) -> Labels:
        """Labels that make up the public suffix once this rule prevails."""
        parts = self.parts
        if self.kind is RuleKind.EXCEPTION:
            # the leftmost label of an exception is handed back to the registrant
            return parts[:-1]
        return parts

    @property
    def path(self) -> Labels:
        if self.kind is RuleKind.WILDCARD:
            return self.parts + (WILDCARD_LABEL,)
        return self.parts

    @property
    def length(self) -> int:
        if self.kind is RuleKind.WILDCARD:
            return len(self.parts) + 1
        return len(self.labels)

    def match(self, labels: Sequence[str]) -> bool:
        parts = self.parts
        n = len(parts)
        if self.kind is RuleKind.WILDCARD:
            if len(labels) <= n:
                return False
        elif len(labels) < n:
            return False
        return tuple(labels[:n]) == parts

    def decompose(self, labels: Sequence[str]) -> Tuple[List[str], Optional[str]]:
        """
        Split root-first ``labels`` into the labels left of the public
        suffix (leaf-first) and the suffix itself as a dotted string.

        The suffix is None when the rule leaves nothing to report, which
        only happens for an exception declared on a single label.
        """
        n = self.length
        if n == 0 or len(labels) < n:
            return list(reversed(labels)), None
        suffix = LABEL_SEPARATOR.join(reversed(labels[:n]))
        remainder = list(reversed(labels[n:]))
        return remainder, suffix

    def allow(self, labels: Sequence[str]) -> bool:
        remainder, suffix = self.decompose(labels)
        return suffix is not None and bool(remainder)

    def __str__(self) -> str:
        return self.text


DEFAULT_RULE = Rule(RuleKind.WILDCARD, "")

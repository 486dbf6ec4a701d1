from __future__ import annotations

from typing import Tuple

import regex as re

from suffixsplit.common.defaults import LABEL_SEPARATOR
from suffixsplit.common.errors import DomainInvalid

_SCHEME_MARKER = "://"

_WHITESPACE_RE = re.compile(r"\s")


def normalize_name(name) -> str:
    """
    Bring a hostname into the form the matching engine expects.

    Surrounding whitespace and a single trailing dot are dropped and the
    result is lowercased. Anything that still cannot be split into clean
    labels raises DomainInvalid. Normalizing an already normalized name
    returns it unchanged.
    """
    if name is None:
        raise DomainInvalid(name)

    h = str(name).strip().lower()
    if not h:
        raise DomainInvalid(name)
    if _SCHEME_MARKER in h:
        raise DomainInvalid(name)
    if h.startswith(LABEL_SEPARATOR):
        raise DomainInvalid(name)

    if h.endswith(LABEL_SEPARATOR):
        h = h[:-1]

    for label in h.split(LABEL_SEPARATOR):
        if not label:
            raise DomainInvalid(name, "contains an empty label")
        if _WHITESPACE_RE.search(label):
            raise DomainInvalid(name, "contains whitespace")

    return h


def name_to_labels(name: str) -> Tuple[str, ...]:
    """Split a normalized name root-first: "www.google.com" -> ("com", "google", "www")."""
    return tuple(reversed(name.split(LABEL_SEPARATOR)))


def labels_to_name(labels) -> str:
    return LABEL_SEPARATOR.join(reversed(labels))

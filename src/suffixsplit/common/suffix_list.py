from __future__ import annotations

import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from suffixsplit.common.config import get_default_list_path
from suffixsplit.common.defaults import (
    COMMENT_TOKEN,
    PRIVATE_DOMAINS_MARKER,
    RESOURCE_PACKAGE,
    RESOURCE_PSL,
)
from suffixsplit.common.errors import DomainInvalid, ListLoadError
from suffixsplit.common.normalize import name_to_labels, normalize_name
from suffixsplit.common.rule import DEFAULT_RULE, Rule
from suffixsplit.common.rule_index import RuleIndex

logger = logging.getLogger(__name__)

_UNSET = object()


class SuffixList:
    """
    A set of suffix rules compiled into a RuleIndex.

    Lookups only read ``self._index``. ``add`` and ``clear`` build a fresh
    index and swap the reference, so a lookup already holding the previous
    index finishes against a consistent snapshot.
    """

    __slots__ = ("_rules", "_index")

    def __init__(self, rules: Iterable[Rule] = ()):
        self._rules: Tuple[Rule, ...] = tuple(rules)
        self._index = RuleIndex.build(self._rules)

    # -------------------------
    # Construction
    # -------------------------

    @classmethod
    def parse(cls, text: str, private_domains: bool = True) -> SuffixList:
        """
        Parse Public Suffix List text.

        Blank lines and ``//`` comments are skipped. Rules after the
        ``===BEGIN PRIVATE DOMAINS===`` marker are flagged private, or not
        read at all when ``private_domains`` is False. Only the first
        whitespace-delimited token of a rule line is used.
        """
        rules: List[Rule] = []
        private = False

        for raw in text.splitlines():
            line = raw.strip()
            if not line:
                continue
            if line.startswith(COMMENT_TOKEN):
                if PRIVATE_DOMAINS_MARKER in line:
                    if not private_domains:
                        break
                    private = True
                continue
            rules.append(Rule.from_text(line.split()[0], private=private))

        logger.debug(
            "Parsed %d rules (%d private)",
            len(rules), sum(1 for r in rules if r.private),
        )
        return cls(rules)

    @classmethod
    def load(cls, path: Union[str, Path], private_domains: bool = True) -> SuffixList:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ListLoadError(f"cannot read suffix list {path}: {exc}") from exc
        logger.info("Loading suffix list from %s", path)
        return cls.parse(text, private_domains=private_domains)

    @classmethod
    def load_default(cls) -> SuffixList:
        path = get_default_list_path()
        if path is not None:
            return cls.load(path)
        logger.info("Loading bundled suffix list %s", RESOURCE_PSL)
        text = resources.files(RESOURCE_PACKAGE).joinpath(RESOURCE_PSL).read_text(encoding="utf-8")
        return cls.parse(text)

    # -------------------------
    # Collection protocol
    # -------------------------

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    @property
    def index(self) -> RuleIndex:
        return self._index

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __contains__(self, rule: object) -> bool:
        return isinstance(rule, Rule) and self._index.contains(rule)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SuffixList):
            return NotImplemented
        return self is other or self._rules == other._rules

    __hash__ = None

    def __repr__(self) -> str:
        return f"<SuffixList rules={len(self._rules)}>"

    def add(self, rule: Rule) -> SuffixList:
        rules = self._rules + (rule,)
        index = RuleIndex.build(rules)
        self._rules, self._index = rules, index
        return self

    def clear(self) -> SuffixList:
        self._rules, self._index = (), RuleIndex.build(())
        return self

    # -------------------------
    # Lookup
    # -------------------------

    def find(self, name: str, ignore_private: bool = False, default: Optional[Rule] = _UNSET) -> Optional[Rule]:
        """
        Return the prevailing rule for ``name``.

        When no rule covers the name the ``*`` rule is returned, so the
        lookup is total. Pass ``default=None`` to get None instead.
        """
        if default is _UNSET:
            default = DEFAULT_RULE
        rule = self._index.longest_prefix(name_to_labels(name), ignore_private)
        return rule if rule is not None else default

    def select(self, name: str, ignore_private: bool = False) -> List[Rule]:
        labels = name_to_labels(name)
        return [
            r for r in self._rules
            if r.match(labels) and not (ignore_private and r.private)
        ]

    # -------------------------
    # Splitting, never raises
    # -------------------------

    def split_host(self, host: str, ignore_private: bool = False) -> Tuple[str, str, str]:
        """
        Return ``(subdomain, registrable, suffix)`` with "" for missing parts.

        Input is normalized first; names that cannot be normalized yield
        three empty strings.
        """
        try:
            h = normalize_name(host)
        except DomainInvalid:
            return ("", "", "")

        labels = name_to_labels(h)
        rule = self._index.longest_prefix(labels, ignore_private) or DEFAULT_RULE
        remainder, suffix = rule.decompose(labels)

        if suffix is None:
            return ("", "", "")
        if not remainder:
            return ("", "", suffix)

        registrable = remainder[-1] + "." + suffix
        return (".".join(remainder[:-1]), registrable, suffix)

    def split_host_batch(
            self, hosts: Iterable[str], ignore_private: bool = False
    ) -> Tuple[List[str], List[str], List[str]]:
        subdomains: List[str] = []
        registrables: List[str] = []
        suffixes: List[str] = []

        sd_append = subdomains.append
        reg_append = registrables.append
        suf_append = suffixes.append

        split = self.split_host  # bind once

        for host in hosts:
            sub, registrable, suffix = split(host, ignore_private)
            sd_append(sub)
            reg_append(registrable)
            suf_append(suffix)

        return subdomains, registrables, suffixes


@lru_cache(maxsize=1)
def get_default_suffix_list() -> SuffixList:
    return SuffixList.load_default()


def clear_default_suffix_list() -> None:
    # Callers still holding the old instance keep using it untouched
    get_default_suffix_list.cache_clear()


def reload_default_suffix_list() -> SuffixList:
    clear_default_suffix_list()
    return get_default_suffix_list()

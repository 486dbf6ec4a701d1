from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from suffixsplit.common.domain import Domain, decompose
from suffixsplit.common.errors import DomainInvalid, DomainNotAllowed
from suffixsplit.common.normalize import name_to_labels, normalize_name
from suffixsplit.common.rule import DEFAULT_RULE, Rule
from suffixsplit.common.suffix_list import SuffixList, get_default_suffix_list

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolver:
    """
    Resolves hostnames against one SuffixList.

    With ``suffix_list=None`` the process-wide default list is fetched on
    every call, so a reload of the default is picked up by the next lookup
    while lookups in flight finish on the list they started with.
    """

    suffix_list: Optional[SuffixList] = None
    ignore_private: bool = False
    strict: bool = False

    @property
    def rules(self) -> SuffixList:
        return self.suffix_list if self.suffix_list is not None else get_default_suffix_list()

    def find(self, name) -> Tuple[str, Rule]:
        h = normalize_name(name)
        rule = self.rules.find(h, self.ignore_private, default=None)
        if rule is None:
            if self.strict:
                raise DomainInvalid(name)
            rule = DEFAULT_RULE
        return h, rule

    def resolve(self, name) -> Domain:
        """
        Split ``name`` into trd/sld/tld.

        :raises DomainInvalid: the name is malformed, or in strict mode no
            rule of the list covers it.
        :raises DomainNotAllowed: the matched rule leaves no registrable
            label, e.g. the name is itself a public suffix.
        """
        return self.resolve_rule(name)[0]

    def resolve_rule(self, name) -> Tuple[Domain, Rule]:
        """Like ``resolve``, also returning the rule that prevailed."""
        h, rule = self.find(name)
        labels = name_to_labels(h)
        if not rule.allow(labels):
            raise DomainNotAllowed(name)
        return decompose(rule, labels), rule

    def valid(self, name) -> bool:
        """
        True when ``name`` resolves through a rule actually listed.

        Lookups here are always strict. A name whose suffix no rule covers,
        such as ``example.tldnotlisted``, is not valid even though
        ``resolve`` would split it under the default ``*`` rule.
        """
        try:
            Resolver(self.suffix_list, self.ignore_private, strict=True).resolve(name)
        except DomainInvalid as exc:
            logger.debug("Rejected %r: %s", name, exc)
            return False
        return True

    def domain(self, name) -> Optional[str]:
        try:
            return self.resolve(name).domain
        except DomainInvalid:
            return None

    def split_host(self, host: str) -> Tuple[str, str, str]:
        return self.rules.split_host(host, self.ignore_private)

    def split_host_batch(self, hosts: Iterable[str]) -> Tuple[List[str], List[str], List[str]]:
        return self.rules.split_host_batch(hosts, self.ignore_private)


def parse_list(text: str, private_domains: bool = True) -> SuffixList:
    return SuffixList.parse(text, private_domains=private_domains)


def resolve(name, suffix_list: Optional[SuffixList] = None, ignore_private: bool = False,
            strict: bool = False) -> Domain:
    return Resolver(suffix_list, ignore_private, strict).resolve(name)


def valid(name, suffix_list: Optional[SuffixList] = None, ignore_private: bool = False) -> bool:
    return Resolver(suffix_list, ignore_private).valid(name)


def domain(name, suffix_list: Optional[SuffixList] = None, ignore_private: bool = False) -> Optional[str]:
    return Resolver(suffix_list, ignore_private).domain(name)


def split_host(host: str, suffix_list: Optional[SuffixList] = None,
               ignore_private: bool = False) -> Tuple[str, str, str]:
    return Resolver(suffix_list, ignore_private).split_host(host)

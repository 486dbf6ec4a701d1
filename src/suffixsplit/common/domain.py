from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from suffixsplit.common.defaults import LABEL_SEPARATOR
from suffixsplit.common.rule import Rule

if TYPE_CHECKING:
    from suffixsplit.common.suffix_list import SuffixList


@dataclass(frozen=True)
class Domain:
    """
    A hostname split around its public suffix.

    ``tld`` is the public suffix, ``sld`` the single registrable label to its
    left and ``trd`` whatever remains further left:

        www.example.co.uk -> trd="www", sld="example", tld="co.uk"

    A Domain carries no reference to the list that produced it; ``is_valid``
    looks the name up again.
    """

    tld: Optional[str]
    sld: Optional[str] = None
    trd: Optional[str] = None

    @property
    def name(self) -> str:
        return LABEL_SEPARATOR.join(p for p in (self.trd, self.sld, self.tld) if p)

    @property
    def domain(self) -> Optional[str]:
        """The registrable domain (``sld.tld``), None when there is none."""
        if self.is_domain():
            return f"{self.sld}{LABEL_SEPARATOR}{self.tld}"
        return None

    @property
    def subdomain(self) -> Optional[str]:
        if self.is_subdomain():
            return self.name
        return None

    def to_tuple(self) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        return (self.trd, self.sld, self.tld)

    def is_domain(self) -> bool:
        return self.tld is not None and self.sld is not None

    def is_subdomain(self) -> bool:
        return self.is_domain() and self.trd is not None

    def is_a_domain(self) -> bool:
        """A registrable domain with no subdomain part."""
        return self.is_domain() and not self.is_subdomain()

    def is_a_subdomain(self) -> bool:
        return self.is_subdomain()

    def rule(self, suffix_list: Optional[SuffixList] = None, ignore_private: bool = False) -> Optional[Rule]:
        """The listed rule prevailing for ``name``, None when no rule covers it."""
        from suffixsplit.common.errors import DomainInvalid
        from suffixsplit.core.resolver import Resolver

        try:
            return Resolver(suffix_list, ignore_private=ignore_private, strict=True).find(self.name)[1]
        except DomainInvalid:
            return None

    def is_valid(self, suffix_list: Optional[SuffixList] = None, ignore_private: bool = False) -> bool:
        from suffixsplit.core.resolver import Resolver

        return Resolver(suffix_list, ignore_private=ignore_private).valid(self.name)

    def is_valid_domain(self, suffix_list: Optional[SuffixList] = None, ignore_private: bool = False) -> bool:
        return self.is_domain() and self.is_valid(suffix_list, ignore_private)

    def is_valid_subdomain(self, suffix_list: Optional[SuffixList] = None, ignore_private: bool = False) -> bool:
        return self.is_subdomain() and self.is_valid(suffix_list, ignore_private)

    def __str__(self) -> str:
        return self.name


def decompose(rule: Rule, labels: Sequence[str]) -> Domain:
    # 0 labels left: suffix only; 1: registrable label; 2+: the rest is subdomain
    remainder, suffix = rule.decompose(labels)
    sld = remainder.pop() if remainder else None
    trd = LABEL_SEPARATOR.join(remainder) if remainder else None
    return Domain(suffix, sld, trd)

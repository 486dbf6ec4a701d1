from suffixsplit.common.domain import Domain
from suffixsplit.common.errors import (
    DomainInvalid,
    DomainNotAllowed,
    DuplicateRuleError,
    ListLoadError,
    SuffixSplitError,
)
from suffixsplit.common.rule import DEFAULT_RULE, Rule, RuleKind
from suffixsplit.common.suffix_list import (
    SuffixList,
    clear_default_suffix_list,
    get_default_suffix_list,
    reload_default_suffix_list,
)
from suffixsplit.core.resolver import Resolver, domain, parse_list, resolve, split_host, valid

__version__ = "1.0.0"

__all__ = [
    'DEFAULT_RULE',
    'Domain',
    'DomainInvalid',
    'DomainNotAllowed',
    'DuplicateRuleError',
    'ListLoadError',
    'Resolver',
    'Rule',
    'RuleKind',
    'SuffixList',
    'SuffixSplitError',
    'clear_default_suffix_list',
    'domain',
    'get_default_suffix_list',
    'parse_list',
    'reload_default_suffix_list',
    'resolve',
    'split_host',
    'valid',
]

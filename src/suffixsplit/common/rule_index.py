from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from suffixsplit.common.defaults import WILDCARD_LABEL
from suffixsplit.common.errors import DuplicateRuleError
from suffixsplit.common.rule import Rule, RuleKind

# Build-time schema
RawNode = Dict[str, Any]

# Fast runtime schema: (children, terminal rule, index of the "*" child or None)
Node = Tuple[Dict[str, int], Optional[Rule], Optional[int]]


class RuleIndex:
    """
    Label trie over root-first rule paths.

    Rules are inserted into a dict-based node list and converted once into a
    compact tuple-based runtime representation. After construction nothing
    is mutated, so one index can be shared by any number of readers.
    """

    __slots__ = ("nodes", "_size")

    def __init__(self, raw_nodes: List[RawNode]):
        # Convert build schema -> faster runtime schema
        self.nodes: List[Node] = [
            (n["c"], n["r"], n["c"].get(WILDCARD_LABEL))
            for n in raw_nodes
        ]
        self._size = sum(1 for n in raw_nodes if n["r"] is not None)

    @classmethod
    def build(cls, rules: Iterable[Rule]) -> RuleIndex:
        raw_nodes: List[RawNode] = [{"c": {}, "r": None}]
        for rule in rules:
            cur = 0
            for label in rule.path:
                children = raw_nodes[cur]["c"]
                nxt = children.get(label)
                if nxt is None:
                    nxt = len(raw_nodes)
                    children[label] = nxt
                    raw_nodes.append({"c": {}, "r": None})
                cur = nxt
            existing = raw_nodes[cur]["r"]
            if existing is not None:
                raise DuplicateRuleError(existing, rule)
            raw_nodes[cur]["r"] = rule
        return cls(raw_nodes)

    def __len__(self) -> int:
        return self._size

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    def _node_for(self, path: Sequence[str]) -> Optional[int]:
        cur = 0
        nodes = self.nodes
        for label in path:
            nxt = nodes[cur][0].get(label)
            if nxt is None:
                return None
            cur = nxt
        return cur

    def get(self, path: Sequence[str]) -> Optional[Rule]:
        cur = self._node_for(path)
        if cur is None:
            return None
        return self.nodes[cur][1]

    def contains(self, rule: Rule) -> bool:
        return self.get(rule.path) == rule

    def longest_prefix(self, labels: Sequence[str], ignore_private: bool = False) -> Optional[Rule]:
        """
        Return the prevailing rule for root-first ``labels``, or None.

        The walk follows the exact label at each depth and also probes the
        wildcard child, which covers exactly one more label. The deepest
        terminal seen wins, except that an exception terminal ends the walk
        and wins outright. Private terminals are skipped at every depth when
        ``ignore_private`` is set.
        """
        nodes = self.nodes
        cur = 0
        best: Optional[Rule] = None

        for label in labels:
            children, _, star = nodes[cur]

            if star is not None:
                rule = nodes[star][1]
                if rule is not None and not (ignore_private and rule.private):
                    best = rule

            nxt = children.get(label)
            if nxt is None:
                break
            cur = nxt

            rule = nodes[cur][1]
            if rule is None or (ignore_private and rule.private):
                continue
            if rule.kind is RuleKind.EXCEPTION:
                return rule
            best = rule

        return best

class SuffixSplitError(Exception):
    pass


class DomainInvalid(SuffixSplitError):
    """
    Raised when a name cannot be resolved at all.

    The name is blank, begins with a dot, carries a URI scheme or an empty
    label, or (in strict mode) no rule of the list covers it.
    """

    def __init__(self, name, reason: str = "is not a valid domain"):
        self.name = name
        super().__init__(f"{name!r} {reason}")


class DomainNotAllowed(DomainInvalid):
    """
    Raised when a rule matches the name but leaves no registrable label
    beneath the public suffix, e.g. ``example.ck`` under ``*.ck``.
    """

    def __init__(self, name):
        super().__init__(name, "is not allowed according to Registry policy")


class DuplicateRuleError(SuffixSplitError):
    def __init__(self, existing, rule):
        self.existing = existing
        self.rule = rule
        super().__init__(f"rule {rule.text!r} collides with {existing.text!r}")


class ListLoadError(SuffixSplitError):
    pass

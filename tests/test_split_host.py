from __future__ import annotations

import random
import string
import time
from dataclasses import dataclass
from statistics import median

import pytest

from suffixsplit.common.suffix_list import get_default_suffix_list


def gen_hosts(n: int, seed: int = 1337) -> list[str]:
    rnd = random.Random(seed)
    suffixes = [
        "com", "net", "org", "edu", "io",
        "co.uk", "org.uk",
        "com.au", "net.au",
        "co.jp",
        "de", "cz", "sk", "fr",
    ]

    def label(min_len=3, max_len=12) -> str:
        k = rnd.randint(min_len, max_len)
        s = "".join(rnd.choice(string.ascii_lowercase + string.digits) for _ in range(k))
        return s.strip("-") or "x"

    out: list[str] = []
    for _ in range(n):
        suf = rnd.choice(suffixes)
        depth = rnd.randint(0, 5)
        parts = [label() for _ in range(depth)]
        reg = label()
        host = ".".join(parts + [reg, suf])

        if rnd.random() < 0.10:
            host = host.upper()

        if rnd.random() < 0.10:
            host = host + "."

        out.append(host)

    out.extend([
        "a.b.c.d.e.f.example.co.uk",
        "EXAMPLE.COM",
        "localhost",
        "192.168.0.1",
        "foo.bar.city.kawasaki.jp",
        "something.appspot.com",
    ])
    return out


split_tests = {
    "www.google.com": ("www", "google.com", "com"),
    "google.com": ("", "google.com", "com"),
    "com": ("", "", "com"),
    "A.B.C.D.E.F.Example.CO.UK.": ("a.b.c.d.e.f", "example.co.uk", "co.uk"),
    "foo.bar.city.kawasaki.jp": ("foo.bar", "city.kawasaki.jp", "kawasaki.jp"),
    "www.example.kawasaki.jp": ("", "www.example.kawasaki.jp", "example.kawasaki.jp"),
    "something.appspot.com": ("", "something.appspot.com", "appspot.com"),
    "localhost": ("", "", "localhost"),
    "": ("", "", ""),
    "http://www.google.com": ("", "", ""),
}


@pytest.mark.parametrize("host,expected", list(split_tests.items()), ids=list(split_tests))
def test_split_host(host, expected):
    assert get_default_suffix_list().split_host(host) == expected


def test_split_host_ignore_private():
    rules = get_default_suffix_list()
    assert rules.split_host("something.appspot.com", ignore_private=True) == ("something", "appspot.com", "com")


def test_split_host_batch_matches_single():
    rules = get_default_suffix_list()
    hosts = gen_hosts(2_000)
    subdomains, registrables, suffixes = rules.split_host_batch(hosts)
    assert len(subdomains) == len(registrables) == len(suffixes) == len(hosts)
    for i, h in enumerate(hosts):
        assert (subdomains[i], registrables[i], suffixes[i]) == rules.split_host(h)


def test_split_host_reassembles_generated_hosts():
    rules = get_default_suffix_list()
    for h in gen_hosts(2_000)[:-6]:
        sub, registrable, _ = rules.split_host(h)
        expected = h.lower().rstrip(".")
        assert (f"{sub}.{registrable}" if sub else registrable) == expected


@pytest.fixture(scope="session")
def hosts() -> list[str]:
    return gen_hosts(1_000_000)


@dataclass(frozen=True)
class Perf:
    name: str
    total_ns: int
    ops: int

    @property
    def ns_per_op(self) -> float:
        return self.total_ns / self.ops

    @property
    def ops_per_s(self) -> float:
        return 1e9 / self.ns_per_op

    @property
    def total_ms(self) -> float:
        return self.total_ns / 1e6


def time_it(name: str, fn, hosts: list[str], *, reps: int = 1, warmup: int = 2000, rounds: int = 7) -> Perf:
    for h in hosts[: min(warmup, len(hosts))]:
        fn(h)

    ops = len(hosts) * reps
    samples: list[int] = []

    for _ in range(rounds):
        t0 = time.perf_counter_ns()
        for _ in range(reps):
            for h in hosts:
                fn(h)
        t1 = time.perf_counter_ns()
        samples.append(t1 - t0)

    total_ns = median(samples)
    return Perf(name, total_ns, ops)


@pytest.mark.perf
def test_perf_split_host(hosts):
    rules = get_default_suffix_list()

    # bind once to avoid timing attribute lookups
    split = rules.split_host

    r = time_it("test_perf_split_host", split, hosts, reps=1, rounds=5)

    print(f"{r.name}: {r.total_ms:,.2f} ms | {r.ns_per_op:,.1f} ns/op | {r.ops_per_s:,.0f} ops/s")

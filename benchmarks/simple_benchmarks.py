from timeit import timeit

from simple_symbol.types.interner import Interner

# Identifier-like workload: a small vocabulary repeated many times, the way
# keywords and names recur in a token stream.
VOCABULARY = [f"ident_{i}" for i in range(500)] + ["if", "else", "while", "return", "def"]
STREAM = VOCABULARY * 20


def _fresh(thread_safe: bool) -> Interner:
    return Interner(thread_safe=thread_safe)


def time_intern_hits(thread_safe: bool, rounds: int) -> float:
    """Time interning strings that are all already present."""
    interner = _fresh(thread_safe)
    interner.intern_many(VOCABULARY)
    return timeit(lambda: [interner.intern(s) for s in STREAM], number=rounds)


def time_intern_many(thread_safe: bool, rounds: int) -> float:
    """Same workload, one lock acquisition per batch."""
    interner = _fresh(thread_safe)
    interner.intern_many(VOCABULARY)
    return timeit(lambda: interner.intern_many(STREAM), number=rounds)


def time_resolve(thread_safe: bool, rounds: int) -> float:
    interner = _fresh(thread_safe)
    syms = interner.intern_many(STREAM)
    return timeit(lambda: [interner.resolve(s) for s in syms], number=rounds)


# Baseline: what the symbols save over comparing the strings themselves

def bench_compare(n: int = 200000) -> tuple:
    interner = _fresh(True)
    long_a = "x" * 200 + "a"
    long_b = "x" * 200 + "b"
    sa, sb = interner.intern(long_a), interner.intern(long_b)
    t_str = timeit(lambda: long_a == long_b, number=n)
    t_sym = timeit(lambda: sa == sb, number=n)
    return t_str, t_sym


def _print_pair(name: str, fn, rounds: int) -> None:
    locked = fn(True, rounds)
    unlocked = fn(False, rounds)
    print(f"Benchmark: {name}")
    print(f"  shared (locked): {locked:.6f}s  |  confined: {unlocked:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    t_str, t_sym = bench_compare()
    print("Benchmark: equality of two long strings vs their symbols")
    print(f"  str: {t_str:.6f}s  |  Symbol: {t_sym:.6f}s")

    _print_pair("intern (all hits)", time_intern_hits, rounds=20)
    _print_pair("intern_many (all hits)", time_intern_many, rounds=20)
    _print_pair("resolve", time_resolve, rounds=20)

import pytest

from simple_symbol import (
    Symbol,
    intern,
    intern_many,
    intern_static,
    resolve,
    store_or_intern,
    get_interner,
)
from simple_symbol.errors import SymbolTypeError

# -----------------------------------------------------
# Identity
# -----------------------------------------------------

def test_same():
    symbol_a = intern("String")
    symbol_b = intern("String")
    assert symbol_a == symbol_b


def test_different():
    symbol_a = intern("StringA")
    symbol_b = intern("StringB")
    assert symbol_a != symbol_b


def test_case():
    symbol_a = intern("String")
    symbol_b = intern("string")
    assert symbol_a != symbol_b


def test_interning_later_still_returns_same_symbol():
    first = intern("again")
    for i in range(100):
        intern(f"filler_{i}")
    assert intern("again") == first


def test_no_normalization():
    assert intern("caf\u00e9") != intern("cafe\u0301")
    assert intern(" x") != intern("x")


# -----------------------------------------------------
# Resolution & rendering
# -----------------------------------------------------

def test_resolve():
    symbol = intern("abcd")
    string = resolve(symbol)
    assert string == "abcd"
    assert isinstance(string, str)


def test_debug():
    symbol = intern("Debug")
    assert repr(symbol) == repr("Debug")


def test_debug_escapes_like_str():
    text = 'tab\there "quoted" \'single\'\n'
    assert repr(intern(text)) == repr(text)


def test_display():
    symbol = intern("Display")
    assert str(symbol) == str("Display")
    assert f"{symbol}" == "Display"
    assert f"{symbol:>9}" == f"{'Display':>9}"


def test_example_scenario():
    x = intern("A")
    assert intern("A") == x
    y = intern("B")
    assert y != x
    assert resolve(x) == "A"
    assert resolve(y) == "B"
    assert str(x) == "A"


@pytest.mark.parametrize("text", ["", "a", "hello world", "你好", "\U0001f389", "x" * 10_000])
def test_round_trip(text):
    assert resolve(intern(text)) == text


# -----------------------------------------------------
# Entry points
# -----------------------------------------------------

def test_parse_equals_intern():
    assert Symbol.parse("parsed") == intern("parsed")
    assert Symbol.parse("") == intern("")


def test_store_or_intern_is_intern():
    assert store_or_intern("same") == intern("same")


def test_intern_static_and_intern_agree():
    static_first = intern_static("keyword")
    assert intern("keyword") == static_first
    copied_first = intern("other")
    assert intern_static("other") == copied_first
    assert resolve(static_first) == "keyword"


def test_intern_many():
    syms = intern_many(["a", "b", "a"])
    assert syms[0] == syms[2] == intern("a")
    assert syms[1] == intern("b")


def test_non_str_rejected():
    with pytest.raises(SymbolTypeError):
        intern(b"bytes")
    with pytest.raises(TypeError):
        intern(None)
    with pytest.raises(SymbolTypeError):
        resolve("not a symbol")


def test_free_functions_share_one_interner():
    interner = get_interner()
    symbol = intern("shared?")
    assert symbol.interner is interner
    assert interner.resolve(symbol) == "shared?"
    assert get_interner() is interner


def test_symbols_work_as_dict_keys():
    table = {intern("k1"): 1, intern("k2"): 2}
    assert table[intern("k1")] == 1
    assert table[Symbol.parse("k2")] == 2

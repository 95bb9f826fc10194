import pytest

# Every test runs once per threading mode of the process-wide interner:
# 1) "shared": one interner for all threads behind a reader/writer lock
# 2) "confined": one lock-free interner per thread
# The mode is read from SIMPLE_SYMBOL_MODE when the process-wide interner is
# first created, so the registry is reset around each test.


@pytest.fixture(params=["shared", "confined"])
def threading_mode(request):
    return request.param


@pytest.fixture(autouse=True)
def _fresh_registry(threading_mode, monkeypatch):
    from simple_symbol import registry

    monkeypatch.setenv("SIMPLE_SYMBOL_MODE", threading_mode)
    registry._reset_for_tests()
    yield
    registry._reset_for_tests()

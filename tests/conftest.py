import pytest

from envcfg import default_reader


@pytest.fixture(autouse=True)
def _restore_parse_observer():
    reader = default_reader()
    prev = reader.on_parse_error
    try:
        yield
    finally:
        reader.on_parse_error = prev



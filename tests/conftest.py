import pytest


def pytest_addoption(parser):
    parser.addoption("--draws", dest="draws", action="store", type=int, default=10000,
        help="Number of draws used in whole-sequence checks (determinism, state repeats)")


@pytest.fixture
def draws(request):
    return request.config.option.draws

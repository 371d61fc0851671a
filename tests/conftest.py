"""Shared test fixtures.

Pins env vars to safe defaults BEFORE any app module is imported, so a
developer's .env cannot change what the tests see.
"""

import os

_TEST_ENV = {
    "APP_VERSION": "test",
    "LOG_LEVEL": "WARNING",
    "MAX_BODY_BYTES": "512000",
    "FEATUREFENCE_DEAD_AFTER_MONTHS": "24",
}

for k, v in _TEST_ENV.items():
    os.environ[k] = v
os.environ.pop("FEATUREFENCE_DATA_DIR", None)

import pytest  # noqa: E402

from featurefence import (  # noqa: E402
    LintGateway,
    TargetResolver,
    build_default_registry,
    load_default_catalog,
    load_default_index,
)


@pytest.fixture(scope="session")
def catalog():
    return load_default_catalog()


@pytest.fixture(scope="session")
def index():
    return load_default_index()


@pytest.fixture
def resolver(catalog):
    return TargetResolver(catalog)


@pytest.fixture
def gateway(index, resolver):
    return LintGateway(registry=build_default_registry(index), resolver=resolver)

"""E2E test fixtures: real enka.network API, no mocks."""

import os
import shutil

import httpx
import pytest

from enka_data_fetcher.request import DEFAULT_USER_AGENT


@pytest.fixture
def e2e_uid():
    return int(os.environ["ENKA_E2E_UID"])


@pytest.fixture
def e2e_username():
    username = os.environ.get("ENKA_E2E_USERNAME")
    if not username:
        pytest.skip("ENKA_E2E_USERNAME required for profile E2E tests")
    return username


@pytest.fixture
def e2e_http():
    """One pooled client per test; enka.network rate-limits aggressively."""
    with httpx.Client(timeout=30.0, headers={"User-Agent": DEFAULT_USER_AGENT}) as client:
        yield client


@pytest.fixture
def cli_available():
    if shutil.which("enka-fetch") is None:
        pytest.skip("enka-fetch is not installed")

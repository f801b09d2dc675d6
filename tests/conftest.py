"""Shared fixtures for envaccess tests."""
import os
import uuid

import pytest


@pytest.fixture
def env_key():
    """Yield a variable name unique to the test and remove it afterwards."""
    key = f"ENVACCESS_TEST_{uuid.uuid4().hex.upper()}"
    yield key
    os.environ.pop(key, None)

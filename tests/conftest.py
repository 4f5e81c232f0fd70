import shutil
import tempfile
import pytest
from fabrik.core import config

@pytest.fixture(autouse=True)
def setup_test_environment():
    """Point the cache at a throw-away directory and disable mock mode"""
    # Store original values
    original_cache_dir = config.settings.CACHE_DIR
    original_use_mock = config.settings.USE_MOCK

    temp_dir = tempfile.mkdtemp(prefix="fabrik-tests-")
    config.settings.CACHE_DIR = temp_dir
    config.settings.USE_MOCK = False

    yield temp_dir

    # Restore original values
    config.settings.CACHE_DIR = original_cache_dir
    config.settings.USE_MOCK = original_use_mock
    shutil.rmtree(temp_dir, ignore_errors=True)

@pytest.fixture
def cache_dir(setup_test_environment):
    return setup_test_environment

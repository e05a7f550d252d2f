"""
Behave environment configuration for Cloudflare Records integration tests.
"""

import logging
import shutil
import tempfile
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.test_config = {
        "dns_providers": {"mock": {}},
        "default_provider": "mock",
        "logging": {"level": "DEBUG", "file": "test_cloudflare_records.log"},
    }
    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.test_data_dir = Path(tempfile.mkdtemp())
    context.state_file = str(context.test_data_dir / "state.yaml")
    context.result = None
    context.error = None

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    shutil.rmtree(context.test_data_dir, ignore_errors=True)
    logger.info(f"Completed scenario: {scenario.name}")

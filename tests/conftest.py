"""
Shared fixtures for SDK call helper tests.
"""
import pytest
from moto import mock_aws

import config

REGION = 'us-east-1'


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch):
    """Fake credentials and a clean config for every test."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', REGION)
    monkeypatch.delenv('AWS_ENDPOINT_URL', raising=False)
    monkeypatch.delenv('CLOUDWATCH_LOGS_MAX_ATTEMPTS', raising=False)
    monkeypatch.delenv('LEX_BOT_VERSION', raising=False)
    config.reset_config()
    yield
    config.reset_config()


@pytest.fixture
def aws():
    """Emulated AWS account for the duration of a test."""
    with mock_aws():
        yield

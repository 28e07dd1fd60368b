"""Shared test fixtures for the vesal library."""

import pytest

from vesal import LegacyVesalClient, MockTransport, VesalClient, VesalConfig


@pytest.fixture
def vesal_config() -> VesalConfig:
    return VesalConfig(
        username="test_user",
        password="test_pass",
        domain="testdomain",
        from_number="50001234",
    )


@pytest.fixture
def legacy_config() -> VesalConfig:
    return VesalConfig(
        username="legacy_user",
        password="legacy_pass",
        from_number="30001234",
    )


@pytest.fixture
def transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def client(vesal_config: VesalConfig, transport: MockTransport) -> VesalClient:
    return VesalClient(vesal_config, transport=transport)


@pytest.fixture
def legacy_client(legacy_config: VesalConfig, transport: MockTransport) -> LegacyVesalClient:
    return LegacyVesalClient(legacy_config, transport=transport)

"""Benchmark tests for the Vesal clients.

Measures the overhead of the library's send path with a mocked transport.
Useful for catching regressions in hot paths (argument normalization,
broadcast expansion, per-recipient result normalization).

Run with:
    pytest tests/test_benchmarks.py --benchmark-only -v
"""

from __future__ import annotations

import pytest

from vesal import LegacyVesalClient, MockTransport, VesalClient, VesalConfig
from vesal.shaping import build_send_request, expand

RECIPIENTS = [f"0912{i:07d}" for i in range(500)]


def _v2_send_response(count: int) -> dict:
    return {
        "status": 0,
        "messages": [
            {"status": 0 if i % 10 else 14, "id": 1000 + i, "recipient": RECIPIENTS[i]}
            for i in range(count)
        ],
    }


def _legacy_send_response(count: int) -> dict:
    return {
        "references": [1000 + i if i % 10 else -104 for i in range(count)],
        "errorModel": {"errorCode": 0},
    }


class TestShapingBenchmarks:
    def test_build_and_expand(self, benchmark):
        def run():
            return expand(build_send_request(RECIPIENTS, "Benchmark", None, default_sender="5000"))

        request = benchmark(run)
        assert len(request.messages) == len(RECIPIENTS)


class TestVesalClientBenchmarks:
    @pytest.fixture(autouse=True)
    def _setup(self):
        self.client = VesalClient(
            VesalConfig(username="bench", password="bench", domain="bench", from_number="5000"),
            transport=MockTransport(default_response=_v2_send_response(len(RECIPIENTS))),
        )
        yield

    def test_send_broadcast(self, benchmark):
        result = benchmark(self.client.send, RECIPIENTS, "Benchmark")
        assert result.success_count + result.fail_count == len(RECIPIENTS)


class TestLegacyClientBenchmarks:
    @pytest.fixture(autouse=True)
    def _setup(self):
        self.client = LegacyVesalClient(
            VesalConfig(username="bench", password="bench", from_number="3000"),
            transport=MockTransport(default_response=_legacy_send_response(len(RECIPIENTS))),
        )
        yield

    def test_send_one_to_many(self, benchmark):
        result = benchmark(self.client.send, RECIPIENTS, "Benchmark")
        assert result.endpoint == "SendMessage/OneToMany"

    def test_send_many_to_many(self, benchmark):
        messages = [f"Message {i}" for i in range(len(RECIPIENTS))]
        result = benchmark(self.client.send, RECIPIENTS, messages)
        assert result.endpoint == "SendMessage/ManyToMany"
        assert result.fail_count == len(RECIPIENTS) // 10

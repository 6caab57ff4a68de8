"""Tests for the sampling strategy value and the response bytes."""

import dataclasses
import json
import unittest

from sampling_reset.server.response import build_response
from sampling_reset.strategy import (
    DEFAULT_SAMPLING_RATE,
    DEFAULT_STRATEGY,
    ProbabilisticSampling,
    SamplingStrategyResponse,
    StrategyType,
)


class TestSamplingStrategyResponse(unittest.TestCase):

    def test_default_is_probabilistic(self):
        self.assertEqual(DEFAULT_STRATEGY.strategy_type, StrategyType.PROBABILISTIC)
        self.assertEqual(DEFAULT_STRATEGY.probabilistic_sampling.sampling_rate, 0.001)
        self.assertEqual(DEFAULT_SAMPLING_RATE, 0.001)

    def test_compact_json(self):
        self.assertEqual(
            DEFAULT_STRATEGY.to_json(),
            '{"strategyType":"PROBABILISTIC","probabilisticSampling":{"samplingRate":0.001}}',
        )

    def test_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            DEFAULT_STRATEGY.strategy_type = "RATE_LIMITING"
        with self.assertRaises(dataclasses.FrozenInstanceError):
            DEFAULT_STRATEGY.probabilistic_sampling.sampling_rate = 1.0

    def test_rate_bounds(self):
        ProbabilisticSampling(0.0)
        ProbabilisticSampling(1.0)
        with self.assertRaises(ValueError):
            ProbabilisticSampling(1.5)
        with self.assertRaises(ValueError):
            ProbabilisticSampling(-0.1)

    def test_equal_values_compare_equal(self):
        other = SamplingStrategyResponse(StrategyType.PROBABILISTIC, ProbabilisticSampling(0.001))
        self.assertEqual(other, DEFAULT_STRATEGY)


class TestBuildResponse(unittest.TestCase):

    def setUp(self):
        self.raw = build_response(DEFAULT_STRATEGY)
        self.head, _, self.body = self.raw.partition(b"\r\n\r\n")

    def test_status_line(self):
        self.assertTrue(self.raw.startswith(b"HTTP/1.1 200 OK\r\n"))

    def test_headers(self):
        lines = self.head.split(b"\r\n")[1:]
        headers = dict(line.split(b": ", 1) for line in lines)
        self.assertEqual(headers[b"Content-Type"], b"application/json")
        self.assertEqual(int(headers[b"Content-Length"]), len(self.body))
        self.assertEqual(headers[b"Connection"], b"close")

    def test_body_is_strategy_json(self):
        self.assertEqual(json.loads(self.body), DEFAULT_STRATEGY.to_dict())


if __name__ == "__main__":
    unittest.main()

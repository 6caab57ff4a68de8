"""The sampling strategy served to polling clients."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

DEFAULT_SAMPLING_RATE = 0.001


class StrategyType(str, Enum):
    PROBABILISTIC = "PROBABILISTIC"


@dataclass(frozen=True)
class ProbabilisticSampling:
    """Sample each trace independently with a fixed probability."""

    sampling_rate: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.sampling_rate <= 1.0:
            raise ValueError("sampling_rate must be between 0.0 and 1.0")


@dataclass(frozen=True)
class SamplingStrategyResponse:
    """
    Body of a sampling-configuration poll.

    Field names on the wire follow the Jaeger agent's sampling endpoint
    (camelCase), not the attribute names used here.
    """

    strategy_type: StrategyType
    probabilistic_sampling: ProbabilisticSampling

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strategyType": self.strategy_type.value,
            "probabilisticSampling": {
                "samplingRate": self.probabilistic_sampling.sampling_rate,
            },
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))


DEFAULT_STRATEGY = SamplingStrategyResponse(
    strategy_type=StrategyType.PROBABILISTIC,
    probabilistic_sampling=ProbabilisticSampling(DEFAULT_SAMPLING_RATE),
)

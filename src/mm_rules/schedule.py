"""Tolerance schedules: elapsed search time -> maximum allowed distance.

A schedule is a step function over fixed second-thresholds capped at a maximum
tolerance. Tolerances never shrink as the search time grows.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceSchedule:
    steps: tuple[tuple[float, float], ...]  # (threshold_seconds, tolerance), ascending
    cap: float  # tolerance once every threshold has passed

    def __post_init__(self) -> None:
        previous_threshold = float("-inf")
        previous_tolerance = float("-inf")
        for threshold, tolerance in self.steps:
            if threshold <= previous_threshold:
                raise ValueError("schedule thresholds must strictly increase")
            if tolerance < previous_tolerance:
                raise ValueError("schedule tolerances must not decrease")
            previous_threshold, previous_tolerance = threshold, tolerance
        if self.cap < previous_tolerance:
            raise ValueError("schedule cap must not be below the last step")

    def tolerance(self, search_time: float) -> float:
        for threshold, tolerance in self.steps:
            if search_time < threshold:
                return tolerance
        return self.cap

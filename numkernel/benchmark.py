#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Timing of a function over inputs of growing size"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable

LOG = logging.getLogger(__name__)


@dataclass
class RunInfo:
    """
    One benchmark run: how often the function is called on inputs of which size.

    run_time is the mean time per call in microseconds; -1.0 until the run is done.
    """
    input_size: int
    iterations: int
    run_time: float = -1.0

    def __str__(self) -> str:
        return f"[size={self.input_size}, iterations={self.iterations}, run_time={self.run_time:.3f}us]"


class Benchmark:
    """Measure the mean run time of a function for several input sizes

    For every RunInfo two inputs of the requested size are generated. The
    device under test is then called ``iterations`` times, alternating
    between the two inputs so that results cached from the previous call
    cannot be reused.

    Example:
        >>> bm = Benchmark(lambda n: list(range(n)), max, [RunInfo(100, 1000)]).run()
        >>> bm.get_run_infos()[100].run_time > 0
        True

    Args:
        input_gen (callable):
            Function that takes an input size and returns an input.

        dut (callable):
            The function to time. It is called with one generated input.

        runs (list of RunInfo):
            The input sizes and number of iterations to measure.
    """

    def __init__(self, input_gen: Callable[[int], Any], dut: Callable[[Any], Any], runs: Iterable[RunInfo]):
        self.input_gen = input_gen
        self.dut = dut
        self.runs = list(runs)
        self._run_infos: Dict[int, RunInfo] = {}

    def run(self) -> 'Benchmark':
        for requested in self.runs:
            if requested.iterations <= 0:
                raise ValueError(f"Number of iterations must be positive, got {requested.iterations}.")
            run = RunInfo(requested.input_size, requested.iterations)
            inputs = (self.input_gen(run.input_size), self.input_gen(run.input_size))
            start = time.perf_counter()
            for i in range(run.iterations):
                self.dut(inputs[i % 2])
            elapsed = time.perf_counter() - start
            run.run_time = elapsed * 1e6 / run.iterations
            LOG.debug(f"Benchmark run {run}")
            self._run_infos[run.input_size] = run
        return self

    def get_run_infos(self) -> Dict[int, RunInfo]:
        """Measured runs keyed by input size, in ascending order of size"""
        return dict(sorted(self._run_infos.items()))

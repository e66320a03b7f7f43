# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule for executing batches of table operations.

Usage:
    python -m kvtable.runner < input.json > output.json

Exports:
    Executor: Runs the operations of a RunnerInput
    RunnerInput: Input schema read from stdin
    RunnerOutput: Output schema written to stdout
"""

from .executor import ExecutionError, Executor
from .schema import OperationSchema, RunnerInput, RunnerOutput

__all__ = [
    "ExecutionError",
    "Executor",
    "OperationSchema",
    "RunnerInput",
    "RunnerOutput",
]

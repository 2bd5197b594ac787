# Copyright 2026 Cisco Systems, Inc.
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
# SPDX-License-Identifier: Apache-2.0

"""
Run aggregator: checks every requirements source against one inventory.
"""

import logging
from collections.abc import Callable, Sequence

from .evaluator import evaluate
from .models import ModuleRecord, RunResult, SourceEvaluation, ViolationFlags
from .requirements import load_requirements
from .transports.resolver import SourceResolver

logger = logging.getLogger(__name__)


def run_checks(
    locations: Sequence[str],
    inventory: Sequence[ModuleRecord],
    resolver: SourceResolver | None = None,
    on_source: Callable[[SourceEvaluation], None] | None = None,
) -> RunResult:
    """
    Fetch, parse and evaluate each requirements source in order.

    Violation flags are sticky across sources: once any source reports a
    required (or banned) violation, the final exit code keeps that bit.

    Args:
        locations: Requirement-source URIs, processed sequentially
        inventory: Resolved modules shared by every source
        resolver: Source resolver (default: one built from the environment)
        on_source: Called with each SourceEvaluation as soon as it is ready

    Returns:
        RunResult with the accumulated flags and per-source evaluations

    Raises:
        ModReqError: On the first transport, parse or rule error; later
            sources are not processed
    """
    resolver = resolver or SourceResolver()
    flags = ViolationFlags()
    evaluations: list[SourceEvaluation] = []

    for location in locations:
        logger.info("Checking requirements: %s", location)
        spec = load_requirements(location, resolver)
        evaluation = evaluate(spec, inventory)
        flags = flags.merge(evaluation.flags)
        evaluations.append(evaluation)
        if on_source is not None:
            on_source(evaluation)

    logger.info("Checked %d source(s), exit code %d", len(evaluations), flags.exit_code)
    return RunResult(flags=flags, evaluations=evaluations, module_count=len(inventory))

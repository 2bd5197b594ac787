#!/usr/bin/env python3
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
Programmatic usage example - using modreq as a Python library.

This example demonstrates:
1. Loading the module inventory from a saved ``go list`` output
2. Checking several requirement sources in one run
3. Walking the per-source findings
"""

import sys
from pathlib import Path

from modreq import GoModuleResolver, ModuleRecord, load_inventory, run_checks
from modreq.core.exceptions import ModReqError
from modreq.core.transports import normalize_location


def resolve_modules(saved_inventory: Path | None) -> list[ModuleRecord]:
    if saved_inventory is not None and saved_inventory.exists():
        return load_inventory(saved_inventory)
    return GoModuleResolver().resolve()


def main():
    here = Path(__file__).parent
    locations = [normalize_location(str(here / "gomodreq.example.yml"))]
    # Remote sources are checked the same way, e.g.
    # locations.append("https://policy.example.com/org.gomodreq.yml")

    try:
        modules = resolve_modules(here / "modules.json")
        result = run_checks(locations, modules)
    except ModReqError as e:
        print(f"Error: {e}", file=sys.stderr)
        return -1

    for evaluation in result.evaluations:
        print(f"{evaluation.location}:")
        for finding in evaluation.findings:
            status = "violated" if finding.is_violation else "met"
            print(f"  {finding.kind.value:<8} {finding.module_path} {finding.module_version or '-'} -> {status}")

    print(f"\nExit code: {result.exit_code}")
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())

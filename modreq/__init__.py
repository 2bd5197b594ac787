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
modreq - Dependency policy checker for resolved module versions.
"""

try:
    from ._version import __version__
except ImportError:
    __version__ = "0.0.0+unknown"


def __getattr__(name: str):
    """Lazy-load public API symbols on first access.

    Keeps ``python -m modreq.cli.cli`` from importing the SSH and HTTP
    transport stacks before they are needed.
    """
    _lazy_map = {
        "Config": (".config.config", "Config"),
        "ModReqConstants": (".config.constants", "ModReqConstants"),
        "ModuleRecord": (".core.models", "ModuleRecord"),
        "RequirementSpec": (".core.models", "RequirementSpec"),
        "VersionRule": (".core.models", "VersionRule"),
        "Verdict": (".core.models", "Verdict"),
        "ViolationFlags": (".core.models", "ViolationFlags"),
        "RunResult": (".core.models", "RunResult"),
        "SourceResolver": (".core.transports.resolver", "SourceResolver"),
        "parse_requirements": (".core.requirements", "parse_requirements"),
        "load_requirements": (".core.requirements", "load_requirements"),
        "evaluate": (".core.evaluator", "evaluate"),
        "run_checks": (".core.runner", "run_checks"),
        "GoModuleResolver": (".core.inventory", "GoModuleResolver"),
        "load_inventory": (".core.inventory", "load_inventory"),
    }
    if name in _lazy_map:
        module_path, attr = _lazy_map[name]
        import importlib

        mod = importlib.import_module(module_path, __package__)
        val = getattr(mod, attr)
        # Cache on the module so __getattr__ is only called once per symbol
        globals()[name] = val
        return val
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Config",
    "ModReqConstants",
    "ModuleRecord",
    "RequirementSpec",
    "VersionRule",
    "Verdict",
    "ViolationFlags",
    "RunResult",
    "SourceResolver",
    "parse_requirements",
    "load_requirements",
    "evaluate",
    "run_checks",
    "GoModuleResolver",
    "load_inventory",
]

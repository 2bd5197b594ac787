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
Module inventory: the resolved modules a project actually builds with.

Inventories come from ``go list -m -u -json all``, either by running the
command or from a saved copy of its output. The output is a stream of JSON
objects, one per module::

    {
        "Path": "golang.org/x/text",
        "Version": "v0.3.0",
        "Update": {"Path": "golang.org/x/text", "Version": "v0.3.7"}
    }

``Update`` is present only when a newer version exists upstream.
"""

import json
import logging
import subprocess
import sys
from pathlib import Path
from typing import Any

from ..config.constants import ModReqConstants
from .exceptions import InventoryError
from .models import ModuleRecord

logger = logging.getLogger(__name__)


def _module_from_dict(obj: Any) -> ModuleRecord:
    if not isinstance(obj, dict) or not isinstance(obj.get("Path"), str):
        raise InventoryError(f"module entry has no Path: {obj!r}")
    update = obj.get("Update")
    latest = None
    if isinstance(update, dict) and update.get("Version"):
        latest = str(update["Version"])
    return ModuleRecord(path=obj["Path"], version=str(obj.get("Version") or ""), update=latest)


def parse_go_list_output(text: str) -> list[ModuleRecord]:
    """
    Decode ``go list -m -u -json`` output.

    Accepts the concatenated object stream the command prints, or a JSON
    array of the same objects.

    Raises:
        InventoryError: If the text is not valid module JSON
    """
    decoder = json.JSONDecoder()
    modules: list[ModuleRecord] = []
    pos = 0
    length = len(text)
    while True:
        while pos < length and text[pos].isspace():
            pos += 1
        if pos >= length:
            break
        try:
            obj, pos = decoder.raw_decode(text, pos)
        except json.JSONDecodeError as e:
            raise InventoryError(f"error parsing module json [{e}]") from e
        if isinstance(obj, list):
            modules.extend(_module_from_dict(item) for item in obj)
        else:
            modules.append(_module_from_dict(obj))
    return modules


def load_inventory(path: str | Path) -> list[ModuleRecord]:
    """
    Load a saved inventory file. ``-`` reads standard input.

    Raises:
        InventoryError: If the file cannot be read or decoded
    """
    if str(path) == "-":
        text = sys.stdin.read()
    else:
        path = Path(path)
        if not path.exists():
            raise InventoryError(f"inventory file does not exist {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InventoryError(f"problem reading inventory file {path} [{e}]") from e

    modules = parse_go_list_output(text)
    logger.debug("Loaded %d modules from %s", len(modules), path)
    return modules


class GoModuleResolver:
    """Resolves the module inventory of a Go project with the ``go`` tool."""

    def __init__(self, go_binary: str = ModReqConstants.DEFAULT_GO_BINARY, workdir: Path | None = None):
        """
        Initialize resolver.

        Args:
            go_binary: Name or path of the go executable
            workdir: Project directory (default: current directory)
        """
        self.go_binary = go_binary
        self.workdir = workdir

    def resolve(self) -> list[ModuleRecord]:
        """
        Run ``go list -m -u -json all`` and decode its output.

        Raises:
            InventoryError: If go is missing, fails, or prints malformed output
        """
        cmd = [self.go_binary, *ModReqConstants.GO_LIST_ARGS]
        logger.info("Resolving modules: %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=True,
                cwd=str(self.workdir) if self.workdir else None,
            )
        except FileNotFoundError as e:
            raise InventoryError(f"go executable not found: {self.go_binary}") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise InventoryError(f"getting modules failed (exit {e.returncode}) [{stderr}]") from e

        modules = parse_go_list_output(result.stdout)
        logger.debug("Resolved %d modules", len(modules))
        return modules

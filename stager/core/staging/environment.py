# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
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

"""Staging task environment assembly."""

import json
from typing import Any, Iterable, List, Mapping

from stager.core.staging.value_objects import EnvironmentVariable


def _render_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def to_environment_variables(environment: Mapping[str, Any]) -> List[EnvironmentVariable]:
    """Convert a mapping to name/value entries in insertion order.

    Names are not de-duplicated or sorted. Non-string values are rendered
    as JSON (``None`` becomes an empty string).
    """
    return [
        EnvironmentVariable(name=str(name), value=_render_value(value))
        for name, value in environment.items()
    ]


def build_environment(
    environment_variables: Mapping[str, Any],
    task_environment_variables: Iterable[EnvironmentVariable],
) -> List[EnvironmentVariable]:
    """Caller-supplied entries first, then lifecycle task entries."""
    return to_environment_variables(environment_variables) + list(task_environment_variables)

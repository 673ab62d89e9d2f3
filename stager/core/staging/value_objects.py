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

"""Value objects for the Staging domain.

All value objects are immutable and defined by their values, not identity.
"""

import re
from dataclasses import dataclass
from typing import ClassVar, Dict, List

BUILDPACK = "buildpack"
DOCKER = "docker"


@dataclass(frozen=True)
class LifecycleType:
    """Staging lifecycle kind.

    Attributes:
        value: Lifecycle name (buildpack or docker).

    Raises:
        ValueError: If lifecycle kind is not supported.
    """

    value: str

    SUPPORTED_LIFECYCLES: ClassVar[List[str]] = [BUILDPACK, DOCKER]

    def __post_init__(self) -> None:
        """Validate lifecycle kind."""
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Lifecycle type cannot be empty")
        if self.value not in self.SUPPORTED_LIFECYCLES:
            raise ValueError(
                f"lifecycle type `{self.value}` is invalid. "
                f"Supported: {', '.join(self.SUPPORTED_LIFECYCLES)}"
            )

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @property
    def is_buildpack(self) -> bool:
        """Check if lifecycle is buildpack based."""
        return self.value == BUILDPACK

    @property
    def is_docker(self) -> bool:
        """Check if lifecycle is a pre-built docker image."""
        return self.value == DOCKER


@dataclass(frozen=True)
class StagingGuid:
    """Identifier correlating a staging request with its completion report.

    The value is embedded in URL paths, so it is limited to URL-safe
    characters.

    Raises:
        ValueError: If the guid is empty, too long or not URL-path safe.
    """

    value: str

    MAX_LENGTH: ClassVar[int] = 255
    GUID_PATTERN: ClassVar[str] = r'[a-zA-Z0-9_\-]+'

    def __post_init__(self) -> None:
        """Validate staging guid format."""
        if not self.value or not self.value.strip():
            raise ValueError("Staging guid cannot be empty")
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(
                f"Staging guid length cannot exceed {self.MAX_LENGTH} "
                f"characters, got {len(self.value)}"
            )
        if not re.fullmatch(self.GUID_PATTERN, self.value):
            raise ValueError(
                f"Invalid staging guid format: {self.value}. "
                f"Must contain only alphanumeric characters, underscores, and hyphens."
            )

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class EnvironmentVariable:
    """A single name/value pair passed to the staging task."""

    name: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        """Serialize to the wire shape."""
        return {"name": self.name, "value": self.value}

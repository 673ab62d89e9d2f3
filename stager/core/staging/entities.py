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

"""Domain entities for the Staging module."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from stager.core.staging.value_objects import EnvironmentVariable


@dataclass(frozen=True)
class Organization:
    """Organization owning the application."""

    guid: str
    name: str


@dataclass(frozen=True)
class Space:
    """Space the application is deployed to."""

    guid: str
    name: str


@dataclass(frozen=True)
class App:
    """Application being staged."""

    guid: str
    name: str
    organization: Organization
    space: Space


@dataclass(frozen=True)
class Package:
    """Source package to build.

    Attributes:
        guid: Package identifier.
        app: Owning application.
        bits_download_uri: Where the scheduler downloads app bits (buildpack).
        image: Registry image reference (docker).
        docker_username: Optional registry username (docker).
        docker_password: Optional registry password (docker), never logged.
    """

    guid: str
    app: App
    bits_download_uri: Optional[str] = None
    image: Optional[str] = None
    docker_username: Optional[str] = None
    docker_password: Optional[str] = field(default=None, repr=False)

    @property
    def app_guid(self) -> str:
        """Guid of the owning application."""
        return self.app.guid


@dataclass(frozen=True)
class Lifecycle:
    """Requested lifecycle as supplied by the caller.

    ``type`` is kept raw; it is validated at the dispatch entry point.
    """

    type: str
    buildpacks: Tuple[str, ...] = ()


@dataclass(frozen=True)
class StagingDetails:
    """Everything the caller knows about one staging attempt."""

    staging_guid: str
    package: Package
    lifecycle: Lifecycle
    environment_variables: Mapping[str, Any] = field(default_factory=dict)
    staging_memory_in_mb: int = 1024
    staging_disk_in_mb: int = 4096
    start_after_staging: bool = False


@dataclass(frozen=True)
class BuildpackLifecycleData:
    """Buildpack lifecycle data provided by the lifecycle protocol."""

    droplet_upload_uri: str
    app_bits_download_uri: Optional[str]
    buildpacks: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class BuildpackLifecyclePayload:
    """Buildpack variant of the lifecycle wire payload."""

    droplet_upload_uri: str
    app_bits_download_uri: Optional[str]
    buildpacks: List[Dict[str, Any]]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the ``buildpack_lifecycle`` wire shape."""
        return {
            "buildpack_lifecycle": {
                "droplet_upload_uri": self.droplet_upload_uri,
                "app_bits_download_uri": self.app_bits_download_uri,
                "buildpacks": [dict(buildpack) for buildpack in self.buildpacks],
            }
        }


@dataclass(frozen=True)
class DockerLifecyclePayload:
    """Docker image variant of the lifecycle wire payload.

    Absent registry credentials serialize as ``null``, never omitted.
    """

    image: Optional[str]
    registry_username: Optional[str] = None
    registry_password: Optional[str] = field(default=None, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the ``docker_lifecycle`` wire shape."""
        return {
            "docker_lifecycle": {
                "image": self.image,
                "registry_username": self.registry_username,
                "registry_password": self.registry_password,
            }
        }


LifecyclePayload = Union[BuildpackLifecyclePayload, DockerLifecyclePayload]


@dataclass(frozen=True)
class StagingRequest:
    """Immutable wire payload submitted to the scheduler.

    Attributes:
        app_guid: Application identifier.
        app_name: Application display name.
        staging_guid: Staging identifier.
        org_name: Organization display name.
        org_guid: Organization identifier.
        space_name: Space display name.
        space_guid: Space identifier.
        environment: Ordered environment entries.
        completion_callback: Credentialed URL the scheduler reports back to.
        lifecycle: Lifecycle-specific payload.
        cpu_weight: Fixed staging task CPU weight.
        disk_mb: Disk limit in megabytes.
        memory_mb: Memory limit in megabytes.
    """

    app_guid: str
    app_name: str
    staging_guid: str
    org_name: str
    org_guid: str
    space_name: str
    space_guid: str
    environment: Tuple[EnvironmentVariable, ...]
    completion_callback: str = field(repr=False)
    lifecycle: LifecyclePayload
    cpu_weight: int
    disk_mb: int
    memory_mb: int

    def to_dict(self) -> Dict[str, Any]:
        """Serialize request to dictionary for the JSON body."""
        return {
            "app_guid": self.app_guid,
            "app_name": self.app_name,
            "staging_guid": self.staging_guid,
            "org_name": self.org_name,
            "org_guid": self.org_guid,
            "space_name": self.space_name,
            "space_guid": self.space_guid,
            "environment": [entry.to_dict() for entry in self.environment],
            "completion_callback": self.completion_callback,
            "lifecycle": self.lifecycle.to_dict(),
            "cpu_weight": self.cpu_weight,
            "disk_mb": self.disk_mb,
            "memory_mb": self.memory_mb,
        }


@dataclass(frozen=True)
class Accepted:
    """Scheduler acknowledged the staging request with 202."""

    @property
    def is_accepted(self) -> bool:
        """Check if the request was accepted."""
        return True


@dataclass(frozen=True)
class Rejected:
    """Scheduler refused the staging request.

    Attributes:
        message: Diagnostic message returned by the scheduler.
        status_code: HTTP status returned by the scheduler.
    """

    message: str
    status_code: int = 0

    @property
    def is_accepted(self) -> bool:
        """Check if the request was accepted."""
        return False


DispatchOutcome = Union[Accepted, Rejected]

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

"""Default lifecycle protocol: staging action builders per lifecycle kind."""

from typing import Any, Dict, List, Optional

from stager.common.config import StagerConfig
from stager.core.staging.entities import BuildpackLifecycleData, StagingDetails
from stager.core.staging.exceptions import InvalidLifecycleTypeError
from stager.core.staging.repositories import LifecycleProtocolResolver, StagingActionBuilder
from stager.core.staging.value_objects import EnvironmentVariable, LifecycleType

CUSTOM_BUILDPACK_NAME = "custom"
_URL_PREFIXES = ("http://", "https://", "git://")


def buildpack_entry(buildpack: str) -> Dict[str, Any]:
    """Describe one requested buildpack for the scheduler.

    URLs are custom buildpacks; anything else names an admin buildpack.
    """
    if buildpack.startswith(_URL_PREFIXES):
        return {
            "name": CUSTOM_BUILDPACK_NAME,
            "key": buildpack,
            "url": buildpack,
            "skip_detect": True,
        }
    return {"name": buildpack, "key": buildpack, "skip_detect": True}


class BuildpackStagingActionBuilder(StagingActionBuilder):
    """Action builder for buildpack staging."""

    def __init__(self, config: StagerConfig, staging_details: StagingDetails) -> None:
        self._config = config
        self._staging_details = staging_details

    def _droplet_upload_target(self) -> str:
        server = self._config.server
        return (
            f"https://{server.internal_service_hostname}:{server.tls_port}"
            f"/internal/v4/droplets/{self._staging_details.staging_guid}/upload"
        )

    def lifecycle_data(self) -> Optional[BuildpackLifecycleData]:
        buildpacks = [
            buildpack_entry(buildpack)
            for buildpack in self._staging_details.lifecycle.buildpacks
        ]
        return BuildpackLifecycleData(
            droplet_upload_uri=self._droplet_upload_target(),
            app_bits_download_uri=self._staging_details.package.bits_download_uri,
            buildpacks=buildpacks,
        )

    def task_environment_variables(self) -> List[EnvironmentVariable]:
        return [EnvironmentVariable(name="LANG", value=self._config.staging.default_lang)]


class DockerStagingActionBuilder(StagingActionBuilder):
    """Action builder for pre-built docker images; contributes nothing."""

    def lifecycle_data(self) -> Optional[BuildpackLifecycleData]:
        return None

    def task_environment_variables(self) -> List[EnvironmentVariable]:
        return []


class DefaultLifecycleProtocolResolver(LifecycleProtocolResolver):
    """Maps lifecycle kinds to their staging action builders."""

    def __init__(self, config: StagerConfig) -> None:
        self._config = config

    def staging_action_builder(
        self,
        lifecycle_type: LifecycleType,
        staging_details: StagingDetails,
    ) -> StagingActionBuilder:
        """Return the builder for ``lifecycle_type``.

        Raises:
            InvalidLifecycleTypeError: If the kind has no builder.
        """
        if lifecycle_type.is_buildpack:
            return BuildpackStagingActionBuilder(self._config, staging_details)
        if lifecycle_type.is_docker:
            return DockerStagingActionBuilder()
        raise InvalidLifecycleTypeError(lifecycle_type.value)

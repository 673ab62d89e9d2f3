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

"""Lifecycle payload encoding for buildpack and docker staging."""

from stager.core.staging.entities import (
    BuildpackLifecyclePayload,
    DockerLifecyclePayload,
    LifecyclePayload,
    Package,
)
from stager.core.staging.exceptions import (
    InvalidLifecycleTypeError,
    MissingLifecycleDataError,
)
from stager.core.staging.repositories import StagingActionBuilder
from stager.core.staging.value_objects import BUILDPACK, DOCKER, LifecycleType

DROPLET_UPLOAD_QUERY_PARAM = "cc-droplet-upload-uri"


def droplet_upload_uri(cc_uploader_url: str, staging_guid: str, target_uri: str) -> str:
    """Build the uploader URI the scheduler pushes the droplet to.

    ``target_uri`` is inserted as-is; escaping is the caller's job.
    """
    return (
        f"{cc_uploader_url}/v1/droplet/{staging_guid}"
        f"?{DROPLET_UPLOAD_QUERY_PARAM}={target_uri}"
    )


def encode_buildpack_lifecycle(
    action_builder: StagingActionBuilder,
    staging_guid: str,
    cc_uploader_url: str,
) -> BuildpackLifecyclePayload:
    """Encode the buildpack lifecycle from the action builder's data.

    Raises:
        MissingLifecycleDataError: If the builder has no lifecycle data.
    """
    lifecycle_data = action_builder.lifecycle_data()
    if lifecycle_data is None:
        raise MissingLifecycleDataError(
            f"No buildpack lifecycle data available for staging {staging_guid}"
        )
    return BuildpackLifecyclePayload(
        droplet_upload_uri=droplet_upload_uri(
            cc_uploader_url, staging_guid, lifecycle_data.droplet_upload_uri
        ),
        app_bits_download_uri=lifecycle_data.app_bits_download_uri,
        buildpacks=list(lifecycle_data.buildpacks),
    )


def encode_docker_lifecycle(package: Package) -> DockerLifecyclePayload:
    """Copy the image reference and registry credentials verbatim."""
    return DockerLifecyclePayload(
        image=package.image,
        registry_username=package.docker_username,
        registry_password=package.docker_password,
    )


def encode_lifecycle(
    lifecycle_type: LifecycleType,
    staging_guid: str,
    package: Package,
    action_builder: StagingActionBuilder,
    cc_uploader_url: str,
) -> LifecyclePayload:
    """Encode the lifecycle payload for the given kind.

    Every supported kind has its own branch; a kind without one is an error.

    Raises:
        InvalidLifecycleTypeError: If the kind has no encoder.
        MissingLifecycleDataError: If buildpack lifecycle data is missing.
    """
    if lifecycle_type.value == BUILDPACK:
        return encode_buildpack_lifecycle(action_builder, staging_guid, cc_uploader_url)
    if lifecycle_type.value == DOCKER:
        return encode_docker_lifecycle(package)
    raise InvalidLifecycleTypeError(lifecycle_type.value)

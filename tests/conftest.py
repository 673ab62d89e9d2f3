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

"""Shared pytest fixtures for OPI stager tests."""

# pylint: disable=redefined-outer-name

from typing import Optional

import pytest

from stager.common.config import (
    InternalApiConfig,
    OpiConfig,
    ServerConfig,
    StagerConfig,
    StagingConfig,
)
from stager.core.staging.entities import (
    App,
    BuildpackLifecycleData,
    Lifecycle,
    Organization,
    Package,
    Space,
    StagingDetails,
)
from stager.core.staging.value_objects import EnvironmentVariable
from tests.mocks.staging_mocks import MockStagingActionBuilder


@pytest.fixture
def stager_config() -> StagerConfig:
    """Configuration matching the documented callback scenario."""
    return StagerConfig(
        opi=OpiConfig(
            url="https://opi.internal:8085",
            cc_uploader_url="http://cc-uploader.internal:9090",
        ),
        internal_api=InternalApiConfig(auth_user="intuser", auth_password="p@ss"),
        server=ServerConfig(internal_service_hostname="cc.internal", tls_port=8443),
        staging=StagingConfig(cpu_weight=50, default_lang="en_US.UTF-8"),
    )


@pytest.fixture
def make_staging_details():
    """Factory for StagingDetails with sensible defaults."""

    def _make(
        lifecycle_type: str = "buildpack",
        staging_guid: str = "abc-123",
        environment_variables=None,
        start_after_staging: bool = True,
        image: Optional[str] = None,
        docker_username: Optional[str] = None,
        docker_password: Optional[str] = None,
        buildpacks=(),
    ) -> StagingDetails:
        app = App(
            guid="app-guid",
            name="my-app",
            organization=Organization(guid="org-guid", name="my-org"),
            space=Space(guid="space-guid", name="my-space"),
        )
        return StagingDetails(
            staging_guid=staging_guid,
            package=Package(
                guid="package-guid",
                app=app,
                bits_download_uri="https://blobstore.internal/packages/package-guid",
                image=image,
                docker_username=docker_username,
                docker_password=docker_password,
            ),
            lifecycle=Lifecycle(type=lifecycle_type, buildpacks=tuple(buildpacks)),
            environment_variables=(
                {"FOO": "bar"} if environment_variables is None else environment_variables
            ),
            staging_memory_in_mb=1024,
            staging_disk_in_mb=4096,
            start_after_staging=start_after_staging,
        )

    return _make


@pytest.fixture
def buildpack_lifecycle_data() -> BuildpackLifecycleData:
    """Canned buildpack lifecycle data."""
    return BuildpackLifecycleData(
        droplet_upload_uri="https://cc.internal:8443/internal/v4/droplets/abc-123/upload",
        app_bits_download_uri="https://blobstore.internal/packages/package-guid",
        buildpacks=[{"name": "ruby_buildpack", "key": "ruby_buildpack", "skip_detect": True}],
    )


@pytest.fixture
def buildpack_action_builder(buildpack_lifecycle_data) -> MockStagingActionBuilder:
    """Action builder for buildpack staging with a LANG task variable."""
    return MockStagingActionBuilder(
        lifecycle_data=buildpack_lifecycle_data,
        task_environment=[EnvironmentVariable(name="LANG", value="en_US.UTF-8")],
    )


@pytest.fixture
def docker_action_builder() -> MockStagingActionBuilder:
    """Action builder for docker staging."""
    return MockStagingActionBuilder()

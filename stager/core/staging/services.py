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

"""Domain services for the Staging module."""

import logging

from stager.common.config import StagerConfig
from stager.core.staging.callbacks import build_completion_callback
from stager.core.staging.entities import StagingDetails, StagingRequest
from stager.core.staging.environment import build_environment
from stager.core.staging.lifecycles import encode_lifecycle
from stager.core.staging.repositories import LifecycleProtocolResolver
from stager.core.staging.value_objects import LifecycleType

logger = logging.getLogger(__name__)


class StagingRequestAssembler:
    """Builds the scheduler wire request for one staging attempt.

    Performs no I/O; the result depends only on its inputs and the
    configuration passed at construction.
    """

    def __init__(self, config: StagerConfig, resolver: LifecycleProtocolResolver):
        """Initialize assembler with configuration and lifecycle resolver."""
        self._config = config
        self._resolver = resolver

    def assemble(
        self,
        staging_guid: str,
        lifecycle_type: LifecycleType,
        staging_details: StagingDetails,
    ) -> StagingRequest:
        """Compose identity, limits, lifecycle, environment and callback.

        Args:
            staging_guid: Staging identifier.
            lifecycle_type: Lifecycle kind, already validated by the caller.
            staging_details: Details of the staging attempt.

        Returns:
            Immutable StagingRequest.

        Raises:
            InvalidLifecycleTypeError: If the kind has no encoder.
            MissingLifecycleDataError: If buildpack lifecycle data is missing.
        """
        action_builder = self._resolver.staging_action_builder(lifecycle_type, staging_details)
        package = staging_details.package
        app = package.app

        lifecycle = encode_lifecycle(
            lifecycle_type,
            staging_guid,
            package,
            action_builder,
            self._config.opi.cc_uploader_url,
        )
        environment = build_environment(
            staging_details.environment_variables,
            action_builder.task_environment_variables(),
        )
        completion_callback = build_completion_callback(
            staging_details.staging_guid,
            staging_details.start_after_staging,
            self._config.internal_api,
            self._config.server,
        )

        logger.debug(
            "Assembled staging request: staging_guid=%s, lifecycle=%s, env_count=%d",
            staging_guid,
            lifecycle_type,
            len(environment),
        )

        return StagingRequest(
            app_guid=package.app_guid,
            app_name=app.name,
            staging_guid=staging_guid,
            org_name=app.organization.name,
            org_guid=app.organization.guid,
            space_name=app.space.name,
            space_guid=app.space.guid,
            environment=tuple(environment),
            completion_callback=completion_callback,
            lifecycle=lifecycle,
            cpu_weight=self._config.staging.cpu_weight,
            disk_mb=staging_details.staging_disk_in_mb,
            memory_mb=staging_details.staging_memory_in_mb,
        )

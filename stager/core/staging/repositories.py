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

"""Collaborator interfaces for the Staging module."""

from abc import ABC, abstractmethod
from typing import List, Optional

from stager.core.staging.entities import (
    BuildpackLifecycleData,
    DispatchOutcome,
    StagingDetails,
    StagingRequest,
)
from stager.core.staging.value_objects import EnvironmentVariable, LifecycleType


class StagingActionBuilder(ABC):
    """Lifecycle-specific data needed to build a staging request."""

    @abstractmethod
    def lifecycle_data(self) -> Optional[BuildpackLifecycleData]:
        """Return buildpack lifecycle data, or None for lifecycles without it."""
        ...

    @abstractmethod
    def task_environment_variables(self) -> List[EnvironmentVariable]:
        """Return environment variables the lifecycle adds to the staging task."""
        ...


class LifecycleProtocolResolver(ABC):
    """Resolves the action builder for a lifecycle kind."""

    @abstractmethod
    def staging_action_builder(
        self,
        lifecycle_type: LifecycleType,
        staging_details: StagingDetails,
    ) -> StagingActionBuilder:
        """Return the action builder for one staging attempt.

        Args:
            lifecycle_type: Validated lifecycle kind.
            staging_details: Details of the staging attempt.

        Returns:
            Action builder exposing lifecycle data and task environment.
        """
        ...


class SchedulerClient(ABC):
    """Port to the remote container-build scheduler."""

    @abstractmethod
    def stage(self, staging_guid: str, staging_request: StagingRequest) -> DispatchOutcome:
        """Submit a staging request in a single round trip.

        Args:
            staging_guid: Staging identifier used in the request path.
            staging_request: Fully assembled wire payload.

        Returns:
            Accepted on 202, Rejected carrying the scheduler message otherwise.

        Raises:
            SchedulerResponseError: If a non-202 body lacks a message.
            ValueError: If a non-202 body is not valid JSON.
            httpx.HTTPError: On transport failure.
        """
        ...

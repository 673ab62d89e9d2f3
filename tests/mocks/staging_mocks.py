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

"""Hand-written collaborators for staging tests."""

from typing import List, Optional

from stager.core.staging.entities import Accepted, BuildpackLifecycleData
from stager.core.staging.repositories import (
    LifecycleProtocolResolver,
    SchedulerClient,
    StagingActionBuilder,
)
from stager.core.staging.value_objects import EnvironmentVariable


class MockStagingActionBuilder(StagingActionBuilder):
    """Action builder returning canned lifecycle data."""

    def __init__(
        self,
        lifecycle_data: Optional[BuildpackLifecycleData] = None,
        task_environment: Optional[List[EnvironmentVariable]] = None,
    ):
        """Initialize mock with canned data."""
        self._lifecycle_data = lifecycle_data
        self._task_environment = list(task_environment or [])

    def lifecycle_data(self):
        """Return canned lifecycle data."""
        return self._lifecycle_data

    def task_environment_variables(self):
        """Return canned task environment."""
        return list(self._task_environment)


class MockLifecycleProtocolResolver(LifecycleProtocolResolver):
    """Resolver handing out one action builder and recording calls."""

    def __init__(self, action_builder: StagingActionBuilder):
        """Initialize mock with the builder to return."""
        self.action_builder = action_builder
        self.calls = []

    def staging_action_builder(self, lifecycle_type, staging_details):
        """Record the call and return the canned builder."""
        self.calls.append((lifecycle_type, staging_details))
        return self.action_builder


class SpySchedulerClient(SchedulerClient):
    """Scheduler client recording every call and returning a fixed outcome."""

    def __init__(self, outcome=None, error: Optional[Exception] = None):
        """Initialize spy with the outcome or error to produce."""
        self.outcome = outcome if outcome is not None else Accepted()
        self.error = error
        self.calls = []

    def stage(self, staging_guid, staging_request):
        """Record the call and return the canned outcome."""
        self.calls.append((staging_guid, staging_request))
        if self.error is not None:
            raise self.error
        return self.outcome

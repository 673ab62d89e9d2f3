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

"""Staging domain module.

This module contains domain logic for building scheduler staging requests.
"""

from stager.core.staging.entities import (
    Accepted,
    App,
    DispatchOutcome,
    Lifecycle,
    Organization,
    Package,
    Rejected,
    Space,
    StagingDetails,
    StagingRequest,
)
from stager.core.staging.exceptions import (
    InvalidLifecycleTypeError,
    InvalidStagingGuidError,
    RunnerError,
    SchedulerResponseError,
    StagingDomainError,
)
from stager.core.staging.value_objects import (
    EnvironmentVariable,
    LifecycleType,
    StagingGuid,
)

__all__ = [
    "Accepted",
    "App",
    "DispatchOutcome",
    "Lifecycle",
    "Organization",
    "Package",
    "Rejected",
    "Space",
    "StagingDetails",
    "StagingRequest",
    "InvalidLifecycleTypeError",
    "InvalidStagingGuidError",
    "RunnerError",
    "SchedulerResponseError",
    "StagingDomainError",
    "EnvironmentVariable",
    "LifecycleType",
    "StagingGuid",
]

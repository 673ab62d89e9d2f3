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

"""Staging command DTOs."""

from dataclasses import dataclass

from stager.core.staging.entities import StagingDetails


@dataclass(frozen=True)
class StageAppCommand:
    """Command to submit one staging job to the scheduler.

    Attributes:
        staging_guid: Staging identifier used in the scheduler path.
        staging_details: Details of the staging attempt.
        correlation_id: Request correlation identifier for tracing.
    """

    staging_guid: str
    staging_details: StagingDetails
    correlation_id: str = ""


@dataclass(frozen=True)
class StopStagingCommand:
    """Command to stop a running staging job."""

    staging_guid: str
    correlation_id: str = ""

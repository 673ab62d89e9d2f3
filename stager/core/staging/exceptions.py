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

"""Staging domain exceptions."""

from typing import Optional


class StagingDomainError(Exception):
    """Base exception for staging domain errors."""

    def __init__(self, message: str, correlation_id: Optional[str] = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error description.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(message)
        self.message = message
        self.correlation_id = correlation_id


class InvalidLifecycleTypeError(StagingDomainError):
    """Raised when the staging lifecycle kind is not buildpack or docker."""

    def __init__(self, lifecycle_type: object, correlation_id: Optional[str] = None) -> None:
        """Initialize invalid lifecycle error.

        Args:
            lifecycle_type: The rejected lifecycle kind.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"lifecycle type `{lifecycle_type}` is invalid",
            correlation_id=correlation_id,
        )
        self.lifecycle_type = lifecycle_type


class InvalidStagingGuidError(StagingDomainError):
    """Raised when the staging guid is empty or not URL-path safe."""


class MissingLifecycleDataError(StagingDomainError):
    """Raised when a buildpack action builder provides no lifecycle data."""


class RunnerError(StagingDomainError):
    """Scheduler rejected the staging request.

    ``message`` carries the scheduler's diagnostic verbatim.
    """

    def __init__(
        self,
        message: str,
        staging_guid: str = "",
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize runner error.

        Args:
            message: Message returned by the scheduler.
            staging_guid: The staging request that was rejected.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(message, correlation_id=correlation_id)
        self.staging_guid = staging_guid


class SchedulerResponseError(StagingDomainError):
    """Scheduler error response did not carry the expected structure."""

    def __init__(
        self,
        status_code: int,
        reason: str = "",
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize scheduler response error.

        Args:
            status_code: HTTP status returned by the scheduler.
            reason: Why the body could not be interpreted.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Unexpected scheduler response (status {status_code}): {reason}",
            correlation_id=correlation_id,
        )
        self.status_code = status_code
        self.reason = reason

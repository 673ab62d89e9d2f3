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

"""StageApp use case implementation."""

import logging
from datetime import datetime, timezone

from stager.common.logging_utils import log_secure_info
from stager.core.staging.entities import Accepted, DispatchOutcome, Rejected
from stager.core.staging.exceptions import (
    InvalidLifecycleTypeError,
    InvalidStagingGuidError,
    RunnerError,
)
from stager.core.staging.repositories import SchedulerClient
from stager.core.staging.services import StagingRequestAssembler
from stager.core.staging.value_objects import LifecycleType, StagingGuid
from stager.orchestrator.staging.commands import StageAppCommand, StopStagingCommand
from stager.orchestrator.staging.dtos import StagingResponse

logger = logging.getLogger(__name__)


class StageAppUseCase:
    """Use case for submitting a staging job to the scheduler.

    Guarantees:
    - Lifecycle validation: only buildpack and docker are dispatched, and an
      unknown kind fails before any network I/O
    - Single attempt: exactly one scheduler round trip, no retries
    - Rejections surface as RunnerError carrying the scheduler's message

    Attributes:
        assembler: Builds the wire request.
        scheduler_client: Scheduler port.
    """

    def __init__(
        self,
        assembler: StagingRequestAssembler,
        scheduler_client: SchedulerClient,
    ) -> None:
        """Initialize use case with its collaborators.

        Args:
            assembler: Staging request assembler.
            scheduler_client: Scheduler client implementation.
        """
        self._assembler = assembler
        self._scheduler_client = scheduler_client

    def execute(self, command: StageAppCommand) -> StagingResponse:
        """Dispatch one staging job.

        Args:
            command: StageApp command with staging guid and details.

        Returns:
            StagingResponse DTO with acceptance details.

        Raises:
            InvalidLifecycleTypeError: If the lifecycle kind is unsupported.
            InvalidStagingGuidError: If the staging guid is not URL-path safe
                or differs from the guid in the staging details.
            RunnerError: If the scheduler rejected the request.
            SchedulerResponseError: If the rejection body had no message.
            ValueError: If the rejection body was not JSON.
            httpx.HTTPError: On transport failure.
        """
        log_secure_info(
            "info",
            f"stage.request staging_guid={command.staging_guid}",
            identifier=command.correlation_id or None,
            logger_name=__name__,
        )

        lifecycle_type = self._validate_lifecycle(command)
        staging_guid = self._validate_staging_guid(command)

        request = self._assembler.assemble(
            str(staging_guid), lifecycle_type, command.staging_details
        )
        outcome = self._scheduler_client.stage(str(staging_guid), request)
        self._interpret(command, outcome)

        return StagingResponse(
            staging_guid=str(staging_guid),
            app_guid=request.app_guid,
            lifecycle=str(lifecycle_type),
            status="accepted",
            submitted_at=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            correlation_id=command.correlation_id,
        )

    def _validate_lifecycle(self, command: StageAppCommand) -> LifecycleType:
        """Validate and create LifecycleType value object."""
        lifecycle_type = command.staging_details.lifecycle.type
        try:
            return LifecycleType(lifecycle_type)
        except ValueError as exc:
            log_secure_info(
                "error",
                f"stage.invalid_lifecycle staging_guid={command.staging_guid} "
                f"lifecycle={lifecycle_type}",
                logger_name=__name__,
            )
            raise InvalidLifecycleTypeError(
                lifecycle_type,
                correlation_id=command.correlation_id,
            ) from exc

    def _validate_staging_guid(self, command: StageAppCommand) -> StagingGuid:
        """Validate and create StagingGuid value object.

        The details' guid feeds the callback and droplet URLs, so it must
        name the same staging as the scheduler path.
        """
        try:
            staging_guid = StagingGuid(command.staging_guid)
        except ValueError as exc:
            raise InvalidStagingGuidError(
                message=str(exc),
                correlation_id=command.correlation_id,
            ) from exc
        if command.staging_details.staging_guid != staging_guid.value:
            raise InvalidStagingGuidError(
                message=(
                    f"Staging guid mismatch: command has {command.staging_guid}, "
                    f"details have {command.staging_details.staging_guid}"
                ),
                correlation_id=command.correlation_id,
            )
        return staging_guid

    def _interpret(self, command: StageAppCommand, outcome: DispatchOutcome) -> None:
        """Turn a scheduler outcome into success or RunnerError."""
        if isinstance(outcome, Accepted):
            logger.info("stage.accepted staging_guid=%s", command.staging_guid)
            return
        if isinstance(outcome, Rejected):
            log_secure_info(
                "info",
                f"stage.response staging_guid={command.staging_guid} error={outcome.message}",
                logger_name=__name__,
            )
            raise RunnerError(
                outcome.message,
                staging_guid=command.staging_guid,
                correlation_id=command.correlation_id,
            )
        raise TypeError(f"Unknown dispatch outcome: {outcome!r}")


class StopStagingUseCase:
    """Use case for stopping a staging job.

    The scheduler exposes no stop call yet, so this only records the intent.
    """

    def execute(self, command: StopStagingCommand) -> None:
        """Accept a stop request without contacting the scheduler."""
        logger.info(
            "stage.stop staging_guid=%s, correlation_id=%s (no-op)",
            command.staging_guid,
            command.correlation_id,
        )

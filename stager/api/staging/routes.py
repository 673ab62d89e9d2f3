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

"""FastAPI routes for staging operations."""

from datetime import datetime, timezone

import httpx
from fastapi import APIRouter, Depends, HTTPException, status

from stager.api.staging.dependencies import (
    get_stage_app_use_case,
    get_staging_correlation_id,
    get_stop_staging_use_case,
)
from stager.api.staging.schemas import (
    StageAppRequest,
    StageAppResponse,
    StagingErrorResponse,
    StopStagingResponse,
)
from stager.common.logging_utils import log_secure_info
from stager.core.staging.exceptions import (
    InvalidLifecycleTypeError,
    InvalidStagingGuidError,
    RunnerError,
    SchedulerResponseError,
    StagingDomainError,
)
from stager.orchestrator.staging.commands import StageAppCommand, StopStagingCommand
from stager.orchestrator.staging.use_cases import StageAppUseCase, StopStagingUseCase

router = APIRouter(prefix="/staging", tags=["Staging"])


def _build_error_response(
    error_code: str,
    message: str,
    correlation_id: str,
) -> StagingErrorResponse:
    return StagingErrorResponse(
        error=error_code,
        message=message,
        correlation_id=correlation_id,
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    )


def _raise_http_error(
    status_code: int,
    error_code: str,
    message: str,
    correlation_id: str,
    exc: Exception,
) -> None:
    raise HTTPException(
        status_code=status_code,
        detail=_build_error_response(error_code, message, correlation_id).model_dump(),
    ) from exc


@router.post(
    "/{staging_guid}",
    response_model=StageAppResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Stage app",
    description="Submit a staging job to the container-build scheduler",
    responses={
        202: {"description": "Staging accepted", "model": StageAppResponse},
        400: {"description": "Invalid request", "model": StagingErrorResponse},
        500: {"description": "Runner error", "model": StagingErrorResponse},
        502: {"description": "Bad scheduler response", "model": StagingErrorResponse},
        503: {"description": "Scheduler unavailable", "model": StagingErrorResponse},
    },
)
def stage_app(
    staging_guid: str,
    request_body: StageAppRequest,
    use_case: StageAppUseCase = Depends(get_stage_app_use_case),
    correlation_id: str = Depends(get_staging_correlation_id),
) -> StageAppResponse:
    """Submit a staging job.

    Returns 202 once the scheduler has accepted the job. Completion is
    reported later by the scheduler through the callback URL.
    """
    log_secure_info(
        "info",
        f"Stage app request: staging_guid={staging_guid}, "
        f"lifecycle={request_body.lifecycle.type}, app_guid={request_body.package.app.guid}",
        identifier=correlation_id,
    )

    try:
        command = StageAppCommand(
            staging_guid=staging_guid,
            staging_details=request_body.to_staging_details(staging_guid),
            correlation_id=correlation_id,
        )
        result = use_case.execute(command)

        log_secure_info(
            "info",
            f"Stage app success: staging_guid={staging_guid}, "
            f"lifecycle={result.lifecycle}, status=202",
        )

        return StageAppResponse(
            staging_guid=result.staging_guid,
            app_guid=result.app_guid,
            lifecycle=result.lifecycle,
            status=result.status,
            submitted_at=result.submitted_at,
            correlation_id=result.correlation_id,
        )

    except InvalidLifecycleTypeError as exc:
        log_secure_info(
            "warning",
            f"Stage app failed: staging_guid={staging_guid}, reason=invalid_lifecycle_type, status=400",
        )
        _raise_http_error(
            status.HTTP_400_BAD_REQUEST, "INVALID_LIFECYCLE_TYPE", exc.message, correlation_id, exc
        )

    except InvalidStagingGuidError as exc:
        log_secure_info(
            "warning",
            f"Stage app failed: staging_guid={staging_guid}, reason=invalid_staging_guid, status=400",
        )
        _raise_http_error(
            status.HTTP_400_BAD_REQUEST, "INVALID_STAGING_GUID", exc.message, correlation_id, exc
        )

    except RunnerError as exc:
        log_secure_info(
            "warning",
            f"Stage app failed: staging_guid={staging_guid}, reason=runner_error, status=500",
        )
        _raise_http_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "RUNNER_ERROR", exc.message, correlation_id, exc
        )

    except (SchedulerResponseError, ValueError) as exc:
        log_secure_info(
            "error",
            f"Stage app failed: staging_guid={staging_guid}, reason=bad_scheduler_response, status=502",
        )
        _raise_http_error(
            status.HTTP_502_BAD_GATEWAY,
            "SCHEDULER_BAD_RESPONSE",
            "The scheduler returned an unreadable response",
            correlation_id,
            exc,
        )

    except httpx.HTTPError as exc:
        log_secure_info(
            "error",
            f"Stage app failed: staging_guid={staging_guid}, reason=scheduler_unavailable, status=503",
        )
        _raise_http_error(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "SCHEDULER_UNAVAILABLE",
            "The scheduler could not be reached",
            correlation_id,
            exc,
        )

    except StagingDomainError as exc:
        log_secure_info(
            "error",
            f"Stage app failed: staging_guid={staging_guid}, reason=domain_error, status=500",
        )
        _raise_http_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "STAGING_ERROR", exc.message, correlation_id, exc
        )


@router.post(
    "/{staging_guid}/stop",
    response_model=StopStagingResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Stop staging",
    description="Request that a staging job be stopped",
)
def stop_staging(
    staging_guid: str,
    use_case: StopStagingUseCase = Depends(get_stop_staging_use_case),
    correlation_id: str = Depends(get_staging_correlation_id),
) -> StopStagingResponse:
    """Accept a stop request for a staging job."""
    use_case.execute(StopStagingCommand(staging_guid=staging_guid, correlation_id=correlation_id))
    return StopStagingResponse(
        staging_guid=staging_guid,
        status="accepted",
        correlation_id=correlation_id,
    )

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

"""httpx-based implementation of SchedulerClient."""

import logging
import ssl
from typing import Union

import httpx
from pydantic import ValidationError

from stager.common.config import OpiConfig
from stager.common.logging_utils import log_secure_info
from stager.core.staging.entities import Accepted, DispatchOutcome, Rejected, StagingRequest
from stager.core.staging.exceptions import SchedulerResponseError
from stager.core.staging.repositories import SchedulerClient
from stager.infra.scheduler.schemas import SchedulerErrorBody

logger = logging.getLogger(__name__)

ACCEPTED_STATUS = 202


def create_http_client(opi: OpiConfig) -> httpx.Client:
    """Create the shared scheduler HTTP client.

    The client is thread-safe and pools connections across staging calls.
    Timeouts are only enforced when configured.
    """
    verify: Union[bool, ssl.SSLContext] = True
    if opi.ca_file or opi.client_cert_file:
        verify = ssl.create_default_context(cafile=opi.ca_file)
        if opi.client_cert_file and opi.client_key_file:
            verify.load_cert_chain(opi.client_cert_file, opi.client_key_file)

    client = httpx.Client(
        base_url=opi.url,
        timeout=opi.timeout_seconds,
        verify=verify,
    )
    logger.debug("Scheduler HTTP client created for %s", opi.url)
    return client


class HttpSchedulerClient(SchedulerClient):
    """Submits staging requests to the scheduler over HTTP.

    One POST per call; no retries.
    """

    def __init__(self, http_client: httpx.Client) -> None:
        """Initialize with a configured httpx client.

        Args:
            http_client: Client whose base_url points at the scheduler.
        """
        self._http_client = http_client

    def stage(self, staging_guid: str, staging_request: StagingRequest) -> DispatchOutcome:
        """POST the staging request and classify the response.

        Raises:
            SchedulerResponseError: If a non-202 body lacks a string message.
            ValueError: If a non-202 body is not valid JSON.
            httpx.HTTPError: On transport failure.
        """
        response = self._http_client.post(
            f"/stage/{staging_guid}",
            json=staging_request.to_dict(),
        )

        if response.status_code == ACCEPTED_STATUS:
            return Accepted()

        body = response.json()
        try:
            error_body = SchedulerErrorBody.model_validate(body)
        except ValidationError as exc:
            log_secure_info(
                "error",
                f"stage.response staging_guid={staging_guid} status={response.status_code} "
                "reason=unexpected_error_body",
                logger_name=__name__,
            )
            raise SchedulerResponseError(
                status_code=response.status_code,
                reason="response body has no message",
            ) from exc

        return Rejected(message=error_body.message, status_code=response.status_code)

    def close(self) -> None:
        """Release pooled connections."""
        self._http_client.close()

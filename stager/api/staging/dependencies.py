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

"""FastAPI dependency providers for the Staging API."""

import re
import uuid
from typing import Optional

from fastapi import Header

from stager.orchestrator.staging.use_cases import StageAppUseCase, StopStagingUseCase

_CORRELATION_ID_PATTERN = re.compile(r"^[A-Za-z0-9_\-]{1,128}$")


def _get_container():
    """Lazy import of container to avoid circular imports."""
    from stager.container import container  # pylint: disable=import-outside-toplevel
    return container


def get_stage_app_use_case() -> StageAppUseCase:
    """Provide the stage app use case."""
    return _get_container().stage_app_use_case()


def get_stop_staging_use_case() -> StopStagingUseCase:
    """Provide the stop staging use case."""
    return _get_container().stop_staging_use_case()


def get_staging_correlation_id(
    x_correlation_id: Optional[str] = Header(
        default=None,
        alias="X-Correlation-Id",
        description="Request tracing ID",
    ),
) -> str:
    """Return provided correlation ID or generate one."""
    if x_correlation_id and _CORRELATION_ID_PATTERN.match(x_correlation_id):
        return x_correlation_id
    return str(uuid.uuid4())

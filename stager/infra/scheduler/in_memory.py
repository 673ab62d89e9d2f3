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

"""In-memory SchedulerClient for development and testing."""

import threading
from collections import deque
from typing import Deque, Dict, List, Optional, Tuple

from stager.core.staging.entities import Accepted, DispatchOutcome, Rejected, StagingRequest
from stager.core.staging.repositories import SchedulerClient


class InMemorySchedulerClient(SchedulerClient):
    """Records submitted requests and accepts them unless told otherwise.

    For development and tests only. Only the most recent ``max_history``
    submissions are kept.
    """

    DEFAULT_MAX_HISTORY = 1000

    def __init__(self, max_history: int = DEFAULT_MAX_HISTORY) -> None:
        self._lock = threading.Lock()
        self._submitted: Deque[Tuple[str, StagingRequest]] = deque(maxlen=max_history)
        self._rejections: Dict[str, str] = {}

    def reject(self, staging_guid: str, message: str) -> None:
        """Make the next stage call for ``staging_guid`` come back rejected."""
        with self._lock:
            self._rejections[staging_guid] = message

    def stage(self, staging_guid: str, staging_request: StagingRequest) -> DispatchOutcome:
        with self._lock:
            self._submitted.append((staging_guid, staging_request))
            message = self._rejections.pop(staging_guid, None)
        if message is not None:
            return Rejected(message=message, status_code=400)
        return Accepted()

    def find_by_staging_guid(self, staging_guid: str) -> Optional[StagingRequest]:
        """Return the most recent request submitted for a staging guid."""
        with self._lock:
            for guid, request in reversed(self._submitted):
                if guid == staging_guid:
                    return request
        return None

    @property
    def submitted(self) -> List[Tuple[str, StagingRequest]]:
        """Snapshot of all submitted requests in submission order."""
        with self._lock:
            return list(self._submitted)

    def close(self) -> None:
        """Nothing to release."""

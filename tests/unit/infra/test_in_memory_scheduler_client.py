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

"""Unit tests for the in-memory scheduler client."""

from stager.core.staging.entities import Accepted, Rejected
from stager.core.staging.services import StagingRequestAssembler
from stager.core.staging.value_objects import LifecycleType
from stager.infra.scheduler import InMemorySchedulerClient
from tests.mocks.staging_mocks import MockLifecycleProtocolResolver


def _request(stager_config, details, action_builder):
    assembler = StagingRequestAssembler(
        stager_config, MockLifecycleProtocolResolver(action_builder)
    )
    return assembler.assemble(details.staging_guid, LifecycleType("buildpack"), details)


class TestInMemorySchedulerClient:
    """Test cases for InMemorySchedulerClient."""

    def test_accepts_and_records(
        self, stager_config, make_staging_details, buildpack_action_builder
    ):
        """Test that requests are accepted and kept for inspection."""
        client = InMemorySchedulerClient()
        request = _request(stager_config, make_staging_details(), buildpack_action_builder)

        outcome = client.stage("abc-123", request)

        assert outcome == Accepted()
        assert client.submitted == [("abc-123", request)]
        assert client.find_by_staging_guid("abc-123") is request

    def test_reject_applies_once(
        self, stager_config, make_staging_details, buildpack_action_builder
    ):
        """Test that a queued rejection is consumed by the next call."""
        client = InMemorySchedulerClient()
        request = _request(stager_config, make_staging_details(), buildpack_action_builder)
        client.reject("abc-123", "boom")

        first = client.stage("abc-123", request)
        second = client.stage("abc-123", request)

        assert first == Rejected(message="boom", status_code=400)
        assert second == Accepted()

    def test_find_unknown_guid(self):
        """Test lookup of a guid never submitted."""
        assert InMemorySchedulerClient().find_by_staging_guid("nope") is None

    def test_history_is_capped(
        self, stager_config, make_staging_details, buildpack_action_builder
    ):
        """Test that only the most recent submissions are retained."""
        client = InMemorySchedulerClient(max_history=2)
        request = _request(stager_config, make_staging_details(), buildpack_action_builder)

        for guid in ("first", "second", "third"):
            client.stage(guid, request)

        assert [guid for guid, _ in client.submitted] == ["second", "third"]
        assert client.find_by_staging_guid("first") is None

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

"""Completion callback URL construction.

The scheduler calls this URL once a build finishes; the stager only embeds
it in the staging request.
"""

from urllib.parse import quote_plus

from stager.common.config import InternalApiConfig, ServerConfig

CALLBACK_SCHEME = "https"


def build_completion_callback(
    staging_guid: str,
    start_after_staging: bool,
    internal_api: InternalApiConfig,
    server: ServerConfig,
) -> str:
    """Return the credentialed build-completed URL for a staging guid.

    The password is form-escaped so ``@``, ``:`` and ``/`` cannot break the
    authority; the username is used verbatim.

    Args:
        staging_guid: Staging identifier.
        start_after_staging: Whether the app starts once the build succeeds.
        internal_api: Internal API basic-auth credentials.
        server: Internal hostname and TLS port of this system.

    Returns:
        Absolute https URL.
    """
    auth = f"{internal_api.auth_user}:{quote_plus(internal_api.auth_password)}"
    host_port = f"{server.internal_service_hostname}:{server.tls_port}"
    start = "true" if start_after_staging else "false"
    path = f"/internal/v3/staging/{staging_guid}/build_completed?start={start}"
    return f"{CALLBACK_SCHEME}://{auth}@{host_port}{path}"

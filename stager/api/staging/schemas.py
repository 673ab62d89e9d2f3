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

"""Pydantic schemas for Staging API requests and responses."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, SecretStr

from stager.core.staging.entities import (
    App,
    Lifecycle,
    Organization,
    Package,
    Space,
    StagingDetails,
)


class NamedResource(BaseModel):
    """Organization or space reference."""

    guid: str = Field(..., min_length=1, description="Resource identifier")
    name: str = Field(..., description="Display name")


class AppSchema(BaseModel):
    """Application being staged."""

    guid: str = Field(..., min_length=1, description="Application identifier")
    name: str = Field(..., description="Application display name")
    organization: NamedResource
    space: NamedResource


class PackageSchema(BaseModel):
    """Source package to build."""

    guid: str = Field(..., min_length=1, description="Package identifier")
    app: AppSchema
    bits_download_uri: Optional[str] = Field(None, description="App bits download URI (buildpack)")
    image: Optional[str] = Field(None, description="Registry image reference (docker)")
    docker_username: Optional[str] = Field(None, description="Registry username (docker)")
    docker_password: Optional[SecretStr] = Field(None, description="Registry password (docker)")


class LifecycleSchema(BaseModel):
    """Requested lifecycle.

    ``type`` is not restricted here so that unsupported kinds reach the
    dispatch entry point and are rejected there.
    """

    type: str = Field(..., description="Lifecycle kind (buildpack or docker)")
    buildpacks: List[str] = Field(default_factory=list, description="Requested buildpacks")


class StageAppRequest(BaseModel):
    """Request model for submitting a staging job."""

    package: PackageSchema
    lifecycle: LifecycleSchema
    environment_variables: Dict[str, Any] = Field(
        default_factory=dict,
        description="Caller-supplied environment variables",
    )
    staging_memory_in_mb: int = Field(..., gt=0, description="Staging memory limit (MB)")
    staging_disk_in_mb: int = Field(..., gt=0, description="Staging disk limit (MB)")
    start_after_staging: bool = Field(False, description="Start the app after a successful build")

    def to_staging_details(self, staging_guid: str) -> StagingDetails:
        """Map the request onto the domain StagingDetails."""
        app = self.package.app
        password = self.package.docker_password
        return StagingDetails(
            staging_guid=staging_guid,
            package=Package(
                guid=self.package.guid,
                app=App(
                    guid=app.guid,
                    name=app.name,
                    organization=Organization(guid=app.organization.guid, name=app.organization.name),
                    space=Space(guid=app.space.guid, name=app.space.name),
                ),
                bits_download_uri=self.package.bits_download_uri,
                image=self.package.image,
                docker_username=self.package.docker_username,
                docker_password=password.get_secret_value() if password is not None else None,
            ),
            lifecycle=Lifecycle(type=self.lifecycle.type, buildpacks=tuple(self.lifecycle.buildpacks)),
            environment_variables=dict(self.environment_variables),
            staging_memory_in_mb=self.staging_memory_in_mb,
            staging_disk_in_mb=self.staging_disk_in_mb,
            start_after_staging=self.start_after_staging,
        )


class StageAppResponse(BaseModel):
    """Response model for staging acceptance (202 Accepted)."""

    staging_guid: str = Field(..., description="Staging identifier")
    app_guid: str = Field(..., description="Application identifier")
    lifecycle: str = Field(..., description="Lifecycle kind")
    status: str = Field(..., description="Acceptance status")
    submitted_at: str = Field(..., description="Submission timestamp (ISO 8601)")
    correlation_id: str = Field(..., description="Correlation identifier")


class StopStagingResponse(BaseModel):
    """Response model for a stop request (202 Accepted)."""

    staging_guid: str = Field(..., description="Staging identifier")
    status: str = Field(..., description="Acceptance status")
    correlation_id: str = Field(..., description="Correlation identifier")


class StagingErrorResponse(BaseModel):
    """Standard error response body for staging operations."""

    error: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    correlation_id: str = Field(..., description="Request correlation ID")
    timestamp: str = Field(..., description="Error timestamp (ISO 8601)")

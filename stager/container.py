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

"""Dependency Injector containers for the OPI stager."""
# pylint: disable=c-extension-no-member

import logging
import os

from dependency_injector import containers, providers

from stager.common.config import StagerConfig, default_config, load_config
from stager.core.staging.services import StagingRequestAssembler
from stager.infra.lifecycle import DefaultLifecycleProtocolResolver
from stager.infra.scheduler import (
    HttpSchedulerClient,
    InMemorySchedulerClient,
    create_http_client,
)
from stager.orchestrator.staging.use_cases import StageAppUseCase, StopStagingUseCase

logger = logging.getLogger(__name__)


def _create_dev_config() -> StagerConfig:
    """Load configuration, falling back to development defaults.

    Returns:
        StagerConfig from file, or default_config() if none is usable.
    """
    try:
        return load_config()
    except (FileNotFoundError, ValueError) as exc:
        logger.warning("Using development configuration: %s", exc)
        return default_config()


class DevContainer(containers.DeclarativeContainer):  # pylint: disable=R0903
    """Development profile container.

    Uses an in-memory scheduler client that accepts every request.
    No scheduler needs to be reachable.

    Activated when ENV=dev (default).
    """

    config = providers.Singleton(_create_dev_config)

    scheduler_client = providers.Singleton(InMemorySchedulerClient)

    lifecycle_protocol_resolver = providers.Singleton(
        DefaultLifecycleProtocolResolver,
        config=config,
    )

    staging_request_assembler = providers.Factory(
        StagingRequestAssembler,
        config=config,
        resolver=lifecycle_protocol_resolver,
    )

    # --- Use cases ---
    stage_app_use_case = providers.Factory(
        StageAppUseCase,
        assembler=staging_request_assembler,
        scheduler_client=scheduler_client,
    )

    stop_staging_use_case = providers.Factory(StopStagingUseCase)


class ProdContainer(containers.DeclarativeContainer):  # pylint: disable=R0903
    """Production profile container.

    Talks to the scheduler over HTTP; the configuration file is mandatory.

    Activated when ENV=prod.
    """

    config = providers.Singleton(load_config)

    http_client = providers.Singleton(
        create_http_client,
        opi=config.provided.opi,
    )

    scheduler_client = providers.Singleton(
        HttpSchedulerClient,
        http_client=http_client,
    )

    lifecycle_protocol_resolver = providers.Singleton(
        DefaultLifecycleProtocolResolver,
        config=config,
    )

    staging_request_assembler = providers.Factory(
        StagingRequestAssembler,
        config=config,
        resolver=lifecycle_protocol_resolver,
    )

    # --- Use cases ---
    stage_app_use_case = providers.Factory(
        StageAppUseCase,
        assembler=staging_request_assembler,
        scheduler_client=scheduler_client,
    )

    stop_staging_use_case = providers.Factory(StopStagingUseCase)


def get_container_class():
    """Select container class based on ENV environment variable.

    Returns:
        DevContainer if ENV=dev (default)
        ProdContainer if ENV=prod
    """
    env = os.getenv("ENV", "dev").lower()

    if env == "prod":
        return ProdContainer

    return DevContainer


Container = get_container_class()

# Singleton container instance shared across app and dependencies
container = Container()

__all__ = ["Container", "DevContainer", "ProdContainer", "container", "get_container_class"]

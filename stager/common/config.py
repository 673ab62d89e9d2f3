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

"""Configuration loader for the OPI stager."""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_CONFIG_PATH = "/opt/stager/stager.ini"
DEFAULT_CPU_WEIGHT = 50
DEFAULT_LANG = "en_US.UTF-8"


@dataclass(frozen=True)
class OpiConfig:
    """Scheduler (OPI) connection configuration."""
    url: str
    cc_uploader_url: str
    timeout_seconds: Optional[float] = None
    ca_file: Optional[str] = None
    client_cert_file: Optional[str] = None
    client_key_file: Optional[str] = None


@dataclass(frozen=True)
class InternalApiConfig:
    """Basic-auth credentials for the internal staging completion API."""
    auth_user: str
    auth_password: str

    def __repr__(self) -> str:
        return f"InternalApiConfig(auth_user={self.auth_user!r}, auth_password=<REDACTED>)"


@dataclass(frozen=True)
class ServerConfig:
    """Addressing of this service as seen by the scheduler."""
    internal_service_hostname: str
    tls_port: int


@dataclass(frozen=True)
class StagingConfig:
    """Fixed staging task parameters."""
    cpu_weight: int = DEFAULT_CPU_WEIGHT
    default_lang: str = DEFAULT_LANG


@dataclass(frozen=True)
class StagerConfig:
    """Process-wide, immutable stager configuration."""
    opi: OpiConfig
    internal_api: InternalApiConfig
    server: ServerConfig
    staging: StagingConfig


def _require(parser: configparser.ConfigParser, section: str, option: str) -> str:
    """Return a mandatory option or raise ValueError naming it."""
    value = parser.get(section, option, fallback="").strip()
    if not value:
        raise ValueError(f"Missing required configuration value: [{section}] {option}")
    return value


def _optional(parser: configparser.ConfigParser, section: str, option: str) -> Optional[str]:
    value = parser.get(section, option, fallback="").strip()
    return value or None


def load_config(config_path: Optional[str] = None) -> StagerConfig:
    """Load stager configuration from an INI file.

    Args:
        config_path: Path to configuration file. If None, uses STAGER_CONFIG_PATH
                    environment variable or the default path.

    Returns:
        StagerConfig instance.

    Raises:
        FileNotFoundError: If config file not found.
        ValueError: If config is invalid.
    """
    if config_path is None:
        config_path = os.getenv("STAGER_CONFIG_PATH", DEFAULT_CONFIG_PATH)

    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    # Interpolation off: passwords may legitimately contain '%'
    parser = configparser.ConfigParser(interpolation=None)
    parser.read(config_file)

    if not parser.sections():
        raise ValueError(f"Empty configuration file: {config_file}")

    timeout_seconds = None
    if parser.has_option("opi", "timeout_seconds"):
        timeout_seconds = parser.getfloat("opi", "timeout_seconds")
        if timeout_seconds <= 0:
            raise ValueError(f"[opi] timeout_seconds must be positive, got {timeout_seconds}")

    opi = OpiConfig(
        url=_require(parser, "opi", "url").rstrip("/"),
        cc_uploader_url=_require(parser, "opi", "cc_uploader_url").rstrip("/"),
        timeout_seconds=timeout_seconds,
        ca_file=_optional(parser, "opi", "ca_file"),
        client_cert_file=_optional(parser, "opi", "client_cert_file"),
        client_key_file=_optional(parser, "opi", "client_key_file"),
    )

    internal_api = InternalApiConfig(
        auth_user=_require(parser, "internal_api", "auth_user"),
        auth_password=_require(parser, "internal_api", "auth_password"),
    )

    tls_port = int(_require(parser, "server", "tls_port"))
    if not 1 <= tls_port <= 65535:
        raise ValueError(f"[server] tls_port {tls_port} is not in valid range 1-65535")

    server = ServerConfig(
        internal_service_hostname=_require(parser, "server", "internal_service_hostname"),
        tls_port=tls_port,
    )

    staging = StagingConfig(
        cpu_weight=parser.getint("staging", "cpu_weight", fallback=DEFAULT_CPU_WEIGHT),
        default_lang=parser.get("staging", "default_lang", fallback=DEFAULT_LANG),
    )

    return StagerConfig(
        opi=opi,
        internal_api=internal_api,
        server=server,
        staging=staging,
    )


def default_config() -> StagerConfig:
    """Development configuration used when no config file is present."""
    return StagerConfig(
        opi=OpiConfig(
            url="http://localhost:8085",
            cc_uploader_url="http://localhost:9090",
        ),
        internal_api=InternalApiConfig(auth_user="internal_user", auth_password="internal_password"),
        server=ServerConfig(internal_service_hostname="localhost", tls_port=9023),
        staging=StagingConfig(),
    )

"""
QRadar client: one shared dispatcher, one attribute per resource group.
"""

from __future__ import annotations

from typing import Any, Optional, Union

import requests

from .api import (
    AccessEndpoint,
    AnalyticsEndpoint,
    ArielEndpoint,
    AssetModelEndpoint,
    AuthEndpoint,
    BackupAndRestoreEndpoint,
    ConfigEndpoint,
    DataClassificationEndpoint,
    DisasterRecoveryEndpoint,
    DynamicSearchEndpoint,
    ForensicsEndpoint,
    GUIAppFrameworkEndpoint,
    HealthDataEndpoint,
    HelpEndpoint,
    ReferenceDataEndpoint,
    SIEMEndpoint,
)
from .core.config import PyQRadarConfig, QRadarConfig
from .core.errors import ConfigError
from .core.logging import get_logger
from .http.qradar_http import QRadarHttpClient


logger = get_logger("pyqradar.client")


class QRadarClient:
    """
    Entry point of the SDK.

    Example:
        >>> client = QRadarClient.from_config(load_config_from_file())
        >>> page = client.siem.list_offenses(None, filter="status=OPEN", min_item=0, max_item=49)
        >>> page.total, len(page.items)
    """

    def __init__(self, http_client: QRadarHttpClient) -> None:
        """
        Initialize the client.

        Args:
            http_client: Dispatcher shared by all the endpoint groups
        """
        self._http = http_client

        self.access = AccessEndpoint(http_client)
        self.analytics = AnalyticsEndpoint(http_client)
        self.ariel = ArielEndpoint(http_client)
        self.asset_model = AssetModelEndpoint(http_client)
        self.auth = AuthEndpoint(http_client)
        self.backup_and_restore = BackupAndRestoreEndpoint(http_client)
        self.config = ConfigEndpoint(http_client)
        self.data_classification = DataClassificationEndpoint(http_client)
        self.disaster_recovery = DisasterRecoveryEndpoint(http_client)
        self.dynamic_search = DynamicSearchEndpoint(http_client)
        self.forensics = ForensicsEndpoint(http_client)
        self.gui_app_framework = GUIAppFrameworkEndpoint(http_client)
        self.health_data = HealthDataEndpoint(http_client)
        self.help = HelpEndpoint(http_client)
        self.reference_data = ReferenceDataEndpoint(http_client)
        self.siem = SIEMEndpoint(http_client)

    @classmethod
    def from_config(
        cls,
        config: Union[PyQRadarConfig, QRadarConfig],
        session: Optional[requests.Session] = None,
    ) -> "QRadarClient":
        """
        Factory to construct a client from configuration.

        Args:
            config: PyQRadarConfig (its ``qradar`` section is used) or a QRadarConfig
            session: Optional pre-built ``requests.Session``

        Returns:
            QRadarClient instance

        Raises:
            ConfigError: If the QRadar section is not set
        """
        if isinstance(config, PyQRadarConfig):
            if not config.qradar:
                raise ConfigError("QRadar configuration is not set in PyQRadarConfig")
            qradar = config.qradar
        else:
            qradar = config

        logger.debug(f"Creating QRadar client for {qradar.base_url} (API version {qradar.version})")
        return cls(http_client=QRadarHttpClient.from_config(qradar, session=session))

    @property
    def http(self) -> QRadarHttpClient:
        return self._http

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "QRadarClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

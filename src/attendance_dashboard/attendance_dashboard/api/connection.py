from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests


@dataclass
class ApiConfig:
    base_url: str
    timeout: float = 20.0


class ApiConnection:
    """Singleton-like HTTP session factory for the remote summary API.

    Note: One pooled `requests.Session` is shared by all repositories.
    """

    _instance: Optional["ApiConnection"] = None

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session

    @classmethod
    def get_instance(cls, config: ApiConfig) -> "ApiConnection":
        if cls._instance is None or cls._instance._config != config:
            cls._instance = ApiConnection(config)
        return cls._instance

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def timeout(self) -> float:
        return float(self._config.timeout)

    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

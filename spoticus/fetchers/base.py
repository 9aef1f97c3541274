"""Base fetcher interface for control-plane reads.

This module defines the abstract base class and the error taxonomy shared by
all fetchers. Handlers only ever see these exception types, never the
client library's own.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from spoticus.models import ClusterSummary


class FetchError(Exception):
    """Base exception for fetch operations."""

    pass


class ConnectionError(FetchError):
    """Raised when connection to the control plane fails."""

    pass


class QueryError(FetchError):
    """Raised when a list query fails."""

    pass


class BaseFetcher(ABC):
    """Abstract base class for control-plane fetchers.

    Subclasses must implement:
        - connect(): Build the API client
        - list_clusters(): Return the clusters of one kind
    """

    def __init__(self, config: Dict[str, Any]):
        """Initialize the fetcher with configuration.

        Args:
            config: Configuration dictionary for the fetcher
        """
        self.config = config

    @abstractmethod
    def connect(self) -> None:
        """Prepare the client.

        Raises:
            ConnectionError: If the client cannot be configured
        """
        pass

    @abstractmethod
    def list_clusters(self, kind: str) -> List[ClusterSummary]:
        """List all clusters of the given kind, in control-plane order.

        Args:
            kind: "Kubernetes" or "OpenShift"

        Raises:
            QueryError: If the query fails
        """
        pass


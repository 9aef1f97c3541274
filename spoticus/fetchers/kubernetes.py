"""Kubernetes fetcher for mapt cluster custom resources."""

from typing import Any, Dict, List, Optional

import structlog
from kubernetes import client, config as kube_config
from kubernetes.client.exceptions import ApiException
from kubernetes.config.config_exception import ConfigException
from pydantic import ValidationError
from urllib3.exceptions import HTTPError

from spoticus.config import Config
from spoticus.fetchers.base import BaseFetcher, ConnectionError, QueryError
from spoticus.models import ClusterSummary

logger = structlog.get_logger(__name__)

KUBERNETES = "Kubernetes"
OPENSHIFT = "OpenShift"


class MaptClusterFetcher(BaseFetcher):
    """Fetcher for mapt ``Kind`` and ``Openshift`` resources.

    Uses the in-cluster service account when available and falls back to
    ~/.kube/config (optionally pinned to a context). Resources are listed
    cluster-wide through the CustomObjectsApi; only the metadata needed for
    a ClusterSummary is kept.
    """

    def __init__(self, config: Dict[str, Any]):
        """Initialize the fetcher.

        Args:
            config: Dictionary as returned by Config.get_kubernetes_config()
        """
        super().__init__(config)
        self._api: Optional[client.CustomObjectsApi] = None

    @classmethod
    def from_config(cls, config: Config) -> "MaptClusterFetcher":
        """Build a connected fetcher from the application config.

        Raises:
            ConnectionError: If no Kubernetes configuration can be loaded
        """
        fetcher = cls(config.get_kubernetes_config())
        fetcher.connect()
        return fetcher

    def connect(self) -> None:
        try:
            kube_config.load_incluster_config()
        except ConfigException:
            logger.debug("Not running in-cluster, loading kubeconfig", context=self.config.get("context"))
            try:
                kube_config.load_kube_config(context=self.config.get("context"))
            except (ConfigException, OSError) as e:
                raise ConnectionError(f"could not load Kubernetes configuration: {e}") from e
        self._api = client.CustomObjectsApi()

    def _plural_for(self, kind: str) -> str:
        if kind == KUBERNETES:
            return self.config.get("kind_plural", "kinds")
        if kind == OPENSHIFT:
            return self.config.get("openshift_plural", "openshifts")
        raise ValueError(f"Unknown cluster kind: {kind}")

    def list_clusters(self, kind: str) -> List[ClusterSummary]:
        if self._api is None:
            raise ConnectionError("fetcher is not connected")

        plural = self._plural_for(kind)
        group = self.config.get("group", "mapt.redhat.com")
        version = self.config.get("version", "v1alpha1")
        try:
            response = self._api.list_cluster_custom_object(group, version, plural)
        except ApiException as e:
            raise QueryError(f"listing {group}/{version} {plural} failed: {e.status} {e.reason}") from e
        except HTTPError as e:
            raise QueryError(f"listing {group}/{version} {plural} failed: {e}") from e

        items = response.get("items") or []
        try:
            return [ClusterSummary.from_resource(item, kind) for item in items]
        except ValidationError as e:
            raise QueryError(f"malformed {plural} resource in {group}/{version}: {e}") from e


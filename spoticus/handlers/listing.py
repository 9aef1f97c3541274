"""Handler for the ``list`` command."""

from typing import Callable, List

import structlog

from spoticus.fetchers.base import BaseFetcher, ConnectionError, FetchError
from spoticus.fetchers.kubernetes import KUBERNETES, OPENSHIFT
from spoticus.models import ClusterSummary, CommandContext

logger = structlog.get_logger(__name__)

CONNECT_FAILED = "❌ Failed to connect to Kubernetes cluster"
LIST_FAILED = "❌ Failed to retrieve cluster list"
NO_CLUSTERS = "📋 *Cluster List*\n\nNo MAPT clusters currently running."


def format_cluster_list(clusters: List[ClusterSummary]) -> str:
    """Render clusters as a Slack bullet listing.

    Entries keep the given order and are separated by one blank line.
    An empty list renders the fixed empty-state message.
    """
    if not clusters:
        return NO_CLUSTERS

    total = len(clusters)
    entries = [
        f"🔸 *{cluster.name}* ({cluster.kind})\n"
        f"   • Namespace: {cluster.namespace}\n"
        f"   • Created: {cluster.created}\n"
        for cluster in clusters
    ]
    header = f"📋 *Cluster List* ({total} cluster{'' if total == 1 else 's'})\n\n"
    return header + "\n".join(entries)


class ListClustersHandler:
    """Lists Kubernetes then OpenShift clusters from the control plane."""

    def __init__(self, fetcher_factory: Callable[[], BaseFetcher]):
        self.fetcher_factory = fetcher_factory

    def __call__(self, ctx: CommandContext) -> str:
        try:
            fetcher = self.fetcher_factory()
        except ConnectionError as e:
            logger.error(f"Error getting kubernetes client: {e}")
            return CONNECT_FAILED

        try:
            kinds = fetcher.list_clusters(KUBERNETES)
            openshifts = fetcher.list_clusters(OPENSHIFT)
        except FetchError as e:
            logger.error(f"Error listing mapt clusters: {e}")
            return LIST_FAILED

        logger.info(
            "Listed mapt clusters",
            total=len(kinds) + len(openshifts),
            kinds=len(kinds),
            openshifts=len(openshifts),
            user=ctx.user,
        )
        return format_cluster_list(kinds + openshifts)

"""Command handlers: each takes a CommandContext and returns the reply text."""

from .launch import handle_launch
from .listing import ListClustersHandler, format_cluster_list

__all__ = ["handle_launch", "ListClustersHandler", "format_cluster_list"]

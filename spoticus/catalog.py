"""Static catalog of the cluster types and sizes that can be launched."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class SizeSpec:
    """Resource specification for a cluster size."""

    cpu: str
    ram: str


# TODO: add ROSA and Karpenter once the operator supports them.
CLUSTER_TYPES: Tuple[str, ...] = ("k8s", "openshift")

CLUSTER_TYPE_DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    "k8s": "Standard upstream Kubernetes cluster",
    "openshift": "Red Hat OpenShift Container Platform",
})

# Insertion order is the enumeration order used in replies
SIZES: Mapping[str, SizeSpec] = MappingProxyType({
    "medium": SizeSpec(cpu="8 CPUs", ram="32 GB RAM"),
    "large": SizeSpec(cpu="16 CPUs", ram="64 GB RAM"),
    "xlarge": SizeSpec(cpu="32 CPUs", ram="128 GB RAM"),
})


def is_supported_cluster_type(cluster_type: str) -> bool:
    """Check whether a (lowercased) cluster type token is accepted."""
    return cluster_type in CLUSTER_TYPES


def lookup_size(size: str) -> Optional[SizeSpec]:
    """Return the spec for a (lowercased) size token, or None."""
    return SIZES.get(size)


def format_cluster_types() -> str:
    """Inline list of cluster types, e.g. "`k8s`, `openshift`"."""
    return ", ".join(f"`{name}`" for name in CLUSTER_TYPES)


def format_supported_sizes() -> str:
    """Slack bullet list of the valid sizes and their specs, in catalog order."""
    return "".join(f"• `{name}`: {spec.cpu}, {spec.ram}\n" for name, spec in SIZES.items())


def _build_launch_usage() -> str:
    types = "".join(
        f"• `{name}` - {CLUSTER_TYPE_DESCRIPTIONS[name]}\n" for name in CLUSTER_TYPES
    )
    sizes = "".join(
        f"• `{name}` - {spec.cpu} / {spec.ram}\n" for name, spec in SIZES.items()
    )
    return (
        "📦 *Launch Command - Detailed Usage*\n\n"
        "This command provisions a new cluster using a specified platform and resource tier.\n\n"
        "🔧 *Syntax*:\n"
        "```\n"
        "launch <cluster_type> <size>\n"
        "```\n\n"
        "🧪 *Examples*:\n"
        "```\n"
        "launch k8s large\n"
        "launch openshift medium\n"
        "```\n\n"
        "🧱 *Supported Cluster Types*:\n"
        f"{types}"
        "_Only these values are accepted. Input is case-insensitive._\n\n"
        "📐 *Supported Sizes*:\n"
        f"{sizes}\n"
        "💰 *⚡ Spot Instances (Cost Optimization)*:\n"
        "All clusters are provisioned using *cloud spot instances* for maximum cost-efficiency.\n"
    )


LAUNCH_USAGE = _build_launch_usage()

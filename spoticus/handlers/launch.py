"""Handler for the ``launch`` command."""

import structlog

from spoticus.catalog import (
    LAUNCH_USAGE,
    format_cluster_types,
    format_supported_sizes,
    is_supported_cluster_type,
    lookup_size,
)
from spoticus.models import CommandContext

logger = structlog.get_logger(__name__)


def handle_launch(ctx: CommandContext) -> str:
    """Validate ``launch <cluster_type> <size>`` and compose the reply.

    Checks run in order and the first failure wins:
      1. at least two arguments
      2. cluster type is in the catalog
      3. size is in the catalog

    Arguments beyond the second are ignored. The command only announces the
    launch; provisioning is carried out by the mapt operator.

    Args:
        ctx: Invocation context (args, channel, user)

    Returns:
        Confirmation message, or the error message for the first failing check
    """
    if len(ctx.args) < 2:
        return "❌ Missing arguments.\n\n" + LAUNCH_USAGE

    cluster_type = ctx.args[0].lower()
    size = ctx.args[1].lower()

    if not is_supported_cluster_type(cluster_type):
        return (
            f"❌ Unsupported cluster type: *{cluster_type}*\n"
            f"Supported types: {format_cluster_types()}"
        )

    spec = lookup_size(size)
    if spec is None:
        return f"❌ Invalid size: *{size}*\nValid sizes:\n{format_supported_sizes()}"

    logger.info("Launching cluster", user=ctx.user, type=cluster_type, size=size)

    return (
        f"🚀 Launching a *{cluster_type}* cluster of size *{size}* for <@{ctx.user}>\n"
        f"• CPU: {spec.cpu}\n"
        f"• Memory: {spec.ram}"
    )

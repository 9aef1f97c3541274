"""
Spoticus - chat-triggered spot cluster provisioning relay.

A Slack bot that validates launch/list commands and relays them to the
Kubernetes control plane managed by the mapt operator.
"""

__version__ = "0.1.0"
__author__ = "Spoticus Contributors"

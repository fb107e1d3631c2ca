"""Pods, models and the manager that converts documents into them."""

from paradox.pods.model import Model
from paradox.pods.pod import Pod
from paradox.pods.pod_manager import PodManager

__all__ = [
    "Model",
    "Pod",
    "PodManager",
]

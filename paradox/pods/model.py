"""Base class for user models backed by a pod."""

from typing import Any

from paradox.pods.pod import DRIVER_ATTRIBUTES, Pod
from paradox.shared.exceptions import PodError


class Model:
    """
    Wraps exactly one pod and exposes its properties as attributes.

    Subclass it and register the subclass with the pod manager to attach
    behaviour to documents of a given collection:

        class User(Model):
            def display_name(self):
                return f"{self.first} {self.last}"

        toolbox.pod_manager.register_model("users", User)
    """

    def __init__(self) -> None:
        object.__setattr__(self, "_pod", None)

    def load_pod(self, pod: Pod) -> None:
        if self._pod is not None:
            raise PodError("This model already holds a pod")
        object.__setattr__(self, "_pod", pod)

    def get_pod(self) -> Pod:
        if self._pod is None:
            raise PodError("This model does not hold a pod")
        return self._pod

    def __getattr__(self, name: str) -> Any:
        pod = object.__getattribute__(self, "_pod")
        if name.startswith("_") or pod is None or not pod.has(name):
            raise AttributeError(name)
        return pod.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in DRIVER_ATTRIBUTES:
            raise PodError(f"'{name}' is managed by the server and cannot be set")
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        self.get_pod().set(name, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pod!r})"

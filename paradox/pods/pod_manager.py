"""
Pod Manager

Creates pods and wraps them in the model class registered for their type.
"""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from paradox.pods.model import Model
from paradox.pods.pod import Pod
from paradox.shared.exceptions import PodError

if TYPE_CHECKING:
    from paradox.toolbox.toolbox import Toolbox

logger = logging.getLogger("paradox.pod_manager")


class PodManager:
    """Factory for pods and the models that wrap them."""

    def __init__(self, toolbox: "Toolbox"):
        self._toolbox = toolbox
        self._models: dict[str, type[Model]] = {}

    def register_model(self, type: str, model: type[Model]) -> None:
        """Use ``model`` for every pod of the given type."""
        if not issubclass(model, Model):
            raise PodError(f"{model.__name__} must be a subclass of Model")
        self._models[type] = model

    def model_for(self, type: str) -> type[Model]:
        return self._models.get(type, Model)

    def dispense(self, type: str) -> Model:
        """Create a new, unsaved model of the given type."""
        model = self.model_for(type)()
        model.load_pod(Pod(type))
        return model

    def convert_to_pods(self, type: str, data: list[Any]) -> list[Model]:
        """Convert driver documents into models of the given type.

        Args:
            type: Collection name of the documents.
            data: Documents as returned by a query.

        Returns:
            One model per document, in the same order.

        Raises:
            PodError: If an item is not a document or belongs to another
                collection.
        """
        converted = []
        for document in data:
            if not isinstance(document, Mapping):
                raise PodError(f"Cannot convert {document!r} to a '{type}' pod")
            model = self.dispense(type)
            model.get_pod().load_from_driver(dict(document))
            converted.append(model)

        logger.debug("Converted %d document(s) to '%s' pods", len(converted), type)
        return converted

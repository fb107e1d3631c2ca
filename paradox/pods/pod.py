"""
Pod — the in-memory representation of a single document.

A pod keeps the driver-managed attributes (``_id``, ``_key``, ``_rev``)
apart from the document's own properties and tracks whether its current
state matches what is stored on the server.
"""

from typing import Any

from paradox.shared.exceptions import PodError

DRIVER_ATTRIBUTES = ("_id", "_key", "_rev")


class Pod:
    """A typed document whose type is the name of its collection."""

    def __init__(self, type: str, data: dict[str, Any] | None = None):
        if not type:
            raise PodError("A pod must have a type")
        self._type = type
        self._id: str | None = None
        self._key: str | None = None
        self._rev: str | None = None
        self._properties: dict[str, Any] = dict(data or {})
        self._saved = False

    def __repr__(self) -> str:
        return f"Pod(type={self._type!r}, id={self._id!r}, saved={self._saved})"

    # ─── Identity ───────────────────────────────────────────

    @property
    def type(self) -> str:
        return self._type

    @property
    def id(self) -> str | None:
        return self._id

    @property
    def key(self) -> str | None:
        return self._key

    @property
    def rev(self) -> str | None:
        return self._rev

    # ─── Properties ─────────────────────────────────────────

    def get(self, name: str, default: Any = None) -> Any:
        return self._properties.get(name, default)

    def set(self, name: str, value: Any) -> None:
        """Set a property. Driver attributes cannot be set this way."""
        if name in DRIVER_ATTRIBUTES:
            raise PodError(f"'{name}' is managed by the server and cannot be set")
        self._properties[name] = value
        self._saved = False

    def has(self, name: str) -> bool:
        return name in self._properties

    def to_dict(self) -> dict[str, Any]:
        """Return the document as the driver would send it."""
        document = dict(self._properties)
        for attribute, value in zip(DRIVER_ATTRIBUTES, (self._id, self._key, self._rev)):
            if value is not None:
                document[attribute] = value
        return document

    def load_from_driver(self, document: dict[str, Any]) -> None:
        """Replace the pod's state with a document returned by the server.

        Raises:
            PodError: If the document's ``_id`` belongs to another collection.
        """
        document_id = document.get("_id")
        if document_id is not None:
            collection = str(document_id).split("/", 1)[0]
            if collection != self._type:
                raise PodError(
                    f"Document '{document_id}' does not belong to the '{self._type}' collection"
                )

        self._id = document_id
        self._key = document.get("_key")
        self._rev = document.get("_rev")
        self._properties = {
            name: value for name, value in document.items()
            if name not in DRIVER_ATTRIBUTES
        }

    # ─── State ──────────────────────────────────────────────

    def set_saved(self) -> None:
        self._saved = True

    def is_saved(self) -> bool:
        return self._saved

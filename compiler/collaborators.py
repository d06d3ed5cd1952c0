"""
EgoScript Compiler Collaborators

Default implementations of the two services the tokenizer calls out to:
the message registrar for plain string literals and the asset resolver
for ``"#name"`` references. Hosts replace them with their own objects
exposing the same methods.
"""

from typing import Callable, Dict, List, Mapping, Optional


# Number of asset slots; also used as the "not found" slot.
MAX_ASSET_SLOTS = 1024
ASSET_NOT_FOUND = MAX_ASSET_SLOTS


class MessageTable:
    """Per-compile registry of string literals."""

    def __init__(self):
        self.messages: List[str] = []
        self._index: Dict[str, int] = {}

    def register(self, text: str) -> int:
        """Add a message, returning its stable index."""
        if text not in self._index:
            self._index[text] = len(self.messages)
            self.messages.append(text)
        return self._index[text]

    def __len__(self) -> int:
        return len(self.messages)


class AssetTable:
    """
    Resolves ``#name`` references to asset slots.

    ``name`` matches a known asset when the asset's path ends with it.
    Unknown names are handed to the optional ``loader``, which may load the
    asset and return its slot, or return None.
    """

    def __init__(self, assets: Optional[Mapping[str, int]] = None,
                 loader: Optional[Callable[[str], Optional[int]]] = None):
        self.assets: Dict[str, int] = dict(assets or {})
        self.loader = loader

    def add(self, path: str, slot: int) -> None:
        if not 0 <= slot < MAX_ASSET_SLOTS:
            raise ValueError(f"Asset slot {slot} out of range")
        self.assets[path] = slot

    def resolve(self, name: str) -> Optional[int]:
        """Get the slot for ``name``, or None if it cannot be found."""
        for path, slot in self.assets.items():
            if path.endswith(name):
                return slot

        if self.loader is not None:
            slot = self.loader(name)
            if slot is not None and 0 <= slot < MAX_ASSET_SLOTS:
                self.assets[name] = slot
                return slot

        return None

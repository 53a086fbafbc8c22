"""Estado da interface sincronizado com a API."""

from state.store import Collection, CollectionStatus, ViewStateStore

__all__ = ["Collection", "CollectionStatus", "ViewStateStore"]

# -*- coding: utf-8 -*-
"""
errors.py

All pipeline errors are fatal: the CLI stops at the first one and prints it.
"""

from typing import Iterable, List, Set


class HPNetworkError(Exception):
    """Base class for every error raised by the analysis pipeline."""


class MalformedInputError(HPNetworkError):
    """Input table is missing required columns or holds unusable values."""


class DuplicateNodeError(HPNetworkError):
    def __init__(self, labels: Iterable[str]):
        self.labels: List[str] = sorted(set(labels))
        super().__init__(f"duplicate node label(s): {', '.join(self.labels)}")


class UnresolvedEndpointError(HPNetworkError):
    def __init__(self, labels: Iterable[str]):
        self.labels: List[str] = sorted(set(labels))
        self.label = self.labels[0] if self.labels else ""
        super().__init__(
            f"edge endpoint(s) not found in nodes table: {', '.join(self.labels)}"
        )


class UnknownNodeIdError(HPNetworkError):
    def __init__(self, ids: Iterable):
        self.ids = sorted(set(ids), key=str)
        super().__init__(f"metric references unknown node id(s): {self.ids}")


class DisconnectedGraphError(HPNetworkError):
    """Eccentricity is undefined: some nodes cannot reach each other."""

    def __init__(self, components: List[Set]):
        self.components = components
        if not components:
            msg = "graph has no nodes, eccentricity is undefined"
        else:
            sizes = sorted((len(c) for c in components), reverse=True)
            msg = (
                f"graph has {len(components)} connected components "
                f"(sizes {sizes}), eccentricity is undefined"
            )
        super().__init__(msg)

"""
Sway tree flattening.

Turns the container tree returned by get_tree() into the ordered candidate
list shown in the filter. Children come first, then floating children, then
the container itself, so every container is listed after its descendants.
"""

import logging
from typing import Any, List

from .models import Candidate, NULL_NAME

logger = logging.getLogger(__name__)


def flatten(root: Any) -> List[Candidate]:
    """
    Flatten a Sway container tree into candidates.

    Args:
        root: Root container (i3ipc Con or any object with id, name,
            nodes and floating_nodes)

    Returns:
        Candidates in post-order, one per container
    """
    candidates: List[Candidate] = []

    def walk_tree(node):
        for child in getattr(node, 'nodes', None) or []:
            walk_tree(child)
        for child in getattr(node, 'floating_nodes', None) or []:
            walk_tree(child)
        name = getattr(node, 'name', None)
        candidates.append(Candidate(id=node.id, name=NULL_NAME if name is None else name))

    walk_tree(root)
    logger.debug(f"Flattened tree into {len(candidates)} candidates")
    return candidates

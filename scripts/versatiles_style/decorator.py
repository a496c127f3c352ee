"""
Overlay generated rules onto layer skeletons.
"""

import logging
from typing import Any, Dict, List, Mapping, Sequence

from .utils import deep_clone, deep_merge

logger = logging.getLogger(__name__)

Layer = Dict[str, Any]
RuleSet = Mapping[str, Mapping[str, Any]]

LABEL_LAYER_TYPE = "symbol"


def decorate(skeletons: Sequence[Layer], rules: RuleSet,
             hide_labels: bool = False) -> List[Layer]:
    """
    Merge rule entries onto the skeletons with the same id.

    Args:
        skeletons: Ordered baseline layers (not modified)
        rules: Layer id -> property overrides
        hide_labels: Drop every symbol layer after merging

    Returns:
        New list of layers in skeleton order
    """
    rules = rules or {}
    layer_ids = {layer["id"] for layer in skeletons}
    for layer_id in rules:
        if layer_id not in layer_ids:
            logger.debug("ignoring rules for unknown layer %r", layer_id)

    layers = []
    for skeleton in skeletons:
        rule = rules.get(skeleton["id"])
        if rule:
            layers.append(deep_merge(skeleton, rule))
        else:
            layers.append(deep_clone(skeleton))

    if hide_labels:
        layers = hide_label_layers(layers)

    return layers


def hide_label_layers(layers: Sequence[Layer]) -> List[Layer]:
    """Remove symbol layers, keeping the order of the rest."""
    return [layer for layer in layers if layer.get("type") != LABEL_LAYER_TYPE]

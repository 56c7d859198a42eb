"""Binary search tree with on-demand rebalancing and console renderers."""

from .binary_search_tree import Node, OrderedTree, Visitor, VisitorRequiredError
from .demo import (
    DEFAULT_UNBALANCING_VALUES,
    DemoConfig,
    DemoConfigError,
    load_demo_config,
    random_distinct_values,
)
from .rendering import EMPTY_TREE, RENDERERS, render_levels, render_sideways

__all__ = [
    "DEFAULT_UNBALANCING_VALUES",
    "DemoConfig",
    "DemoConfigError",
    "EMPTY_TREE",
    "Node",
    "OrderedTree",
    "RENDERERS",
    "Visitor",
    "VisitorRequiredError",
    "load_demo_config",
    "random_distinct_values",
    "render_levels",
    "render_sideways",
]

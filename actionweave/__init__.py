"""Input-method-agnostic action state: buttons, axes, diffs and run conditions."""

__version__ = "0.1.0"

__all__ = [
    "action_data",
    "action_diff",
    "action_state",
    "action_store",
    "action_values",
    "actionlike",
    "axislike",
    "buttonlike",
    "conditions",
    "vectors",
]
"""Label map consistency contract.

Verifies the invariants listed in ``labelmap.contracts.invariants`` on a
live LabelMap. Used by tests and by callers that build maps through the
direct insertion paths and want to confirm the result.
"""

from typing import TYPE_CHECKING

from labelmap.contracts.base import require

if TYPE_CHECKING:
    from labelmap.core.label_map import LabelMap


def assert_label_map_consistent(label_map: "LabelMap", check_disjoint: bool = False) -> None:
    """Enforce the label map contract.

    Parameters
    ----------
    label_map : LabelMap
        Map to check.

    check_disjoint : bool, optional
        Also verify that no position belongs to two labels. Off by default
        since direct insertion may legitimately overlap regions.

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    container = label_map.label_object_container
    background = label_map.background_value

    require(
        background not in container,
        f"Label map contract violated: background {background} is a key"
    )

    labels = container.labels()
    require(
        labels == sorted(labels),
        f"Label map contract violated: keys not ascending {labels}"
    )

    for label, label_object in container.items():
        require(
            label_object.label == label,
            f"Label map contract violated: object under {label} reports label {label_object.label}"
        )
        require(
            not label_object.is_empty(),
            f"Label map contract violated: label object {label} is empty"
        )

    if check_disjoint:
        owners = {}
        for label, label_object in container.items():
            for idx in label_object:
                require(
                    idx not in owners,
                    f"Label map contract violated: index {idx} owned by {owners.get(idx)} and {label}"
                )
                owners[idx] = label

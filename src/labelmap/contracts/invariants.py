"""Formal label map invariants.

This file documents what a LabelMap MUST hold after every operation, and
which code path maintains each invariant. Use it as a reviewer anchor.
"""

LABEL_MAP_INVARIANTS = {
    "background_exclusion": [
        "The background value is never a key of the container",
        "add_pixel, remove_pixel and set_line are no-ops for the background label",
        "add_label_object and push_label_object reject the background label",
    ],

    "key_consistency": [
        "Every key equals the label reported by its label object",
        "Keys iterate in ascending order",
    ],

    "disjointness": [
        "Maintained by set_pixel only: it evicts the position from every other label",
        "add_pixel, set_line and add_label_object do not check other labels",
    ],

    "non_empty": [
        "A label object emptied by pixel removal is dropped from the map",
    ],
}

# Which invariants hold globally vs. along one mutation path
INVARIANT_SCOPE = {
    "background_exclusion": "GLOBAL",
    "key_consistency": "GLOBAL",
    "disjointness": "SET_PIXEL_PATH",
    "non_empty": "REMOVAL_PATH",
}

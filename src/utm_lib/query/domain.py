"""Per-axis extent of a geospatial bounding box."""

from __future__ import annotations

from typing import Optional, Union

from utm_lib.core.definitions import Axis
from utm_lib.core.diagnostics import record_error
from utm_lib.elements import BoundingBox, Domain


def domain(box: Optional[BoundingBox], axis: Union[Axis, str]) -> Optional[Domain]:
    """
    Query a bounding box for its extent along one axis.

    Args:
        box: Bounding box to query
        axis: "Longitude", "Latitude" or "Altitude"

    Returns:
        The Domain from the box minimum to its maximum on that axis, or None
        if the box is null or the axis is not one of the three.
    """
    if box is None:
        record_error("Cannot query the domain of a null bounding box.")
        return None
    try:
        axis = Axis(axis)
    except ValueError:
        record_error(
            f"Axis {axis} is not one of the axes associated with the BoundingBox; "
            "only Latitude, Longitude or Altitude are permitted axes."
        )
        return None

    attribute = axis.value.lower()
    return Domain(getattr(box.min, attribute), getattr(box.max, attribute))

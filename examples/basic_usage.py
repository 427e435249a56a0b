"""Basic usage examples for utm-lib."""

from utm_lib import (
    Feature,
    FeatureCollection,
    LineString,
    Point,
    bounding_box_of,
    capture_diagnostics,
    project_to_utm,
    zone_of,
)

london = Point(longitude=-0.1276, latitude=51.5074, altitude=11.0)
paris = Point(longitude=2.3522, latitude=48.8566, altitude=35.0)

print(f"London is in UTM zone {zone_of(london)}")
print(f"London in UTM: {project_to_utm(london)}")

route = LineString([london, paris])
print(f"\nRoute zone: {zone_of(route)}")
print(f"Route in UTM: {project_to_utm(route)}")

cities = FeatureCollection(
    [Feature(london, {"city": "London"}), Feature(paris, {"city": "Paris"})]
)
print(f"\nBounding box: {bounding_box_of(cities)}")

# Failures are reported, not raised
with capture_diagnostics() as diagnostics:
    result = project_to_utm(Point(longitude=0.0, latitude=95.0))
print(f"\nOut of range point converts to {result}; errors: {diagnostics.errors}")

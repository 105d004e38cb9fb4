"""Campus Network Analysis -- latency, bandwidth and failure tolerance.

Demonstrates Topology queries on a small copper/fiber campus backbone.
"""

from network_analysis import Medium, Topology, parse_topology
from network_analysis.serialization import topology_to_dict

# =============================================================
# Build a 6-site campus backbone
# =============================================================
print("=== 6-Site Campus Backbone ===")

campus = Topology(6)
# Fiber ring between the main buildings
for i in range(4):
    campus.add_link(i, (i + 1) % 4, Medium.FIBER, 10_000, 400)
# Copper drops to two outbuildings
campus.add_link(1, 4, Medium.COPPER, 1_000, 120)
campus.add_link(3, 5, Medium.COPPER, 1_000, 90)
campus.add_link(4, 5, Medium.COPPER, 100, 300)

print(campus.summary())

# =============================================================
# Lowest-latency routes
# =============================================================
print("\n=== Routes ===")

for source, target in [(0, 2), (0, 5), (4, 2)]:
    route = campus.shortest_path(source, target)
    print(
        f"  {source} -> {target}: via {route.vertices}, "
        f"latency {route.distance * 1e-7:.3e} s, "
        f"bottleneck {route.bottleneck_bandwidth / 1000} Gbps"
    )

matrix = campus.all_pairs_latency()
print(f"\nWorst-case latency between any two sites: {matrix.max() * 1e-7:.3e} s")

# =============================================================
# Medium connectivity and spanning forest
# =============================================================
print("\n=== Media ===")
print(f"Copper-connected: {campus.is_copper_connected()}")
print(f"Fiber-connected:  {campus.is_medium_connected(Medium.FIBER)}")

forest = campus.minimum_spanning_forest()
print(f"\nMinimum spanning tree: {len(forest.links)} links, weight {forest.total_weight:.2f}")
for link in forest.links:
    print(f"  {link} ({link.medium.value})")

# =============================================================
# Double-failure robustness
# =============================================================
print("\n=== Robustness ===")

analysis = campus.robustness()
print(analysis.summary())

# Adding a direct fiber run from outbuilding 4 to building 3 removes the
# weak spot.
campus.add_link(4, 3, Medium.FIBER, 10_000, 500)
print(campus.robustness().summary())

# =============================================================
# Text format round trip
# =============================================================
print("\n=== Text Format ===")

lines = [str(campus.vertex_count)] + [
    f"{link.source} {link.target} {link.medium.value} {link.bandwidth} {link.length}"
    for link in campus.links
]
reloaded = parse_topology(lines)
print(f"Reloaded {reloaded!r}; same links: {reloaded.links == campus.links}")
print(f"Serialized keys: {sorted(topology_to_dict(reloaded))}")

"""
Example: Reading the landing page content from a rendering layer.

This shows the two ways content reaches the bundle:
- Embedded content: the default, shipped in sims.content.data
- Content file: set SIMS_CONTENT_PATH to a JSON/YAML file (see `sims-content export`)
"""

from sims import get_content_bundle

bundle = get_content_bundle()

# =============================================================================
# Navigation and hero
# =============================================================================
print(bundle.header)
for entry in bundle.navigation:
    print(f"   [{entry.id}] {entry.label} -> {entry.url}")

print(f"\n{bundle.banner.heading}: {bundle.banner.description}")


# =============================================================================
# Add-location form labels
# =============================================================================
labels = bundle.data_entry
print(f"\n{labels.search_store}")
print(f"{labels.goods_unavailable}")
print(f"{labels.crowdedness}")
print(f"[{labels.submit}]")


# =============================================================================
# Assets the renderer has to resolve
# =============================================================================
print("\nAssets:")
for path in bundle.asset_paths():
    print(f"   {path}")

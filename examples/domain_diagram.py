# %% [markdown]
# # protfig: Domain Diagrams
#
# **Draw proteins as backbones with their domains as colored blocks.**
#
# This example loads a feature table and a color table, draws the diagram and
# its legend, then repeats the diagram with a custom style file.

# %% [markdown]
# ## Setup

# %%
from pathlib import Path

data_path = Path(__file__).parent / "data" if "__file__" in globals() else Path("data")
out_path = Path("tmp") / "domain_diagram"
out_path.mkdir(parents=True, exist_ok=True)

# %% [markdown]
# ## Load the tables
#
# The feature table lists one `protein` row per protein giving its length,
# plus one row per domain. Coordinates may use thousands separators.

# %%
from protfig.io import load_color_table, load_feature_table

features = load_feature_table(data_path / "features.csv")
colors = load_color_table(data_path / "colors.csv")

for record in features[:4]:
    print(record)

# %% [markdown]
# ## Diagram and legend

# %%
from protfig.composer import create_renderer

diagram = create_renderer(features, colors, scalebar=200, title="Example proteins")
diagram.save_svg(out_path / "diagram.svg")

legend = create_renderer(features, colors, title="Domains", legend=True)
legend.save_svg(out_path / "legend.svg")

print(f"Legend entries: {', '.join(legend.layout.domains)}")

# %% [markdown]
# ## Custom style
#
# `[diagram]` and `[legend]` sections of a TOML file override the default look.

# %%
from protfig.composer import renderer_from_files

styled = renderer_from_files(
    data_path / "features.csv",
    data_path / "colors.csv",
    style_path=data_path / "style.toml",
    scalebar=200,
)
styled.save_svg(out_path / "diagram_styled.svg")

# %% [markdown]
# ## Without a color table
#
# Domains are colored from a colorblind-safe palette in order of appearance.

# %%
palette_diagram = create_renderer(features)
palette_diagram.save_svg(out_path / "diagram_palette.svg")
for assignment in palette_diagram.colors:
    print(f"{assignment.domain}: {assignment.color}")

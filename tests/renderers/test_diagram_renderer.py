# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Tests for the SVG diagram renderer."""

from pathlib import Path

import pytest
from drawsvg import Drawing
from pydantic_extra_types.color import Color
from pytest_mock import MockerFixture

from protfig.core import DiagramParameters, LayoutError, WarningKind
from protfig.io import colors_from_rows, features_from_rows
from protfig.io.errors import OutputFileError
from protfig.layout import DiagramLayout, DiagramStyle, LegendLayout
from protfig.renderers import DiagramRenderer
from svg_helpers import elements_with_class, parse_svg


def rgb(value: str):
    return Color(value).as_rgb_tuple()


def test_render_returns_drawing(kinase_features, kinase_colors):
    renderer = DiagramRenderer(kinase_features, kinase_colors)
    assert isinstance(renderer.render(), Drawing)
    assert isinstance(renderer.layout, DiagramLayout)


def test_single_protein_diagram(kinase_features, kinase_colors):
    renderer = DiagramRenderer(
        kinase_features, kinase_colors, DiagramParameters(scalebar_length=500)
    )
    root = parse_svg(renderer.get_svg_string())

    (protein,) = elements_with_class(root, "protein")
    assert protein.get("data-protein-id") == "P1"

    backbones = elements_with_class(root, "backbone")
    domains = elements_with_class(root, "domain")
    assert len(backbones) == 1
    assert len(domains) == 1
    assert rgb(domains[0].get("fill")) == (255, 0, 0)
    assert domains[0].get("data-domain") == "Kinase"
    assert rgb(backbones[0].get("fill")) == (0, 0, 0)

    # Rectangles span stop - start canvas units at one unit per residue
    assert float(domains[0].get("width")) == pytest.approx(50)
    assert float(backbones[0].get("width")) == pytest.approx(99)
    # Domains are taller than the backbone
    assert float(domains[0].get("height")) > float(backbones[0].get("height"))

    (label,) = elements_with_class(root, "protein-label")
    assert label.text == "P1"
    assert label.get("text-anchor") == "end"


def test_canvas_width_covers_x_extent(kinase_features, kinase_colors):
    style = DiagramStyle()
    renderer = DiagramRenderer(kinase_features, kinase_colors, diagram_style=style)
    root = parse_svg(renderer.get_svg_string())

    layout = renderer.layout
    expected = layout.label_width + (501 - -100) * style.residue_width + style.margin
    assert float(root.get("width")) == pytest.approx(expected)


def test_scale_bar_is_drawn_with_label(kinase_features, kinase_colors):
    renderer = DiagramRenderer(
        kinase_features, kinase_colors, DiagramParameters(scalebar_length=250)
    )
    root = parse_svg(renderer.get_svg_string())

    assert len(elements_with_class(root, "scalebar")) == 1
    assert len(elements_with_class(root, "axis-tick")) == 2
    (label,) = elements_with_class(root, "scalebar-label")
    assert label.text == "250 aa"
    assert label.get("text-anchor") == "middle"


def test_title_is_bold(kinase_features, kinase_colors):
    renderer = DiagramRenderer(
        kinase_features, kinase_colors, DiagramParameters(title="My proteins")
    )
    (title,) = elements_with_class(parse_svg(renderer.get_svg_string()), "title")

    assert title.text == "My proteins"
    assert title.get("font-weight") == "bold"


def test_rows_are_drawn_top_down(three_proteins):
    renderer = DiagramRenderer(three_proteins, [])
    root = parse_svg(renderer.get_svg_string())

    backbones = elements_with_class(root, "backbone")
    ys = [float(b.get("y")) for b in backbones]
    assert ys == sorted(ys)
    labels = [t.text for t in elements_with_class(root, "protein-label")]
    assert labels == ["alpha", "beta", "gamma"]
    assert len(elements_with_class(root, "domain")) == 4


def test_uncolored_domains_use_fallback(three_proteins):
    style = DiagramStyle(fallback_color="#123456")
    renderer = DiagramRenderer(
        three_proteins, colors_from_rows([("SH2", "blue")]), diagram_style=style
    )
    root = parse_svg(renderer.get_svg_string())

    fills = {
        d.get("data-domain"): rgb(d.get("fill"))
        for d in elements_with_class(root, "domain")
    }
    assert fills == {"SH2": (0, 0, 255), "Kinase": (0x12, 0x34, 0x56)}
    assert len(renderer.layout.diagnostics) == 1


def test_legend_mode_draws_only_legend(three_proteins):
    colors = colors_from_rows(
        [("SH2", "blue"), ("Unused", "green"), ("Kinase", "red")]
    )
    renderer = DiagramRenderer(
        three_proteins, colors, DiagramParameters(legend_mode=True, title="Key")
    )
    root = parse_svg(renderer.get_svg_string())

    assert isinstance(renderer.layout, LegendLayout)
    swatches = elements_with_class(root, "legend-swatch")
    assert [rgb(s.get("fill")) for s in swatches] == [(0, 0, 255), (255, 0, 0)]
    labels = [t.text for t in elements_with_class(root, "legend-label")]
    assert labels == ["SH2", "Kinase"]
    assert len(elements_with_class(root, "legend-frame")) == 1

    for absent in ("backbone", "domain", "scalebar", "protein"):
        assert elements_with_class(root, absent) == []


def test_legend_mode_keeps_input_warnings():
    features = features_from_rows([("P1", "Kinase", 5, 55), ("P1", "SH2", 60, 70)])
    renderer = DiagramRenderer(
        features,
        colors_from_rows([("Kinase", "red")]),
        DiagramParameters(legend_mode=True),
    )
    root = parse_svg(renderer.get_svg_string())

    assert len(elements_with_class(root, "legend-swatch")) == 1
    kinds = [w.kind for w in renderer.layout.diagnostics]
    assert kinds == [WarningKind.MISSING_LENGTH_ROW, WarningKind.MISSING_COLOR]


def test_layout_errors_abort_before_drawing():
    renderer = DiagramRenderer([], [])
    with pytest.raises(LayoutError):
        renderer.render()
    assert renderer.layout is None


def test_repeated_renders_are_independent(kinase_features, kinase_colors):
    renderer = DiagramRenderer(kinase_features, kinase_colors)
    assert renderer.get_svg_string() == renderer.get_svg_string()


def test_save_svg_creates_directories(tmp_path: Path, kinase_features, kinase_colors):
    output = tmp_path / "nested" / "dir" / "diagram.svg"
    DiagramRenderer(kinase_features, kinase_colors).save_svg(output)

    assert output.exists()
    assert "<svg" in output.read_text()


def test_save_svg_wraps_os_errors(
    tmp_path: Path, mocker: MockerFixture, kinase_features, kinase_colors
):
    mocker.patch.object(Drawing, "save_svg", side_effect=PermissionError("denied"))

    with pytest.raises(OutputFileError) as exc_info:
        DiagramRenderer(kinase_features, kinase_colors).save_svg(tmp_path / "out.svg")
    assert "denied" in exc_info.value.message

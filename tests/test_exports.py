import xml.etree.ElementTree as ET

import ezdxf
import matplotlib.image as mpimg
import pytest
from matplotlib.path import Path as MplPath

from whirligig.containers.parameters import BladeParameters, PinHole
from whirligig.export.dxf_export import OUTLINE_LAYER, PIN_LAYER, build_dxf, write_dxf
from whirligig.export.raster_export import contour_to_mpl_path, raster_canvas, scale_bar, write_template
from whirligig.export.svg_export import svg_canvas, write_svg
from whirligig.outline.synthesizer import build_contour

SVG_NS = "{http://www.w3.org/2000/svg}"


def test_svg_canvas_in_inches(leaf_params, tmp_path):
    assert svg_canvas(leaf_params) == pytest.approx((12.5, 3.5))
    out = tmp_path / "blade.svg"
    text = write_svg(leaf_params, out)
    assert out.read_text(encoding="utf-8") == text

    root = ET.fromstring(text)
    assert root.attrib["width"] == "12.5in"
    assert root.attrib["height"] == "3.5in"
    assert root.attrib["viewBox"] == "0 0 12.5 3.5"

    path = root.find(f"{SVG_NS}path")
    assert path is not None
    assert path.attrib["d"].startswith("M")
    assert "translate(1.5, 1.75)" in path.attrib["transform"]


def test_svg_pin_hole(leaf_params):
    root = ET.fromstring(write_svg(leaf_params))
    circle = root.find(f"{SVG_NS}circle")
    assert circle is not None
    assert float(circle.attrib["cx"]) == pytest.approx(1.5 - 0.5)
    assert float(circle.attrib["cy"]) == pytest.approx(1.75)
    assert float(circle.attrib["r"]) == pytest.approx(0.0625)
    assert circle.attrib["stroke"] == "red"

    no_pin = BladeParameters(pin_hole=PinHole(present=False))
    assert ET.fromstring(write_svg(no_pin)).find(f"{SVG_NS}circle") is None


def test_svg_uses_kerf_outline(leaf_params):
    kerfed = ET.fromstring(write_svg(leaf_params)).find(f"{SVG_NS}path").attrib["d"]
    plain = ET.fromstring(write_svg(leaf_params, apply_kerf=False)).find(f"{SVG_NS}path").attrib["d"]
    assert kerfed != plain
    assert plain == build_contour(leaf_params, scale=1.0).d()


def test_dxf_outline_and_pin(leaf_params, tmp_path):
    out = write_dxf(leaf_params, tmp_path / "blade.dxf")
    doc = ezdxf.readfile(out)
    assert doc.header["$INSUNITS"] == 1
    msp = doc.modelspace()

    outlines = list(msp.query("LWPOLYLINE"))
    assert len(outlines) == 1
    assert outlines[0].closed
    assert outlines[0].dxf.layer == OUTLINE_LAYER
    xs = [p[0] for p in outlines[0].get_points("xy")]
    k = leaf_params.kerf_offset
    assert min(xs) == pytest.approx(-leaf_params.tab_length - k)
    assert max(xs) == pytest.approx(leaf_params.exposed_length + k)

    circles = list(msp.query("CIRCLE"))
    assert len(circles) == 1
    assert circles[0].dxf.layer == PIN_LAYER
    assert circles[0].dxf.radius == pytest.approx(0.0625)
    assert circles[0].dxf.center.x == pytest.approx(-0.5)


def test_dxf_without_pin():
    p = BladeParameters.from_preset("rounded", pin_hole=PinHole(present=False))
    assert len(list(build_dxf(p).modelspace().query("CIRCLE"))) == 0


def test_raster_template_png_size(leaf_params, tmp_path):
    w, h = raster_canvas(leaf_params)
    assert (w, h) == pytest.approx((13.5, 4.5))
    out = write_template(leaf_params, tmp_path / "template.png")
    img = mpimg.imread(out)
    assert img.shape[0] == round(h * 150)
    assert img.shape[1] == round(w * 150)


def test_raster_template_jpg(rounded_params, tmp_path):
    out = write_template(rounded_params, tmp_path / "template.jpg", unit="mm")
    assert out.exists()
    assert out.stat().st_size > 0


def test_scale_bar():
    assert scale_bar("in") == (1.0, "1 INCH SCALE BAR")
    length, label = scale_bar("mm")
    assert length == pytest.approx(50 / 25.4)
    assert label == "50MM SCALE BAR"


def test_mpl_path_keeps_curves(leaf_params, rounded_params):
    leaf = contour_to_mpl_path(build_contour(leaf_params, scale=1.0))
    assert list(leaf.codes).count(MplPath.CURVE4) == 12
    assert leaf.codes[0] == MplPath.MOVETO
    assert leaf.codes[-1] == MplPath.CLOSEPOLY
    rounded = contour_to_mpl_path(build_contour(rounded_params, scale=1.0))
    assert list(rounded.codes).count(MplPath.CURVE3) == 8

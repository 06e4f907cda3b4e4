import sys
import types

import numpy as np
import pytest

from brownian2d import vis


class _Recorder:
    created = []

    def __init__(self, **kw):
        self.kw = kw
        self.data = None
        _Recorder.created.append(self)


@pytest.fixture
def fake_vpython(monkeypatch):
    # doar graph/gcurve/color, înregistrate; nu deschide niciun browser
    _Recorder.created = []
    mod = types.ModuleType("vpython")
    mod.graph = _Recorder
    mod.gcurve = _Recorder
    mod.color = types.SimpleNamespace(red="R", blue="B", black="K")
    monkeypatch.setitem(sys.modules, "vpython", mod)
    return _Recorder


def test_plot_curves_labels_and_colors(fake_vpython):
    t = np.arange(4) * 0.5
    vis.plot_curves(t, [("teoretic", 4.0 * t, "red"), ("simulat", t, "blue")],
                    title="r2", xtitle="t [s]", ytitle="r^2")
    g, c1, c2 = fake_vpython.created
    assert g.kw["title"] == "r2"
    assert (c1.kw["label"], c1.kw["color"]) == ("teoretic", "R")
    assert c2.kw["color"] == "B"
    assert c1.data == [[0.0, 0.0], [0.5, 2.0], [1.0, 4.0], [1.5, 6.0]]


def test_plot_curves_downsamples_long_series(fake_vpython):
    x = np.arange(20_000, dtype=float)
    vis.plot_curves(x, [("dx", x, "black")], title="", xtitle="", ytitle="")
    curve = fake_vpython.created[-1]
    assert len(curve.data) == 20_000 // 4
    assert curve.data[1] == [4.0, 4.0]

from types import SimpleNamespace
from unittest import mock

import pytest

from netvis.app import NetworkVisualizationApp, build_parser, main
from netvis.model import DARK_GRAY, RED
from netvis.session import LayoutKind


@pytest.fixture
def mock_tk():
    with mock.patch("netvis.app.tk") as patched:
        yield patched


@pytest.fixture
def app(mock_tk):
    return NetworkVisualizationApp(mock.MagicMock())


def _write(tmp_path, text):
    path = tmp_path / "graph.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_window_title(mock_tk):
    root = mock.MagicMock()
    NetworkVisualizationApp(root)
    root.title.assert_called_with("NetworkVisualization")


def test_menu_labels(mock_tk):
    root = mock.MagicMock()
    NetworkVisualizationApp(root)
    menu = mock_tk.Menu.return_value
    commands = [c.kwargs["label"] for c in menu.add_command.call_args_list]
    cascades = [c.kwargs["label"] for c in menu.add_cascade.call_args_list]
    assert commands == ["Load Data File", "DenseEmphasize", "random", "force_directed", "circleforce"]
    assert cascades == ["File", "Option", "LayOutType", "LayOut"]
    root.config.assert_called_once_with(menu=menu)


def test_load_data_file(tmp_path, app):
    path = _write(tmp_path, "1 2\n2 3\n")
    with mock.patch("netvis.app.filedialog") as dialog:
        dialog.askopenfilename.return_value = path
        assert app.load_data_file() is True
    assert len(app.viewport.nodes) == 3
    assert app.viewport.nodes[1].neighbors == [0, 2]


def test_load_cancelled_keeps_graph(tmp_path, app):
    app.session.load_links([(1, 2)])
    with mock.patch("netvis.app.filedialog") as dialog:
        dialog.askopenfilename.return_value = ""
        assert app.load_data_file() is False
    assert len(app.viewport.nodes) == 2


def test_load_bad_file_reports_error(tmp_path, app):
    path = _write(tmp_path, "1 x\n")
    with mock.patch("netvis.app.filedialog") as dialog, mock.patch(
        "netvis.app.messagebox"
    ) as box:
        dialog.askopenfilename.return_value = path
        assert app.load_data_file() is False
        assert box.showerror.call_count == 1
    assert app.viewport.nodes == []


def test_circle_layout_draws_nodes_and_edges(app):
    app.session.load_links([(1, 2), (2, 3)])
    app.canvas.reset_mock()
    app.apply_layout(LayoutKind.CIRCLE)
    assert app.canvas.create_oval.call_count == 3
    assert app.canvas.create_line.call_count == 4
    for node in app.viewport.nodes:
        assert 0.0 <= node.x <= 1.0
        assert 0.0 <= node.y <= 1.0


def test_force_layout_by_number(app):
    app.session.load_links([(1, 2), (2, 3), (3, 1)])
    app.apply_layout(2)
    xs = [node.x for node in app.viewport.nodes]
    assert min(xs) == pytest.approx(0.0)
    assert max(xs) == pytest.approx(1.0)


def test_unknown_layout_rejected(app):
    app.session.load_links([(1, 2)])
    with pytest.raises(ValueError):
        app.apply_layout(7)


def test_layout_resets_colors(app):
    app.session.load_links([(1, 2), (1, 3)])
    app.dense_emphasize()
    app.apply_layout(LayoutKind.CIRCLE)
    assert all(node.color == DARK_GRAY for node in app.viewport.nodes)


def test_redraw_clears_canvas(app):
    app.canvas.reset_mock()
    app.redraw()
    app.canvas.delete.assert_called_once_with("all")
    assert app.canvas.create_oval.call_count == 0


def test_configure_resizes_viewport(app):
    app._on_configure(SimpleNamespace(width=400, height=300))
    assert (app.viewport.width, app.viewport.height) == (400.0, 300.0)


def test_parser_optional_file():
    parser = build_parser()
    assert parser.parse_args([]).file is None
    assert parser.parse_args(["g.txt"]).file == "g.txt"


def test_main_loads_file(tmp_path, mock_tk):
    path = _write(tmp_path, "1 2\n")
    assert main([path]) == 0
    assert mock_tk.Tk.return_value.mainloop.call_count == 1
    assert mock_tk.Canvas.return_value.create_oval.call_count == 2
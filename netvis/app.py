"""Desktop front end: a window with menus and a canvas showing the graph."""

from __future__ import annotations

import argparse
import tkinter as tk
from collections.abc import Sequence
from tkinter import filedialog, messagebox

from .model import GRAY, Node
from .reader import LinkFormatError
from .session import LayoutKind, Session
from .viewport import Viewport

__all__ = ["NetworkVisualizationApp", "build_parser", "main"]

_TITLE = "NetworkVisualization"
_DOT = 3
_DEFAULT_WIDTH = 800
_DEFAULT_HEIGHT = 600
_WHEEL_NOTCH = 120


class NetworkVisualizationApp:
    """Main window: File, Option and LayOut menus over a drawing canvas."""

    def __init__(self, root) -> None:
        self.root = root
        self.viewport = Viewport(_DEFAULT_WIDTH, _DEFAULT_HEIGHT)
        self.session = Session(on_change=self._show, rng=None)
        self.root.title(_TITLE)
        self.canvas = tk.Canvas(
            root, width=_DEFAULT_WIDTH, height=_DEFAULT_HEIGHT, background="white"
        )
        self.canvas.pack(fill=tk.BOTH, expand=True)
        self._build_menus()
        self._bind_events()

    def _build_menus(self) -> None:
        menubar = tk.Menu(self.root)

        file_menu = tk.Menu(menubar, tearoff=0)
        file_menu.add_command(label="Load Data File", command=self.load_data_file)
        menubar.add_cascade(label="File", menu=file_menu)

        option_menu = tk.Menu(menubar, tearoff=0)
        option_menu.add_command(label="DenseEmphasize", command=self.dense_emphasize)
        menubar.add_cascade(label="Option", menu=option_menu)

        layout_menu = tk.Menu(menubar, tearoff=0)
        type_menu = tk.Menu(layout_menu, tearoff=0)
        type_menu.add_command(
            label="random", command=lambda: self.apply_layout(LayoutKind.RANDOM)
        )
        type_menu.add_command(
            label="force_directed",
            command=lambda: self.apply_layout(LayoutKind.FORCE_DIRECTED),
        )
        type_menu.add_command(
            label="circleforce", command=lambda: self.apply_layout(LayoutKind.CIRCLE)
        )
        layout_menu.add_cascade(label="LayOutType", menu=type_menu)
        menubar.add_cascade(label="LayOut", menu=layout_menu)

        self.root.config(menu=menubar)

    def _bind_events(self) -> None:
        self.canvas.bind("<Configure>", self._on_configure)
        self.canvas.bind("<ButtonPress-1>", self._on_press)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)
        self.canvas.bind("<B1-Motion>", self._on_drag)
        self.canvas.bind("<MouseWheel>", self._on_wheel)
        self.canvas.bind("<Button-4>", lambda e: self._zoom(_WHEEL_NOTCH, e))
        self.canvas.bind("<Button-5>", lambda e: self._zoom(-_WHEEL_NOTCH, e))

    def _show(self, nodes: Sequence[Node]) -> None:
        self.viewport.set_nodes(nodes)
        self.redraw()

    def _load(self, path: str) -> bool:
        try:
            self.session.load_file(path)
        except (OSError, LinkFormatError, ValueError) as error:
            messagebox.showerror(_TITLE, f"Cannot load {path}: {error}")
            return False
        return True

    def load_data_file(self) -> bool:
        """Ask for an edge-list file and load it; return whether a graph was loaded."""
        path = filedialog.askopenfilename(
            parent=self.root,
            title="Open File",
            filetypes=[("Text files", "*.txt")],
        )
        if not path:
            return False
        return self._load(path)

    def apply_layout(self, kind: LayoutKind | int) -> None:
        """Lay the current graph out with ``kind``."""
        self.session.layout(kind, emphasize_dense=False)

    def dense_emphasize(self) -> None:
        """Color the four densest nodes without moving any node."""
        self.session.layout(None, emphasize_dense=True)

    def redraw(self) -> None:
        """Draw every node and its edges onto the canvas."""
        viewport = self.viewport
        self.canvas.delete("all")
        for index, node in enumerate(viewport.nodes):
            x = node.x * viewport.width
            y = node.y * viewport.height
            color = viewport.node_color(index)
            self.canvas.create_oval(
                x,
                y,
                x + _DOT,
                y + _DOT,
                outline=color.hex(),
                fill="" if color == GRAY else color.hex(),
            )
            for neighbor in node.neighbors:
                other = viewport.nodes[neighbor]
                self.canvas.create_line(
                    x,
                    y,
                    other.x * viewport.width,
                    other.y * viewport.height,
                    fill=viewport.edge_color(index, neighbor).hex(),
                )

    def _on_configure(self, event) -> None:
        if event.width > 0 and event.height > 0:
            self.viewport.resize(event.width, event.height)
            self.redraw()

    def _on_press(self, event) -> None:
        if self.viewport.press(event.x, event.y):
            self.redraw()

    def _on_release(self, event) -> None:
        self.viewport.release()
        self.viewport.last_pos = (event.x, event.y)
        self.redraw()

    def _on_drag(self, event) -> None:
        if self.viewport.drag(event.x, event.y):
            self.redraw()

    def _on_wheel(self, event) -> None:
        self._zoom(event.delta, event)

    def _zoom(self, delta: int, event) -> None:
        self.viewport.zoom(delta, event.x, event.y)
        self.redraw()


def build_parser() -> argparse.ArgumentParser:
    """Command-line parser: an optional edge-list file to open at start."""
    parser = argparse.ArgumentParser(
        prog="netvis", description="Show a network from an edge-list file."
    )
    parser.add_argument("file", nargs="?", help="edge-list file to load at start")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Open the main window and run until it is closed."""
    args = build_parser().parse_args(argv)
    root = tk.Tk()
    app = NetworkVisualizationApp(root)
    if args.file:
        app._load(args.file)
    root.mainloop()
    return 0
# -*- coding: utf-8 -*-
"""
Graphical User Interface for the 2048 game.

This module draws the grid in a Matplotlib window: one coloured tile per non-empty cell placed from the layout
spacing constants, a score header, a win / loss banner and a "New Game" button. It also forwards keyboard and
pointer events to the handlers registered by the caller.
"""
from typing import Callable, NamedTuple, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from matplotlib.patches import FancyBboxPatch
from matplotlib.widgets import Button
from numpy import ndarray

from slide2048.config import LayoutConfig


class TilePlacement(NamedTuple):
    """Where a tile is drawn, in layout pixels from the top-left corner of the grid."""

    value: int
    row: int
    col: int
    left: float
    top: float


def tile_layout(grid: ndarray, layout: LayoutConfig) -> list[TilePlacement]:
    """
    Compute the position of every tile of the grid.

    Parameters
    ----------
    grid : ndarray
        The game grid.
    layout : LayoutConfig
        Tile size and spacing.

    Returns
    -------
    list[TilePlacement]
        One placement per non-zero cell, in row-major order.
    """
    step = layout.step
    return [
        TilePlacement(value=int(value), row=row, col=col, left=col * step, top=row * step)
        for (row, col), value in _cells(grid)
        if value != 0
    ]


def _cells(grid: ndarray):
    size = grid.shape[1]
    for index, value in enumerate(grid.flat):
        yield divmod(index, size), value


class WindowBoard:
    """
    A class for rendering the 2048 game in a Matplotlib window.

    Methods
    -------
    show_grid(grid, score, best)
        Clear the tiles and draw the current grid.
    show_message(text, kind)
        Display the win or loss banner.
    hide_message()
        Hide the banner.
    register_key_handler(handler)
        Register a function to handle keyboard events.
    register_pointer_handlers(on_press, on_release)
        Register functions to handle mouse presses and releases.
    register_restart_handler(handler)
        Register the callback of the "New Game" button.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "#CDC1B4",
        2: "#EEE4DA",
        4: "#EDE0C8",
        8: "#F2B179",
        16: "#F59563",
        32: "#F67C5F",
        64: "#F65E3B",
        128: "#EDCF72",
        256: "#EDCC61",
        512: "#EDC850",
        1024: "#EDC53F",
        2048: "#EDC22E",
    }
    SUPER_COLOR = "#3C3A32"
    BACKGROUND = "#BBADA0"
    DARK_TEXT = "#776E65"
    LIGHT_TEXT = "#F9F6F2"

    # ##: Banner styles, keyed by message kind.
    BANNERS = {
        "game-won": {"facecolor": "#EDC22E", "color": LIGHT_TEXT},
        "game-over": {"facecolor": "#EEE4DA", "color": DARK_TEXT},
    }

    def __init__(self, title: str, size: int, layout: Optional[LayoutConfig] = None):
        """
        Initialize the game window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the grid (e.g., 4 for a 4x4 grid).
        layout : LayoutConfig, optional
            Tile size and spacing (default: 106 px tiles, 15 px gaps).
        """
        self.size = size
        self.layout = layout or LayoutConfig()
        self.fig, self.axe = plt.subplots(figsize=(5, 6))
        self.fig.canvas.manager.set_window_title(title)
        self._disable_default_keymap()
        self._setup_axes()

        self.tiles: list = []
        self.message = self.axe.text(
            self.extent / 2 - self.layout.gap,
            self.extent / 2 - self.layout.gap,
            "",
            ha="center",
            va="center",
            fontsize="xx-large",
            fontweight="bold",
            zorder=10,
            visible=False,
        )

        self.button_axe = self.fig.add_axes([0.35, 0.02, 0.3, 0.07])
        self.button = Button(self.button_axe, "New Game", color="#8F7A66", hovercolor="#9F8B77")
        self.button.label.set_color(self.LIGHT_TEXT)

        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    @property
    def extent(self) -> float:
        """Width of the grid including the outer gaps."""
        return self.size * self.layout.step + self.layout.gap

    def _disable_default_keymap(self):
        """Arrow keys, backspace and r are bound to navigation by default."""
        manager = self.fig.canvas.manager
        handler_id = getattr(manager, "key_press_handler_id", None)
        if handler_id is not None:
            self.fig.canvas.mpl_disconnect(handler_id)

    def _setup_axes(self):
        """
        Set up the axes for the grid.

        The axes use layout pixels with the origin at the top-left corner of the first cell, so tile positions
        computed by ``tile_layout`` can be drawn directly.
        """
        self.fig.subplots_adjust(left=0.03, bottom=0.12, right=0.97, top=0.9)
        self.fig.patch.set_facecolor("#FAF8EF")
        self.axe.set_facecolor(self.BACKGROUND)

        gap = self.layout.gap
        self.axe.set_xlim(-gap, self.extent - gap)
        self.axe.set_ylim(self.extent - gap, -gap)
        self.axe.set_aspect("equal")

        # ##: Remove all ticks and labels for a cleaner game board appearance.
        self.axe.tick_params(axis="both", which="both", length=0)
        self.axe.set_xticks([])
        self.axe.set_yticks([])
        for spine in self.axe.spines.values():
            spine.set_visible(False)

        # ##: Empty cells are static.
        for row in range(self.size):
            for col in range(self.size):
                self.axe.add_patch(self._square(col * self.layout.step, row * self.layout.step, self.COLORS[0]))

    def _square(self, left: float, top: float, color: str) -> FancyBboxPatch:
        return FancyBboxPatch(
            (left, top),
            self.layout.cell,
            self.layout.cell,
            boxstyle=f"round,pad=0,rounding_size={self.layout.cell * 0.05}",
            facecolor=color,
            edgecolor="none",
        )

    def _close_handler(self, event: Optional[Event] = None):
        """Set the closed flag when the window is closed."""
        self.closed = True

    def clear_tiles(self):
        """Remove every tile drawn so far."""
        for artist in self.tiles:
            artist.remove()
        self.tiles = []

    def show_grid(self, grid: ndarray, score: int, best: int):
        """
        Show or update the game grid.

        Parameters
        ----------
        grid : ndarray
            The current grid.
        score : int
            The current score.
        best : int
            The best score.
        """
        self.clear_tiles()

        half = self.layout.cell / 2
        for tile in tile_layout(grid, self.layout):
            patch = self._square(tile.left, tile.top, self.COLORS.get(tile.value, self.SUPER_COLOR))
            self.axe.add_patch(patch)
            text = self.axe.text(
                tile.left + half,
                tile.top + half,
                str(tile.value),
                ha="center",
                va="center",
                fontsize=self._font_size(tile.value),
                fontweight="bold",
                color=self.DARK_TEXT if tile.value <= 4 else self.LIGHT_TEXT,
            )
            self.tiles.extend([patch, text])

        self.axe.set_title(
            f"Score: {score}    Best: {best}", fontsize="large", fontweight="bold", color=self.DARK_TEXT
        )
        self._redraw()

    @staticmethod
    def _font_size(value: int) -> int:
        digits = len(str(value))
        return {1: 28, 2: 26, 3: 22, 4: 18}.get(digits, 14)

    def show_message(self, text: str, kind: str):
        """
        Display the banner over the grid.

        Parameters
        ----------
        text : str
            Message, e.g. "You win!".
        kind : str
            ``"game-won"`` or ``"game-over"``; selects the banner colors.
        """
        style = self.BANNERS.get(kind, self.BANNERS["game-over"])
        self.message.set_text(text)
        self.message.set_color(style["color"])
        self.message.set_bbox({"boxstyle": "round,pad=0.8", "facecolor": style["facecolor"], "alpha": 0.9})
        self.message.set_visible(True)
        self._redraw()

    def hide_message(self):
        self.message.set_visible(False)
        self._redraw()

    @property
    def message_visible(self) -> bool:
        return self.message.get_visible()

    def _redraw(self):
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def screen_position(self, event: Event) -> tuple[float, float]:
        """
        Convert the position of a mouse event to screen coordinates, with y growing downwards.

        Parameters
        ----------
        event : Event
            A Matplotlib mouse event.

        Returns
        -------
        tuple[float, float]
            The (x, y) position in pixels from the top-left corner of the figure.
        """
        return float(event.x), float(self.fig.bbox.height - event.y)

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function to handle keyboard events.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def register_pointer_handlers(self, on_press: Callable, on_release: Callable):
        """
        Register mouse handlers used to detect swipes.

        Parameters
        ----------
        on_press : Callable
            Called with the ``button_press_event``.
        on_release : Callable
            Called with the ``button_release_event``.
        """
        self.fig.canvas.mpl_connect("button_press_event", on_press)
        self.fig.canvas.mpl_connect("button_release_event", on_release)

    def register_restart_handler(self, handler: Callable):
        """Register the callback of the "New Game" button."""
        self.button.on_clicked(handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """
        Close the window.

        This method closes the game window and sets the closed flag to True.
        """
        plt.close(self.fig)
        self.closed = True

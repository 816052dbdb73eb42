"""Shared colours, window helpers and the page header used by every screen."""

from __future__ import annotations

DARK_BLUE = (20, 40, 80)
PANEL_BLUE = (23, 44, 101)
WHITE = (255, 255, 255)
LOGO_TEXT = "ВШЭ"
FONT_FAMILY = "TkDefaultFont"


def rgb_hex(r: int, g: int, b: int) -> str:
    """Return the Tk colour string for an RGB triple."""
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"colour channel out of range: {channel}")
    return f"#{r:02x}{g:02x}{b:02x}"


def geometry(width: int, height: int) -> str:
    """Return a Tk geometry string for a window of the given size."""
    if width <= 0 or height <= 0:
        raise ValueError(f"window size must be positive: {width}x{height}")
    return f"{width}x{height}"


def make_window(title: str, width: int, height: int):
    """Create the application's root window with a title and size."""
    import tkinter as tk

    root = tk.Tk()
    root.title(title)
    root.geometry(geometry(width, height))
    return root


def build_header(parent, title: str):
    """Build the dark header strip: logo on the left, title centred."""
    import tkinter as tk

    background = rgb_hex(*DARK_BLUE)
    foreground = rgb_hex(*WHITE)
    header = tk.Frame(parent, bg=background)
    logo = tk.Label(
        header,
        text=LOGO_TEXT,
        font=(FONT_FAMILY, 24, "bold"),
        bg=background,
        fg=foreground,
    )
    logo.pack(side="left", padx=8, pady=4)
    heading = tk.Label(
        header,
        text=title,
        font=(FONT_FAMILY, 20, "bold"),
        bg=background,
        fg=foreground,
    )
    heading.pack(side="left", expand=True, fill="x", pady=4)
    return header
# src/libdialog/host/theme.py
"""
CSS themes for dialogs drawn by GtkHost.
"""

import logging

from gi.repository import Gtk

logger = logging.getLogger('libdialog.theme')

DIALOG_THEMES = {
    "Plain": {
        "dialog_bg": "#ffffff",
        "dialog_fg": "#000000",
        "dialog_border": "#cccccc",
        "button_bg": "#f0f0f0",
        "button_hover": "#e0e0e0",
        "button_active": "#d0d0d0",
        "entry_bg": "#ffffff",
        "entry_fg": "#000000",
        "entry_border": "#cccccc",
        "entry_focus": "#2c71cc"
    },
    "Tokyo Night": {
        "dialog_bg": "#1a1b26",
        "dialog_fg": "#c0caf5",
        "dialog_border": "#414868",
        "button_bg": "#24283b",
        "button_hover": "#414868",
        "button_active": "#565f89",
        "entry_bg": "#1f2335",
        "entry_fg": "#c0caf5",
        "entry_border": "#414868",
        "entry_focus": "#7aa2f7"
    },
    "Forest": {
        "dialog_bg": "#2b3328",
        "dialog_fg": "#e4dfd2",
        "dialog_border": "#4f6146",
        "button_bg": "#3a4637",
        "button_hover": "#4f6146",
        "button_active": "#546c4d",
        "entry_bg": "#323d2f",
        "entry_fg": "#e4dfd2",
        "entry_border": "#4f6146",
        "entry_focus": "#a7c080"
    }
}


def generate_css(theme, backdrop):
    """
    Generate dialog CSS from a theme and the dialog backdrop insets.

    Args:
        theme (dict): One of DIALOG_THEMES
        backdrop (dict): Backdrop description with 'insets'

    Returns:
        str: CSS for the libdialog-* style classes
    """
    insets = backdrop["insets"]
    return f"""
    .libdialog-dialog {{
        background-color: {theme['dialog_bg']};
        color: {theme['dialog_fg']};
        border: 2px solid {theme['dialog_border']};
        border-radius: 8px;
        padding: {insets['top']}px {insets['right']}px {insets['bottom']}px {insets['left']}px;
    }}

    .libdialog-fontstring {{
        color: {theme['dialog_fg']};
    }}

    .libdialog-button {{
        background-color: {theme['button_bg']};
        color: {theme['dialog_fg']};
        padding: 2px 10px;
        border-radius: 6px;
        min-height: 0;
    }}

    .libdialog-button:hover {{
        background-color: {theme['button_hover']};
    }}

    .libdialog-button:active {{
        background-color: {theme['button_active']};
    }}

    .libdialog-editbox {{
        background-color: {theme['entry_bg']};
        color: {theme['entry_fg']};
        border: 1px solid {theme['entry_border']};
        border-radius: 6px;
        min-height: 0;
    }}

    .libdialog-editbox:focus {{
        border-color: {theme['entry_focus']};
    }}

    .libdialog-checkbox {{
        color: {theme['dialog_fg']};
    }}
    """


def _on_parsing_error(provider, section, error):
    logger.warning("Dialog theme CSS error at %s: %s", section.to_string(), error.message)


def apply_theme(display, theme_name, backdrop):
    """Install the named theme for every LibDialog widget on display."""
    theme = DIALOG_THEMES.get(theme_name)
    if theme is None:
        logger.warning("Unknown theme %r, using Plain", theme_name)
        theme = DIALOG_THEMES["Plain"]

    provider = Gtk.CssProvider()
    provider.connect('parsing-error', _on_parsing_error)
    provider.load_from_data(generate_css(theme, backdrop).encode())
    Gtk.StyleContext.add_provider_for_display(
        display,
        provider,
        Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
    )
    return provider

"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Deep navy campus palette with a bright blue primary and teal accents
CAMPUS_NIGHT = Theme(
    name="campus-night",
    primary="#4f8cff",      # Campus blue - main accent, user bubbles
    secondary="#8b7cf6",    # Violet - assistant bubbles
    accent="#2dd4bf",       # Teal - quick actions, badges
    foreground="#e2e8f0",   # Light text
    background="#0b1120",   # Deepest background
    success="#4ade80",      # Green - send button
    warning="#fbbf24",      # Amber - warnings, typing indicator
    error="#f87171",        # Red - errors
    surface="#111a2e",      # Main surface
    panel="#0f172a",        # Panel backgrounds
    dark=True,
    variables={
        # Cursor styling
        "block-cursor-foreground": "#0b1120",
        "block-cursor-background": "#93c5fd",
        "block-cursor-text-style": "bold",
        "block-hover-background": "#1e293b 20%",

        # Input styling
        "input-cursor-background": "#e2e8f0",
        "input-cursor-foreground": "#0b1120",
        "input-selection-background": "#4f8cff 30%",

        # Border colors
        "border": "#334155",
        "border-blurred": "#1e293b",

        # Scrollbar styling
        "scrollbar": "#1e293b",
        "scrollbar-hover": "#334155",
        "scrollbar-active": "#4f8cff",
        "scrollbar-background": "#0f172a",
        "scrollbar-corner-color": "#0f172a",

        # Footer styling
        "footer-foreground": "#cbd5e1",
        "footer-background": "#0b1120",
        "footer-key-foreground": "#2dd4bf",
        "footer-key-background": "#1e293b",
        "footer-description-foreground": "#94a3b8",

        # Text variants
        "text-muted": "#64748b",
        "text-disabled": "#334155",

        # Button styling
        "button-foreground": "#e2e8f0",
        "button-color-foreground": "#0b1120",
        "button-focus-text-style": "bold reverse",
    },
)

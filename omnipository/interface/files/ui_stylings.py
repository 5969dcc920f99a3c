
# ── GUI Theme ────────────────────────────────────────────────────────

class Colors:
    """Centralized GUI color palette."""
    BACKGROUND    = (252, 253, 254)    # Screen background
    HALO          = (224, 242, 254)    # Radial glow behind the spheres
    INK           = (8, 47, 73)        # Main text color (sky-950)
    INK_FADED     = (160, 176, 190)    # Secondary labels
    PANE          = (240, 249, 255)    # Detail study pane
    PANE_BORDER   = (224, 242, 254)
    RULE          = (226, 232, 240)    # Header/footer separators
    HIGHLIGHT     = (255, 255, 255)    # Specular spot on the spheres
    HELP_BG       = (8, 47, 73, 200)


class FontSizes:
    """Centralized GUI font sizes, in fraction of the screen height."""
    SPHERE      = 1./45    # Sphere titles
    LABEL       = 1./60    # Header, footer and corner labels
    PANE_TITLE  = 1./18    # '<Theme> Pane'
    HELP        = 1./50    # Help overlay body text


# ── Help Strings ─────────────────────────────────────────────────────

INTERFACE_HELP = {
"title": "Controls",
"content": \
"""CLICK: open a sphere
ESC/BACKSPACE: back to the platform
H: show/hide this help
Q: quit"""
}

"""
    Main window of the Omnipository shell. Runs the pygame loop, which is the frame
    driver of the core (one shell.tick per refresh), and draws whatever the core's
    view model says: floating spheres in OVERVIEW, the study pane in DETAIL.
"""
import pygame

from ..core import Omnipository, ViewState
from .files import Colors, FontSizes, INTERFACE_HELP
from .utils import SmartFont, HelpEnum

BACK_LABEL = "< Back to Platform"


class MainWindow:
    """
    Main window of the Omnipository application. Deals with the pygame loop,
    event handling and dispatching to the shell, and drawing.
    """
    def __init__(self, screen_size=(720, 1280), fps=60, config=None):
        """
            Args:
                screen_size (tuple (H,W)): Size of the screen in pixels.
                fps (int): Target frames per second.
                config (dict): Overrides for the shell DEFAULTS.
        """
        self.sH, self.sW = screen_size
        self.fps = fps

        self.shell = Omnipository(config)

        pygame.init()
        pygame.display.set_caption("Omnipository")
        self.screen = pygame.display.set_mode((self.sW, self.sH), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()

        self.font_sphere = SmartFont(fract_font_size=FontSizes.SPHERE, base_sH=self.sH)
        self.font_label = SmartFont(fract_font_size=FontSizes.LABEL, base_sH=self.sH)
        self.font_pane = SmartFont(fract_font_size=FontSizes.PANE_TITLE, base_sH=self.sH)
        self.font_help = SmartFont(fract_font_size=FontSizes.HELP, base_sH=self.sH)
        self.fonts = [self.font_sphere, self.font_label, self.font_pane, self.font_help]

        self.running = True
        self.display_help = HelpEnum()
        self.dt = 1. / self.fps

        self.back_rect = None  # Clickable area of the back label, set when drawing DETAIL

    @property
    def origin(self):
        """
            Screen position of the world (0,0).
        """
        return (self.sW / 2, self.sH / 2)

    def main_loop(self):
        """
            Runs the main loop. Events of a frame are handled before the frame's
            tick, so transitions apply starting from that tick.
        """
        while self.running:
            self.handle_events()

            self.shell.tick(self.dt)

            self.draw()

            pygame.display.flip()
            self.dt = self.clock.tick(self.fps) / 1000.

        pygame.quit()

    def handle_events(self):
        """
            Handles all events in the main loop.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_q:
                    self.running = False
                if event.key == pygame.K_h:
                    self.display_help.toggle()
                if event.key in (pygame.K_ESCAPE, pygame.K_BACKSPACE):
                    if self.shell.state is ViewState.DETAIL:
                        self._back()

            if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self._clicked(event.pos)

            if event.type == pygame.VIDEORESIZE:
                self.sW, self.sH = event.w, event.h
                for font in self.fonts:
                    font.sH = self.sH

        if not self.running:
            print("Quitting Omnipository")

    def _clicked(self, pos):
        if self.shell.state is ViewState.OVERVIEW:
            index = self.shell.sphere_at(pos, self.origin)
            if index is not None:
                self.shell.select_sphere(index)
                print(f"Opened {self.shell.active_theme_id}")
        elif self.back_rect is not None and self.back_rect.collidepoint(pos):
            self._back()

    def _back(self):
        self.shell.back()
        print("Back to platform")

    def draw(self):
        view = self.shell.render()

        self.screen.fill(Colors.BACKGROUND)
        if view.mode is ViewState.OVERVIEW:
            self.draw_overview(view)
        else:
            self.draw_detail(view)

        if self.display_help.visible:
            self.draw_help()

    def draw_overview(self, view):
        """
            Draws the halo and the three spheres, zoomed by view.scale around the screen center.
        """
        cx, cy = self.origin
        pygame.draw.circle(self.screen, Colors.HALO, (int(cx), int(cy)), int(0.6 * max(self.sW, self.sH)))

        mouse_pos = pygame.mouse.get_pos()
        hovered = self.shell.sphere_at(mouse_pos, self.origin)
        pressed = pygame.mouse.get_pressed()[0]

        for sphere in view.spheres:
            factor = 1.
            if sphere.index == hovered:
                factor = 0.95 if pressed else 1.05
            radius = self.shell.sphere_radius * view.scale * factor
            center = (cx + sphere.x * view.scale, cy + sphere.y * view.scale)
            self._draw_sphere(center, radius, sphere.theme)

    def _draw_sphere(self, center, radius, theme):
        palette = theme.palette
        r = max(1, int(radius))
        x, y = int(center[0]), int(center[1])

        # Soft shadow, drawn on its own alpha surface
        shadow = pygame.Surface((4 * r, 4 * r), pygame.SRCALPHA)
        pygame.draw.circle(shadow, palette.shadow_color, (2 * r, 2 * r + r // 6), int(r * 1.08))
        self.screen.blit(shadow, (x - 2 * r, y - 2 * r))

        pygame.draw.circle(self.screen, palette.background, (x, y), r)
        pygame.draw.circle(self.screen, Colors.HIGHLIGHT, (x, y), r, width=max(1, r // 40))

        spot = pygame.Rect(0, 0, int(r * 0.7), int(r * 0.35))
        spot.center = (x - int(r * 0.35), y - int(r * 0.55))
        pygame.draw.ellipse(self.screen, Colors.HIGHLIGHT, spot)

        title = self.font_sphere.render(theme.title, palette.text_color, bold=True)
        self.screen.blit(title, title.get_rect(center=(x, y)))

    def draw_detail(self, view):
        """
            Draws the study pane of the selected theme. The pane slides in while
            the zoom spring travels from the overview scale to the detail scale.
        """
        spring_cfg = self.shell.config.spring
        span = spring_cfg.detail_scale - spring_cfg.overview_scale
        progress = min(1., max(0., (view.scale - spring_cfg.overview_scale) / span))
        offset = int(50 * (1. - progress))

        margin = int(0.02 * self.sW)
        header_h = int(0.08 * self.sH)
        footer_h = int(0.1 * self.sH)
        top = margin + offset

        # Header
        back = self.font_label.render(BACK_LABEL, Colors.INK_FADED, bold=True)
        self.back_rect = back.get_rect(midleft=(2 * margin, top + header_h // 2))
        self.screen.blit(back, self.back_rect)
        levels = self.font_label.render("Vertical Navigation (Levels)", Colors.INK, bold=True)
        self.screen.blit(levels, levels.get_rect(center=(self.sW // 2, top + header_h // 2)))
        pygame.draw.circle(self.screen, Colors.RULE, (self.sW - 3 * margin, top + header_h // 2), header_h // 4, width=1)
        pygame.draw.line(self.screen, Colors.RULE, (margin, top + header_h), (self.sW - margin, top + header_h))

        # History bridge
        bridge_y = top + header_h + margin
        bridge = self.font_label.render('History Bridge / "The Path"', Colors.INK_FADED)
        bridge_rect = bridge.get_rect(midright=(self.sW // 2 - margin // 2, bridge_y))
        self.screen.blit(bridge, bridge_rect)
        line_start, line_end = (self.sW // 2, bridge_y), (self.sW // 2 + int(0.15 * self.sW), bridge_y)
        pygame.draw.line(self.screen, Colors.INK_FADED, line_start, line_end)
        for frac in (1. / 3., 2. / 3.):
            dot_x = int(line_start[0] + frac * (line_end[0] - line_start[0]))
            pygame.draw.circle(self.screen, Colors.INK, (dot_x, bridge_y), 3)

        # Study pane
        pane_top = bridge_y + margin
        pane_bottom = self.sH - footer_h - margin + offset
        pane = pygame.Rect(2 * margin, pane_top, self.sW - 4 * margin, max(1, pane_bottom - pane_top))
        radius = min(pane.w, pane.h) // 6
        pygame.draw.rect(self.screen, Colors.PANE, pane, border_radius=radius)
        pygame.draw.rect(self.screen, Colors.PANE_BORDER, pane, width=1, border_radius=radius)

        theme_title = view.active_theme.title if view.active_theme is not None else ""
        pane_label = self.font_pane.render(f"{theme_title} Pane", Colors.INK_FADED, bold=True)
        self.screen.blit(pane_label, pane_label.get_rect(center=pane.center))

        conditions = self.font_label.render("Conditions", Colors.INK_FADED, bold=True)
        self.screen.blit(conditions, conditions.get_rect(bottomleft=(pane.left + 3 * margin, pane.bottom - 2 * margin)))
        tools = self.font_label.render("Study Tools", Colors.INK_FADED, bold=True)
        self.screen.blit(tools, tools.get_rect(bottomright=(pane.right - 3 * margin, pane.bottom - 2 * margin)))

        # Footer
        footer_top = self.sH - footer_h + offset
        pygame.draw.line(self.screen, Colors.RULE, (margin, footer_top), (self.sW - margin, footer_top))
        themes = self.font_label.render("Horizontal Navigation (Themes within levels)", Colors.INK_FADED, bold=True)
        self.screen.blit(themes, themes.get_rect(center=(self.sW // 2, footer_top + footer_h // 2)))

    def draw_help(self):
        """
            Draws the help box in the bottom left corner.
        """
        lines = [INTERFACE_HELP['title']] + INTERFACE_HELP['content'].split('\n')
        rendered = [self.font_help.render(line, Colors.HIGHLIGHT) for line in lines]
        pad = 8
        width = max(surf.get_width() for surf in rendered) + 2 * pad
        height = sum(surf.get_height() for surf in rendered) + 2 * pad

        box = pygame.Surface((width, height), pygame.SRCALPHA)
        box.fill(Colors.HELP_BG)
        y = pad
        for surf in rendered:
            box.blit(surf, (pad, y))
            y += surf.get_height()
        self.screen.blit(box, (pad, self.sH - height - pad))

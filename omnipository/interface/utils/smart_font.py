import pygame


class SmartFont:
    """
        Font whose size is a fraction of the screen height, so that text
        keeps its proportions when the window is resized.
    """
    def __init__(self, fract_font_size=1./20., font_path=None, base_sH=None, min_font_size=8):
        """
            Args:
                fract_font_size (float): Size of the font, in fraction of screen height.
                font_path (str, optional): Path to a font file. If None, uses pygame's default font.
                base_sH (int, optional): Screen height used to compute the pixel size. If None,
                    the font is unusable until sH is set.
                min_font_size (int): Pixel size under which the font is never shrunk.
        """
        self.font_path = font_path
        self._f_size = fract_font_size
        self.min_font_size = min_font_size

        self._sH = None
        self.font = None
        if(base_sH is not None):
            self.sH = base_sH

    @property
    def sH(self):
        return self._sH

    @sH.setter
    def sH(self, new_sH):
        """
            Sets the screen height and rebuilds the font at the matching size.
        """
        self._sH = new_sH
        size = max(self.min_font_size, int(new_sH * self._f_size))
        self.font = pygame.font.Font(self.font_path, size)

    def render(self, text, color, bold=False):
        """
            Renders text to a new surface. Text is uppercased, as all labels of the shell are.
        """
        self.font.set_bold(bold)
        return self.font.render(text.upper(), True, color)

"""
utils/scaler.py — Window letterboxing for FarmerHarvest.

The game always renders a fixed-size frame: the 900x540 field plus the
HUD strip below it. The window, however, is resizable (desktop) or sized
by the page (pygbag). Scaler fits that frame into whatever window size it
is given, keeping the aspect ratio and centering it between black bars.

Only main.py uses this. The game core never knows the window size.

Usage:
    scaler = Scaler(frame.get_size(), window.get_size())
    bus.subscribe(pygame.VIDEORESIZE, scaler.on_resize)

    # each frame, after drawing into frame:
    scaler.blit(window, frame)
"""

import pygame


class Scaler:
    """Uniform scale-to-fit of a fixed frame into a window.

    Attributes:
        frame_w:   Native frame width.
        frame_h:   Native frame height.
        scale:     Scale factor applied to the frame.
        dest_rect: pygame.Rect in window pixels where the frame lands.
    """

    def __init__(self, frame_size: tuple[int, int], window_size: tuple[int, int]) -> None:
        self.frame_w, self.frame_h = frame_size
        self.scale: float = 1.0
        self.dest_rect = pygame.Rect(0, 0, self.frame_w, self.frame_h)
        self.fit(*window_size)

    def fit(self, window_w: int, window_h: int) -> None:
        """Recompute scale and placement for a window size.

        Chooses the largest uniform scale at which the whole frame is
        visible. Degenerate (zero-sized) windows are ignored.

        Args:
            window_w: Window width in pixels.
            window_h: Window height in pixels.
        """
        if window_w <= 0 or window_h <= 0:
            return
        self.scale = min(window_w / self.frame_w, window_h / self.frame_h)
        scaled_w = int(self.frame_w * self.scale)
        scaled_h = int(self.frame_h * self.scale)
        self.dest_rect = pygame.Rect(
            (window_w - scaled_w) // 2,
            (window_h - scaled_h) // 2,
            scaled_w,
            scaled_h,
        )

    def on_resize(self, event: pygame.event.Event) -> None:
        """VIDEORESIZE handler."""
        self.fit(event.w, event.h)

    def blit(self, window: pygame.Surface, frame: pygame.Surface) -> None:
        """Clear the window to black and draw the scaled frame onto it.

        Args:
            window: The display surface.
            frame:  The native-size frame all game rendering writes to.
        """
        window.fill((0, 0, 0))
        if self.dest_rect.size == frame.get_size():
            window.blit(frame, self.dest_rect.topleft)
        else:
            window.blit(pygame.transform.smoothscale(frame, self.dest_rect.size),
                        self.dest_rect.topleft)

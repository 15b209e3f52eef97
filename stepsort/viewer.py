"""
pygame front end for a SortSession.

The window shows one bar per element, its label underneath, the active bar
in ACTIVE_COLOR and the comparison bar in COMPARE_COLOR. Sorting runs as an
asyncio task next to the frame loop, so the window keeps pumping events
while the engine sleeps between steps.

Keys:  1-5 select algorithm   SPACE start   R new random array
       ESC cancel the running sort (quit when idle)
"""

import asyncio
import logging

import pygame

from . import settings as S
from .catalog import ALGORITHMS, describe
from .engine import SortSession
from .errors import BusyError, StepSortError
from .model import StepEvent

logger = logging.getLogger(__name__)

# ============================================================
# ======================= COLOR / DRAW =======================
# ============================================================


_FONT_FACES = {
    "mono": ("Consolas", "DejaVu Sans Mono", "Courier New"),
    "sans": ("Segoe UI", "DejaVu Sans", "Arial"),
}

# role -> (face, point size)
FONT_ROLES = {
    "title":   ("mono", 24),
    "small":   ("sans", 13),
    "mono_sm": ("mono", 12),
}


def load_font(face, size):
    """First installed font of ``face``; pygame's bundled font otherwise."""
    path = None
    for name in _FONT_FACES[face]:
        path = pygame.font.match_font(name)
        if path: break
    return pygame.font.Font(path, size)


def build_fonts():
    return {role: load_font(face, size) for role, (face, size) in FONT_ROLES.items()}


def bar_width(n: int) -> int:
    return max(S.BAR_MIN_W, min(S.BAR_MAX_W, S.BAR_AREA_W // max(1, n)))


def bar_rects(display, width=S.WINDOW_WIDTH, height=S.WINDOW_HEIGHT):
    """One pygame.Rect per magnitude, centred horizontally, bottoms aligned."""
    n  = len(display)
    bw = bar_width(n)
    total = n * bw + (n - 1) * S.BAR_SPACING if n else 0
    x0 = (width - total) // 2
    floor = height - S.BAR_BOTTOM
    area  = floor - S.BAR_TOP
    rects = []
    for i, v in enumerate(display):
        h = max(1, int(area * v / 100.0))
        rects.append(pygame.Rect(x0 + i * (bw + S.BAR_SPACING), floor - h, bw, h))
    return rects


def bar_color(i, active, comparison):
    if i == active: return S.ACTIVE_COLOR
    if i == comparison: return S.COMPARE_COLOR
    return S.DEFAULT_COLOR


def _fmt_label(v):
    return f"{v:g}" if isinstance(v, float) else str(v)


def draw_bars(surface, fonts, display, labels, active=None, comparison=None, title=""):
    surface.fill(S.BACKGROUND_COLOR)
    w, h = surface.get_size()
    for i, r in enumerate(bar_rects(display, w, h)):
        pygame.draw.rect(surface, bar_color(i, active, comparison), r)
        lc = S.TEXT_COLOR if i in (active, comparison) else S.SUBTEXT_COLOR
        t  = fonts['mono_sm'].render(_fmt_label(labels[i]), True, lc)
        surface.blit(t, t.get_rect(midtop=(r.centerx, r.bottom + 6)))
    if title:
        surface.blit(fonts['title'].render(title, True, S.TEXT_COLOR), (16, 16))


def status_lines(session: SortSession, event: StepEvent = None):
    key  = session.algorithm or "bubble"
    info = describe(key)
    comps = event.comparisons if event else session.metrics.comparisons
    swaps = event.swaps if event else session.metrics.swaps
    ms    = event.elapsed_ms if event else session.metrics.elapsed_ms
    return [
        f"{info.name}   time {info.complexity}  space {info.space}  "
        f"stable {'yes' if info.stable else 'no'}",
        f"Comparisons: {comps}   Swaps: {swaps}   Execution Time: {ms:.2f}ms",
        f"Recommendation: {session.recommend()}",
    ]


def format_event(event: StepEvent) -> str:
    """One-line text rendering of a step: [active] and <comparison>."""
    cells = []
    for i, v in enumerate(event.labels):
        s = _fmt_label(v)
        if i == event.active: s = f"[{s}]"
        elif i == event.comparison: s = f"<{s}>"
        cells.append(s)
    tail = "  CANCELLED" if event.cancelled else ("  SORTED" if event.done else "")
    return f"{event.step:4d} {event.kind:<9} " + " ".join(cells) + tail


# ============================================================
# ========================= VIEWER ===========================
# ============================================================

class Viewer:
    def __init__(self, session: SortSession, screen, fonts, pace_ms=S.DEFAULT_PACE_MS):
        self.session = session
        self.screen  = screen
        self.fonts   = fonts
        self.pace_ms = pace_ms
        self.sel     = 0
        self.event   = None
        self.task    = None
        self.msg     = ""
        self.msg_ok  = True
        self.quit    = False
        session.subscribe(self._on_step)

    def _on_step(self, event: StepEvent):
        self.event = event

    def _notify(self, msg, ok=True):
        self.msg, self.msg_ok = msg, ok

    @property
    def key(self):
        return ALGORITHMS[self.sel][1]

    def start(self):
        if self.session.running:
            self._notify("A sort is already running", ok=False)
            return
        self.event = None
        self.session.algorithm = self.key
        self.task = asyncio.ensure_future(self.session.run_sort(self.key, self.pace_ms))
        self._notify(f"Sorting with {ALGORITHMS[self.sel][0]}")

    def handle(self, ev):
        if ev.type == pygame.QUIT:
            self.session.cancel(); self.quit = True
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_ESCAPE:
                if not self.session.cancel(): self.quit = True
            elif ev.key == pygame.K_SPACE:
                self.start()
            elif ev.key == pygame.K_r:
                try:
                    self.session.randomize(); self.event = None
                    self._notify("New random array")
                except BusyError as e:
                    self._notify(str(e), ok=False)
            elif pygame.K_1 <= ev.key < pygame.K_1 + len(ALGORITHMS):
                if self.session.running:
                    self._notify("Cannot switch algorithm while sorting", ok=False)
                else:
                    self.sel = ev.key - pygame.K_1
                    self.session.algorithm = self.key

    def draw(self):
        seq, ev = self.session.sequence, self.event
        active = ev.active if ev and not ev.done else None
        comp   = ev.comparison if ev and not ev.done else None
        name   = ALGORITHMS[self.sel][0]
        draw_bars(self.screen, self.fonts, seq.display, seq.labels, active, comp, name)
        y = self.screen.get_height() - 80
        for line in status_lines(self.session, ev):
            self.screen.blit(self.fonts['small'].render(line, True, S.SUBTEXT_COLOR), (16, y))
            y += 18
        if self.msg:
            col = S.OK_COLOR if self.msg_ok else S.ERROR_COLOR
            self.screen.blit(self.fonts['small'].render(self.msg, True, col), (16, 48))

    async def run(self):
        while not self.quit:
            for ev in pygame.event.get():
                self.handle(ev)
            if self.task and self.task.done():
                try:
                    res = self.task.result()
                    self._notify("Cancelled" if res.cancelled else "Sorted", ok=not res.cancelled)
                except StepSortError as e:
                    self._notify(str(e), ok=False)
                self.task = None
            self.draw()
            pygame.display.flip()
            await asyncio.sleep(1.0 / S.FPS)
        if self.task:
            await self.task


def run_window(session: SortSession, pace_ms=S.DEFAULT_PACE_MS, algorithm=None):
    pygame.init()
    logger.info("Opening %dx%d window", S.WINDOW_WIDTH, S.WINDOW_HEIGHT)
    try:
        screen = pygame.display.set_mode((S.WINDOW_WIDTH, S.WINDOW_HEIGHT))
        pygame.display.set_caption("stepsort")
        viewer = Viewer(session, screen, build_fonts(), pace_ms)
        if algorithm:
            viewer.sel = [k for _, k in ALGORITHMS].index(algorithm)
            session.algorithm = algorithm
        asyncio.run(viewer.run())
    finally:
        pygame.quit()

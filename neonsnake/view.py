"""
view.py — View layer.

Neon look:
  - Persistent scene surface faded a little each frame (glow trails)
  - Pre-rendered grid (drawn once, blitted every frame)
  - Additive-blended particles and glow halos
  - Food pulsing in radius and glow via a sine phase
  - Snake head and body told apart by colour and glow radius
  - Segments eased toward their cells (smooth movement between ticks)
  - Screen shake on the scene, full-window jolt on death

Public API:
    GameView(screen)      — bind to a pygame surface
    view.render(session)  — draw the current frame
"""

import math
import random

import pygame

from .config import (
    WIDTH, PANEL_H, GAME_W, GAME_H,
    OFFSET_X, OFFSET_Y, CELL, COLS, ROWS,
    BG, GRID_COL, GRID_ALPHA, FADE_ALPHA,
    HEAD_COL, TRAIL_COL, FOOD_COL, UI_COL,
    PANEL_BG, BORDER_COL,
    DIFFICULTIES, INTERPOLATION, FOOD_PULSE_STEP,
    STATE_MENU, STATE_OVER, STATE_PAUSED,
)
from .effects import Particle, cell_center
from .model import Food, GameSession, Snake

_DEATH_JOLT = 8


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _brighten(color: tuple, factor: float) -> tuple:
    return tuple(min(255, int(c * factor)) for c in color[:3])


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a GameSession snapshot."""

    # ── Construction ─────────────────────────────────────────────
    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._init_fonts()
        self._build_static_surfaces()
        self._glow_cache: dict[tuple, pygame.Surface] = {}

        # Score rack-up animation state
        self._disp_score: float = 0.0

        # For overlay title pulse animation
        self._anim_tick: int = 0

    # ── Main entry ───────────────────────────────────────────────
    def render(self, session: GameSession) -> None:
        self._anim_tick += 1
        self._disp_score += (session.run.score - self._disp_score) * 0.25

        session.snake.smooth(INTERPOLATION)

        # ── Game content onto the persistent scene
        self.scene.blit(self._fade_surf, (0, 0))
        self.scene.blit(self._grid_surf, (0, 0))
        self._draw_particles(session.particles)
        self._draw_food(session.food)
        if session.state != STATE_MENU:
            self._draw_snake(session.snake)

        # ── Compose
        self.screen.fill(BG)
        sx, sy = session.shake.offset()
        self.screen.blit(self.scene, (OFFSET_X + int(sx), OFFSET_Y + int(sy)))
        self._draw_border()
        self._draw_panel(session)

        # ── State overlays
        if session.state == STATE_MENU:
            self._draw_menu_overlay(session)
        elif session.state == STATE_PAUSED:
            self._draw_paused_overlay()
        elif session.state == STATE_OVER:
            self._draw_game_over_overlay(session)

        if session.death_shaking:
            self.screen.scroll(random.randint(-_DEATH_JOLT, _DEATH_JOLT),
                               random.randint(-_DEATH_JOLT, _DEATH_JOLT))

        pygame.display.flip()

    # ── Static surface pre-builds ─────────────────────────────────
    def _build_static_surfaces(self) -> None:
        self.scene = pygame.Surface((GAME_W, GAME_H))
        self.scene.fill(BG)

        # Trailing fade: black at low alpha leaves last frame's glow behind
        self._fade_surf = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        self._fade_surf.fill((*BG, FADE_ALPHA))

        self._veil = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        self._veil.fill((*BG, 200))

        self._grid_surf = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        for x in range(COLS + 1):
            pygame.draw.line(self._grid_surf, (*GRID_COL, GRID_ALPHA),
                             (x * CELL, 0), (x * CELL, GAME_H))
        for y in range(ROWS + 1):
            pygame.draw.line(self._grid_surf, (*GRID_COL, GRID_ALPHA),
                             (0, y * CELL), (GAME_W, y * CELL))

    def _glow(self, color: tuple, radius: int, strength: int) -> pygame.Surface:
        """
        Soft radial halo on black, meant for additive blits.
        Cached per (color, radius, strength); strength is quantised so
        fading halos reuse a handful of surfaces.
        """
        strength = strength // 8 * 8
        key = (color, radius, strength)
        surf = self._glow_cache.get(key)
        if surf is None:
            surf = pygame.Surface((radius * 2, radius * 2))
            for gr in range(radius, 0, -2):
                t = strength / 255 * (1 - gr / radius) ** 1.5
                pygame.draw.circle(surf, _lerp_color(BG, color, t), (radius, radius), gr)
            self._glow_cache[key] = surf
        return surf

    def _blit_glow(self, color: tuple, radius: int, center: tuple, strength: int = 90) -> None:
        radius = max(2, radius)
        self.scene.blit(self._glow(color, radius, strength),
                        (int(center[0]) - radius, int(center[1]) - radius),
                        special_flags=pygame.BLEND_RGB_ADD)

    # ── Particles ────────────────────────────────────────────────
    def _draw_particles(self, particles: list[Particle]) -> None:
        for p in particles:
            if not p.alive:
                continue
            life = max(0.0, min(1.0, p.life))
            size = max(1, int(p.size))
            self._blit_glow(p.color, size + 7, (p.x, p.y), int(70 * life))
            dot = pygame.Surface((size * 2, size * 2))
            pygame.draw.circle(dot, _lerp_color(BG, p.color, life), (size, size), size)
            self.scene.blit(dot, (int(p.x) - size, int(p.y) - size),
                            special_flags=pygame.BLEND_RGB_ADD)

    # ── Food ─────────────────────────────────────────────────────
    def _draw_food(self, food: Food) -> None:
        food.pulse += FOOD_PULSE_STEP
        wave = math.sin(food.pulse)
        scale = 1 + wave * 0.12
        glow = int(18 + wave * 8)
        cx, cy = cell_center(food.position)

        self._blit_glow(FOOD_COL, glow, (cx, cy))

        # Radial gradient (1 → 0.85 → 0.18 over half a cell) as concentric discs
        r = max(2, int(CELL / 3 * scale))
        for i in range(r, 0, -1):
            t = i / (CELL / 2)
            opacity = 1 - 0.3 * t if t < 0.5 else 0.85 - (t - 0.5) * 1.34
            pygame.draw.circle(self.scene, _lerp_color(BG, FOOD_COL, opacity),
                               (int(cx), int(cy)), i)

        pygame.draw.circle(self.scene, FOOD_COL, (int(cx), int(cy)),
                           max(2, int(CELL / 2.5 * scale)), 2)

    # ── Snake ────────────────────────────────────────────────────
    def _draw_snake(self, snake: Snake) -> None:
        length = len(snake.body)
        # Tail first so the head ends up on top
        for i in range(length - 1, -1, -1):
            rx, ry = snake.render_pos[i]
            is_head = i == 0
            color = HEAD_COL if is_head else TRAIL_COL
            intensity = 1 - (i / length) * 0.75

            self._blit_glow(color, 28 if is_head else 12,
                            (rx + CELL / 2, ry + CELL / 2),
                            int(110 * intensity))

            rect = pygame.Rect(int(rx) + 2, int(ry) + 2, CELL - 4, CELL - 4)
            fill = _lerp_color(BG, color, 0.55 * intensity)
            pygame.draw.rect(self.scene, fill, rect)
            # Bright corner mimics the linear gradient toward white-transparent
            hi = pygame.Rect(rect.x, rect.y, rect.w // 2, rect.h // 2)
            pygame.draw.rect(self.scene, _lerp_color(BG, color, intensity), hi)
            pygame.draw.rect(self.scene, _brighten(color, intensity), rect, 2)

    # ── Border ───────────────────────────────────────────────────
    def _draw_border(self) -> None:
        ox, oy = OFFSET_X, OFFSET_Y
        pygame.draw.rect(self.screen, BORDER_COL,
                         (ox - 1, oy - 1, GAME_W + 2, GAME_H + 2), 1)
        size = 14
        for pts in [
            [(ox - 1, oy + size), (ox - 1, oy - 1), (ox + size, oy - 1)],
            [(ox + GAME_W - size, oy + GAME_H), (ox + GAME_W, oy + GAME_H),
             (ox + GAME_W, oy + GAME_H - size)],
        ]:
            pygame.draw.lines(self.screen, HEAD_COL, False, pts, 2)
        for pts in [
            [(ox + GAME_W - size, oy - 1), (ox + GAME_W, oy - 1), (ox + GAME_W, oy + size)],
            [(ox - 1, oy + GAME_H - size), (ox - 1, oy + GAME_H), (ox + size, oy + GAME_H)],
        ]:
            pygame.draw.lines(self.screen, TRAIL_COL, False, pts, 2)

    # ── HUD Panel ─────────────────────────────────────────────────
    def _draw_panel(self, session: GameSession) -> None:
        pygame.draw.rect(self.screen, PANEL_BG, (0, 0, WIDTH, PANEL_H))
        pygame.draw.line(self.screen, BORDER_COL,
                         (0, PANEL_H - 1), (WIDTH, PANEL_H - 1), 1)

        # Score (left)
        self.screen.blit(self.font_small.render("SCORE", True, HEAD_COL), (16, 6))
        self.screen.blit(
            self.font_big.render(str(int(round(self._disp_score))), True, HEAD_COL),
            (16, 24),
        )

        # Level (second column)
        self.screen.blit(self.font_small.render("LEVEL", True, TRAIL_COL), (140, 6))
        self.screen.blit(
            self.font_big.render(str(session.run.level), True, TRAIL_COL),
            (140, 24),
        )

        # Best (right)
        best = self.font_small.render("BEST", True, UI_COL)
        self.screen.blit(best, best.get_rect(topright=(WIDTH - 16, 6)))
        best_val = self.font_big.render(str(session.high_score), True, UI_COL)
        self.screen.blit(best_val, best_val.get_rect(topright=(WIDTH - 16, 24)))

        # Centre: difficulty + audio switches
        diff_label = DIFFICULTIES[session.run.difficulty]["label"]
        diff_surf = self.font_small.render(diff_label, True, FOOD_COL)
        self.screen.blit(diff_surf, diff_surf.get_rect(center=(WIDTH // 2, 18)))

        prefs = session.prefs
        toggles = f"SND {'ON' if prefs.sound else 'OFF'}   MUS {'ON' if prefs.music else 'OFF'}"
        t_surf = self.font_tiny.render(toggles, True, UI_COL)
        self.screen.blit(t_surf, t_surf.get_rect(center=(WIDTH // 2, 44)))

        if session.state == STATE_PAUSED:
            badge = self.font_tiny.render("[ PAUSED ]", True, FOOD_COL)
            self.screen.blit(badge, badge.get_rect(topright=(WIDTH - 90, 10)))

    # ── Overlay infrastructure ────────────────────────────────────
    def _draw_overlay_base(self) -> None:
        self.screen.blit(self._veil, (OFFSET_X, OFFSET_Y))

    def _draw_animated_title(self, title: str, color: tuple,
                             cy: int, font: pygame.font.Font) -> int:
        """Title text breathing with the overlay tick, over an additive halo."""
        breath = 0.5 + 0.5 * math.sin(self._anim_tick * 0.05)
        surf = font.render(title, True, _brighten(color, 0.8 + 0.2 * breath))
        rect = surf.get_rect(midtop=(WIDTH // 2, cy))
        radius = rect.height
        halo = self._glow(color, radius, int(40 + 40 * breath))
        for hx in range(rect.left + radius // 2, rect.right, radius):
            self.screen.blit(halo, (hx - radius, rect.centery - radius),
                             special_flags=pygame.BLEND_RGB_ADD)
        self.screen.blit(surf, rect)
        return rect.bottom + 14

    def _draw_text_line(self, text: str, color: tuple,
                        cy: int, font: pygame.font.Font) -> int:
        surf = font.render(text, True, color)
        rect = surf.get_rect(midtop=(WIDTH // 2, cy))
        self.screen.blit(surf, rect)
        return rect.bottom + 8

    def _draw_button(self, label: str, color: tuple, cy: int) -> int:
        txt = self.font_small.render(label, True, color)
        box = txt.get_rect(midtop=(WIDTH // 2, cy)).inflate(48, 18)
        box.top = cy
        halo = self._glow(color, box.height, 60)
        for edge in (box.left, box.right):
            self.screen.blit(halo, (edge - box.height, box.centery - box.height),
                             special_flags=pygame.BLEND_RGB_ADD)
        pygame.draw.rect(self.screen, _lerp_color(BG, color, 0.6), box, 1)
        self.screen.blit(txt, txt.get_rect(center=box.center))
        return box.bottom + 10

    # ── State overlays ────────────────────────────────────────────
    def _draw_menu_overlay(self, session: GameSession) -> None:
        self._draw_overlay_base()
        cy = OFFSET_Y + GAME_H // 2 - 170

        cy = self._draw_animated_title("NEON SNAKE", HEAD_COL, cy, self.font_title)
        cy += 18

        diff_label = DIFFICULTIES[session.run.difficulty]["label"]
        cy = self._draw_text_line(
            f"◄   {diff_label}   ►",
            FOOD_COL, cy, self.font_med,
        )
        cy = self._draw_text_line(
            "PRESS  1  2  3  4  TO CHANGE", UI_COL, cy, self.font_tiny,
        )
        cy += 18
        cy = self._draw_button("ENTER — START GAME", HEAD_COL, cy)
        cy += 10
        cy = self._draw_text_line("ARROWS / WASD / ZQSD  MOVE    SPACE  PAUSE    R  RESTART",
                                  UI_COL, cy, self.font_tiny)
        self._draw_text_line("ESC  MENU    N  SOUND    M  MUSIC", UI_COL, cy, self.font_tiny)

    def _draw_paused_overlay(self) -> None:
        self._draw_overlay_base()
        cy = OFFSET_Y + GAME_H // 2 - 36
        cy = self._draw_animated_title("PAUSED", FOOD_COL, cy, self.font_title)
        cy += 6
        self._draw_text_line("PRESS  SPACE  TO RESUME", UI_COL, cy, self.font_med)

    def _draw_game_over_overlay(self, session: GameSession) -> None:
        self._draw_overlay_base()
        run = session.run

        cy = OFFSET_Y + GAME_H // 2 - 150
        cy = self._draw_animated_title("GAME OVER", TRAIL_COL, cy, self.font_title)
        cy += 6
        cy = self._draw_text_line(f"SCORE  {run.score}", HEAD_COL, cy, self.font_big)
        cy = self._draw_text_line(f"LEVEL  {run.level}", TRAIL_COL, cy, self.font_med)
        cy += 6

        if run.score > 0 and run.score >= session.high_score:
            cy = self._draw_text_line("★  NEW HIGH SCORE  ★", FOOD_COL, cy, self.font_small)
        else:
            cy = self._draw_text_line(f"BEST: {session.high_score}", UI_COL, cy, self.font_tiny)
        cy += 4

        diff_label = DIFFICULTIES[run.difficulty]["label"]
        cy = self._draw_text_line(
            f"DIFFICULTY: {diff_label}   |   PRESS 1-4 TO CHANGE",
            UI_COL, cy, self.font_tiny,
        )
        cy += 10
        cy = self._draw_button("R / ENTER — PLAY AGAIN", HEAD_COL, cy)
        self._draw_text_line("ESC — MENU", UI_COL, cy + 6, self.font_tiny)

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        specs = [
            ("font_title", "courier", 42, True),
            ("font_big",   "courier", 26, True),
            ("font_med",   "courier", 17, False),
            ("font_small", "courier", 13, True),
            ("font_tiny",  "courier", 11, False),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except (pygame.error, OSError):
                setattr(self, attr, pygame.font.SysFont(None, size))

#!/usr/bin/env python3
"""
Play snake in a pygame window and post the final score to the leaderboard.

Usage:
    python cli/play.py --name Alice
    python cli/play.py --name Alice --api-url http://localhost:5000

Controls:
    Enter           start (from the title screen)
    Arrow keys      steer
    Space           pause / resume
    R               back to the title screen after game over
    Esc             quit
"""

import os
import sys
import argparse
import logging

import pygame

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from domain.constants import CELL_SIZE  # noqa: E402
from domain.game_state import GameSession, Phase  # noqa: E402
from game_controller import GameController  # noqa: E402
from services.leaderboard_client import LeaderboardClient  # noqa: E402

logger = logging.getLogger(__name__)

HUD_HEIGHT = 120
FPS = 60

BACKGROUND = (249, 250, 251)
GRID_CELL = (240, 240, 240)
FOOD = (255, 82, 82)
SNAKE_HEAD = (46, 125, 50)
SNAKE_BODY = (76, 175, 80)
TEXT = (31, 41, 55)
ACCENT = (239, 68, 68)


def draw_board(surface: pygame.Surface, session: GameSession, cell_size: int = CELL_SIZE) -> None:
    """Redraw grid, food and snake (head darker than the body)."""
    gap = 1
    for y in range(session.grid_size):
        for x in range(session.grid_size):
            rect = pygame.Rect(x * cell_size, y * cell_size, cell_size - gap, cell_size - gap)
            pygame.draw.rect(surface, GRID_CELL, rect)

    fx, fy = session.food
    pygame.draw.rect(surface, FOOD, pygame.Rect(fx * cell_size, fy * cell_size, cell_size, cell_size))

    for idx, (x, y) in enumerate(session.snake):
        color = SNAKE_HEAD if idx == 0 else SNAKE_BODY
        pygame.draw.rect(surface, color, pygame.Rect(x * cell_size, y * cell_size, cell_size, cell_size))


def draw_hud(surface, font, session: GameSession, high_scores, top: int) -> None:
    lines = [(f"Player: {session.player_name or '-'}    Score: {session.score}", TEXT)]

    if session.phase == Phase.NOT_STARTED:
        lines.append(("Press Enter to start. Arrows steer, space pauses.", TEXT))
    elif session.phase == Phase.PAUSED:
        lines.append(("Paused", ACCENT))
    elif session.phase == Phase.OVER:
        lines.append(("Game over. Press R to play again.", ACCENT))

    if high_scores:
        board = "  ".join(f"{i}. {row['name']} {row['score']}" for i, row in enumerate(high_scores, start=1))
        lines.append((f"Top: {board}", TEXT))
    else:
        lines.append(("No high scores yet", TEXT))

    for i, (text, color) in enumerate(lines):
        surface.blit(font.render(text, True, color), (8, top + 8 + i * 28))


def run(player_name: str, api_url: str = None) -> None:
    client = LeaderboardClient(base_url=api_url)
    controller = GameController()
    controller.add_listener(client.handle_session_ended)
    client.fetch_high_scores_async()

    pygame.init()
    board_px = controller.grid_size * CELL_SIZE
    screen = pygame.display.set_mode((board_px, board_px + HUD_HEIGHT))
    pygame.display.set_caption("Snake")
    font = pygame.font.SysFont(None, 24)
    clock = pygame.time.Clock()

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_RETURN:
                        controller.start(player_name)
                    else:
                        controller.handle_key(pygame.key.name(event.key))

            session = controller.session
            screen.fill(BACKGROUND)
            draw_board(screen, session)
            draw_hud(screen, font, session, client.get_cached_scores(), top=board_px)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        controller.shutdown()
        client.close()
        pygame.quit()


def main():
    parser = argparse.ArgumentParser(
        description='Play snake and submit your score to the leaderboard',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        '--name', '-n',
        type=str,
        required=True,
        help='Player name shown on the leaderboard'
    )
    parser.add_argument(
        '--api-url',
        type=str,
        default=os.getenv('LEADERBOARD_API_URL'),
        help='Leaderboard API root (default: LEADERBOARD_API_URL or http://localhost:5000)'
    )
    args = parser.parse_args()

    if not args.name.strip():
        parser.error('--name must not be blank')

    logging.basicConfig(level=logging.INFO)
    run(args.name, api_url=args.api_url)


if __name__ == '__main__':
    main()

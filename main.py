import argparse
import logging
import sys

import pygame

import config
from game.game_logic import Game2048
from game.grid import Direction
from ui.controller import GameController
from ui.renderer import ConsoleRenderer, GameRenderer

logger = logging.getLogger("2048")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="2048 슬라이딩 타일 퍼즐")
    parser.add_argument("--size", type=int, default=config.BOARD_SIZE, help="보드 한 변의 길이")
    parser.add_argument("--seed", type=int, default=None, help="새 타일 위치/값의 난수 시드")
    parser.add_argument("--headless", action="store_true", help="창 없이 --moves 순서대로 진행")
    parser.add_argument("--moves", default="", help="헤드리스 모드에서 사용할 방향 문자열 (예: LLRU)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def setup_logging(level):
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def run_headless(game, moves):
    """창 없이 주어진 방향 문자열대로 게임을 진행하고 최종 점수를 반환합니다."""
    controller = GameController(game, ConsoleRenderer())
    for char in moves:
        if not char.strip():
            continue
        controller.handle_direction(Direction.from_value(char))
        if game.game_over:
            break
    return game.score


def open_window():
    pygame.init()
    try:
        screen = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
    except pygame.error as e:
        logger.exception("디스플레이를 열 수 없습니다.")
        raise RuntimeError("디스플레이를 열 수 없습니다.") from e
    pygame.display.set_caption(config.WINDOW_CAPTION)
    config.init_fonts()
    return screen


def run_window(game):
    try:
        screen = open_window()
        clock = pygame.time.Clock()
        renderer = GameRenderer(screen, board_size=game.size)
        controller = GameController(game, renderer)

        logger.info("시작: 보드 %dx%d", game.size, game.size)
        while True:
            clock.tick(config.FPS)

            # 이벤트는 도착한 순서대로 하나씩 처리합니다.
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                    logger.info("종료: 점수 %d", game.score)
                    return game.score
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_r:
                        controller.restart()
                    else:
                        controller.handle_key(event.key)

            renderer.draw()
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        game = Game2048(size=args.size, seed=args.seed)
        if args.headless:
            score = run_headless(game, args.moves)
            logger.info("최종 점수: %d", score)
        else:
            run_window(game)
    except (ValueError, RuntimeError):
        logger.exception("치명적 오류로 종료합니다.")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())

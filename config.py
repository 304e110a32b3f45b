import pygame

# --- 화면 및 UI 설정 ---
SCREEN_WIDTH = 800
SCORE_PANEL_HEIGHT = 80
SCREEN_HEIGHT = SCREEN_WIDTH + SCORE_PANEL_HEIGHT
BACKGROUND_COLOR = (250, 248, 239)
GRID_COLOR = (187, 173, 160) # 게임 보드 배경색
FPS = 30
WINDOW_CAPTION = "2048"

# --- 게임 보드 설정 ---
BOARD_SIZE = 4
TILE_GAP = 5
INITIAL_TILES = 2
FOUR_PROBABILITY = 0.1 # 새 타일이 4일 확률 (나머지는 2)

# --- 폰트 설정 ---
# 폰트 변수들을 선언만 하고, 실제 로딩은 init_fonts() 함수에서 수행합니다.
TILE_FONT = None
SCORE_FONT = None
OVERLAY_FONT = None


def init_fonts():
    """pygame 폰트 모듈을 초기화하고 폰트 전역 변수를 채웁니다."""
    global TILE_FONT, SCORE_FONT, OVERLAY_FONT
    if not pygame.font.get_init():
        pygame.font.init()
    TILE_FONT = pygame.font.SysFont("arial", 40, bold=True)
    SCORE_FONT = pygame.font.SysFont("arial", 32, bold=True)
    OVERLAY_FONT = pygame.font.Font(None, 96)


# --- 타일 색상 ---
EMPTY_TILE_COLOR = (205, 193, 180)
DEFAULT_TILE_COLOR = (60, 58, 50) # 2048 초과 타일
TEXT_COLOR = (119, 110, 101)

TILE_COLORS = {
    2: (238, 228, 218),
    4: (237, 224, 200),
    8: (242, 177, 121),
    16: (245, 149, 99),
    32: (246, 124, 95),
    64: (246, 94, 59),
    128: (237, 207, 114),
    256: (237, 204, 97),
    512: (237, 200, 80),
    1024: (237, 197, 63),
    2048: (237, 194, 46),
}

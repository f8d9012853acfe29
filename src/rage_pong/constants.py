"""
constants.py: Centralized configuration for game, timing, and input settings.
"""

import pygame

# -------- Match Config --------
WINNING_SCORE = 7
STARTING_ENERGY = 4             # Starting amount of 'rage'

# -------- Timing --------
TICK_MS = 10                    # One simulation step every 10 ms (100 ticks/s)
TICK_EVENT = pygame.USEREVENT + 1
RENDER_FPS = 100

# -------- Canvas & Walls --------
CANVAS_WIDTH = 900
CANVAS_HEIGHT = 600
TOP_BOUND = 10                  # Thickness of the top wall
BOTTOM_BOUND = 10               # Thickness of the bottom wall
SIDE_BOUND = 10                 # Thickness of the side (scoring) walls
HALFWAY = TOP_BOUND + (CANVAS_HEIGHT - BOTTOM_BOUND - TOP_BOUND) / 2

# -------- Paddle Config --------
PADDLE_WIDTH = 20
PADDLE_HEIGHT = 90
PADDLE_INSET = 20               # Gap between a side wall and its paddle
PADDLE_SPEED = 5                # Pixels per tick
CPU_SPEED_BONUS = 2             # The AI paddle's small speed advantage
PLAYER_PADDLE_X = SIDE_BOUND + PADDLE_INSET
AI_PADDLE_X = CANVAS_WIDTH - PADDLE_WIDTH - PADDLE_INSET - SIDE_BOUND

# -------- Ball Config --------
BALL_RADIUS = 10
BALL_BASE_X_SPEED = 5           # Horizontal speed (pixels/tick)
BALL_BASE_Y_SPEED = 8           # Vertical speed scale; actual speed depends on the impact point

# -------- Abilities --------
PADDLE_GROWTH = 30              # Pixels gained by the grow ability
PADDLE_SHRINK = 15              # Pixels the shrink ray takes off the opponent
MIN_PADDLE_HEIGHT = 10

# -------- Key Bindings --------
UP_KEY = pygame.K_w
DOWN_KEY = pygame.K_s
GROW_KEY = pygame.K_e
TELEPORT_KEY = pygame.K_r
SHRINK_KEY = pygame.K_q
START_KEY = pygame.K_SPACE
QUIT_KEY = pygame.K_ESCAPE

# -------- Colours --------
UI_COLOUR = (230, 230, 230)     # Walls, ball, scoreboards and the AI paddle
BACKGROUND_COLOUR = (0, 0, 0)
VICTORY_COLOUR = (100, 255, 100)
DEFEAT_COLOUR = (255, 100, 100)

# Paddle/label colour for rage level 0, 1, 2, ...; levels past the end use the last tier
RAGE_COLOURS = (
    UI_COLOUR, UI_COLOUR, UI_COLOUR,
    (240, 220, 220), (255, 210, 210), (255, 190, 190),
    (255, 150, 150), (255, 120, 120), (255, 100, 100),
    (255, 50, 50), (255, 20, 20), (255, 0, 0),
)

# -------- Text --------
SCORE_FONT_SIZE = 64
ENERGY_FONT_SIZE = 32
PROMPT_FONT_SIZE = 32
BANNER_FONT_SIZE = 84
PROMPT_TEXT = "Press Spacebar to begin..."
VICTORY_TEXT = "You Win :)"
DEFEAT_TEXT = "You Lose :("
ENERGY_PREFIX = "Rage: "

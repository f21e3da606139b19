"""
Game configuration for the shooter
Window, entity and spawn parameters grouped by concern
"""

# Window / loop parameters
WINDOW_CONFIG = {
    "title": "Shooter",
    "width": 800,
    "height": 600,
    "tick_interval": 1 / 60,  # minimum wall-clock seconds between ticks
    "tick_elapsed": 0.01,     # simulated seconds handed to every tick
    "fps_log_interval": 1.0,
}

# ==============================================================================
# ENTITY PARAMETERS
# ==============================================================================

PLAYER_CONFIG = {
    "path": "assets/spaceship.png",
    "speed": 180.0,       # px/s
    "width": 43.0,
    "height": 39.0,
    "start_x": 64.0,
    "max_lives": 3,
}

BULLET_CONFIG = {
    "speed": 240.0,       # px/s
    "width": 8.0,
    "height": 4.0,
    "color": (230, 230, 30),
}

# Cannon offsets relative to the player's rectangle
CANNON_CONFIG = {
    "x_offset": 30.0,
    "top_y_offset": 6.0,
    "bottom_y_offset": 10.0,  # measured up from the ship's bottom edge
    "sine_amplitude": 10.0,
    "sine_angular_vel": 15.0,
    "divergent_a": 100.0,
    "divergent_b": 1.2,
}

ASTEROID_CONFIG = {
    "path": "assets/asteroid.png",
    "frames_wide": 21,
    "frames_high": 7,
    "total_frames": 21 * 7 - 4,
    "side": 96.0,
    "template_fps": 1.0,
    "fps_range": (10.0, 30.0),
    "vel_range": (50.0, 150.0),  # px/s, leftward
}

EXPLOSION_CONFIG = {
    "path": "assets/explosion.png",
    "frames_wide": 5,
    "frames_high": 4,
    "total_frames": 17,
    "side": 96.0,
    "fps": 16.0,
}

# Parallax layers, back to front
BACKGROUND_CONFIG = {
    "back": {"path": "assets/starBG.png", "vel": 20.0},
    "middle": {"path": "assets/starMG.png", "vel": 40.0},
    "front": {"path": "assets/starFG.png", "vel": 80.0},
}

MENU_CONFIG = {
    "font_path": "assets/belligerent.ttf",
    "idle_size": 32,
    "idle_color": (220, 220, 200),
    "hover_size": 38,
    "hover_color": (255, 255, 255),
    "label_h": 50.0,
    "border_width": 3.0,
    "box_w": 360.0,
    "margin_h": 10.0,
    "border_color": (70, 15, 70),
    "box_color": (140, 30, 140),
}

# ==============================================================================
# GAMEPLAY
# ==============================================================================

GAME_CONFIG = {
    "seed": None,
    "asteroid_spawn_chance": 0.1,  # per tick
    "movable_fraction": 0.70,      # share of the screen width the ship may use
    "clear_color": (0, 0, 0),
}

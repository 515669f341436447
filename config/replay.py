"""Configuration for the marker trajectory replay viewer."""

WINDOW = {
    "width": 1280,
    "height": 720,
    "title": "Catheter Trajectory Replay"
}

CAMERA = {
    "fov": 60.0,
    "near_clip": 0.01,
    "far_clip": 100.0,
    "initial_radius": 1.2,
    "initial_theta": 45.0,
    "initial_phi": 25.0,
    "min_radius": 0.05,
    "max_radius": 10.0,
    "min_phi": -89.0,
    "max_phi": 89.0,
    "keyboard_rotate_speed": 60.0,
    "keyboard_zoom_speed": 0.5,
    "mouse_sensitivity": 0.3
}

GRID = {
    "base_size": 0.5,          # Scene units (metres)
    "color": (0.2, 0.2, 0.25)
}

PLAYBACK = {
    "tick_interval": 1.0 / 30.0,  # Seconds between committed ticks at 1x speed
    "initial_speed": 1.0,
    "max_speed": 50.0,
    "resume_speed": 0.5,          # Speed used when unpausing from a full stop
    "restart_delay": 1.0,         # Settle time before the scene restarts
    "warp": True,                 # Resample every recording to the longest one
}

TRACE = {
    "size": 200,                  # Samples in the path trail (half past, half ahead)
    "min_size": 2,
    "max_size": 5000,
    "size_step": 20,
    "channel": "cath_tip",
    "past_color": (0.95, 0.55, 0.15),
    "future_color": (0.35, 0.35, 0.45),
}

RECORDING = {
    "separator": "\t",
    "header_lines": 1,
    "scale": 1.0 / 1000.0,        # Millimetres to scene units
}

# First column of every marker triple in a recording row.
# Column 0 holds the frame number, column 1 the time stamp.
CHANNELS = {
    "head_top_left": 2,
    "head_top_right": 5,
    "head_bottom_left": 8,
    "head_bottom_right": 11,
    "head_brow": 14,
    "cath_tip": 17,
    "cath_top_left": 20,
    "cath_top_right": 23,
    "cath_bottom_left": 26,
    "cath_bottom_right": 29,
}

# Triples are stored X, Z, Y on disk; scene axis k reads column offset AXIS_ORDER[k]
AXIS_ORDER = (0, 2, 1)

MARKER_GROUPS = {
    "catheter": ("cath_tip", "cath_top_left", "cath_top_right",
                 "cath_bottom_left", "cath_bottom_right"),
    "head": ("head_top_left", "head_top_right", "head_bottom_left",
             "head_bottom_right", "head_brow"),
}

# Rectangular marker trees in the order their corners are joined when outlined
OUTLINES = {
    "head": ("head_top_left", "head_top_right", "head_bottom_right", "head_bottom_left"),
}

# Per-recording placement of the skull model relative to the head marker
# barycenter: position in skull model units (scaled to scene units by
# MARKERS["skull_model_scale"]), rotation as Euler angles in degrees.
SKULL_OFFSETS = {
    "catheter001.txt": {"position": (-0.94, -14.11, 5.55), "rotation": (38.116478, 177.862823, 358.404968)},
    "catheter002.txt": {"position": (-1.88, -13.86, 4.67), "rotation": (42.3742065, 181.589996, 3.92515182)},
    "catheter003.txt": {"position": (-1.10, -14.11, 6.32), "rotation": (43.9130974, 177.666306, 358.909271)},
    "catheter004.txt": {"position": (-1.29, -13.48, 6.08), "rotation": (42.3742065, 181.589996, 3.92515182)},
    "catheter005.txt": {"position": (-1.08, -13.62, 6.50), "rotation": (42.3742065, 181.589996, 3.92515182)},
    "catheter006.txt": {"position": (-0.64, -12.69, 5.57), "rotation": (42.3742104, 181.589996, 5.4209547)},
    "catheter007.txt": {"position": (-0.85, -14.11, 5.65), "rotation": (41.510006, 177.755005, 359.040009)},
}

DENSITY = {
    "n_per_dim": 24,
    "length_per_dim": 0.6,        # Scene units
    "origin": (-0.3, -0.3, -0.3),
    "ks": 0.02,                   # Falloff radius
    "threshold": 0.05,
    "point_size": 6.0,
}

MARKERS = {
    "point_size": 8.0,
    "axis_length": 0.05,
    "hull_alpha": 0.25,
    "skull_model_scale": 0.01,   # Skull model units to scene units
}

COLORS = {
    "background": (0.02, 0.02, 0.04, 1.0),
    "text": (0.9, 0.9, 0.9),
    "catheter": (0.3, 0.8, 1.0),
    "head": (1.0, 0.85, 0.6),
    "density": (0.9, 0.2, 0.3),
}

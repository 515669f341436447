"""Replay application: window, game loop and scene drawing."""

import pygame
from pygame.locals import *
from OpenGL.GL import *
from OpenGL.GLU import *

from config import replay as config
from .camera import Camera
from .input_handler import InputHandler
from .session import ReplaySession
from rendering import Grid, MarkerRenderer, TextRenderer
from trajectory import TransportState


STATE_LABELS = {
    TransportState.PLAYING_FORWARD: "> PLAY",
    TransportState.PLAYING_REWIND: "< REWIND",
    TransportState.PAUSED: "|| PAUSED",
    TransportState.ENDED: "[] END",
}


class Application:
    """Main application managing the game loop and rendering."""
    
    def __init__(self, session: ReplaySession, fps: int = 60,
                 camera_radius: float = None, camera_theta: float = None,
                 camera_phi: float = None):
        self.session = session
        self.target_fps = fps
        
        pygame.init()
        pygame.display.set_mode(
            (config.WINDOW["width"], config.WINDOW["height"]),
            DOUBLEBUF | OPENGL
        )
        pygame.display.set_caption(config.WINDOW["title"])
        
        # Core components
        self.camera = Camera(camera_radius, camera_theta, camera_phi)
        
        # Rendering components
        self.grid = Grid()
        self.text_renderer = TextRenderer()
        self.markers = MarkerRenderer()
        self.input_handler = InputHandler(self.camera, self.session, self.markers)
        
        # Density is static for a session, build it once
        print("[Replay] Accumulating path density...")
        self.density = self.session.build_density()
        self.density_points = self.density.occupied(config.DENSITY["threshold"])
        
        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0
        
        self._setup_gl()
    
    def _setup_gl(self):
        """Initialize OpenGL settings."""
        glClearColor(*config.COLORS["background"])
        glEnable(GL_DEPTH_TEST)
        glEnable(GL_POINT_SMOOTH)
        
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluPerspective(
            config.CAMERA["fov"],
            config.WINDOW["width"] / config.WINDOW["height"],
            config.CAMERA["near_clip"],
            config.CAMERA["far_clip"]
        )
        glMatrixMode(GL_MODELVIEW)
    
    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if not self.input_handler.handle_event(event):
                self.running = False
    
    def _update(self, dt: float):
        """Update playback and camera state."""
        self.input_handler.handle_continuous_input(dt)
        self.session.update(dt)
        
        views = self.session.views()
        if views:
            self.camera.follow(views[0].group_center("head"))
        self.camera.update(dt)
        return views
    
    def _render(self, views):
        """Render the scene."""
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        self.camera.apply()
        
        self.grid.draw(self.camera.target[1] - config.GRID["base_size"] / 2)
        
        for view in views:
            self.markers.draw_trace(view.trace, view.trace_points)
            self.markers.draw_markers(view.markers)
            
            self.markers.draw_hull(view.outline("head"), config.COLORS["head"])
            
            self.markers.draw_frame(view.group_center("catheter"), view.catheter_frame())
            origin, axes = view.skull_frame()
            self.markers.draw_frame(origin, axes)
        
        if self.input_handler.show_density:
            self.markers.draw_density(*self.density_points)
        
        self._draw_hud()
        pygame.display.flip()
    
    def _draw_hud(self):
        transport = self.session.transport
        screen_size = (config.WINDOW["width"], config.WINDOW["height"])
        
        lines = [
            f"{STATE_LABELS[transport.state]}  Frame {transport.index + 1}/{self.session.common_length}"
            f"  |  Speed: {transport.speed:.1f}x  |  FPS: {self.fps:.0f}",
            f"Trace: {self.session.trace_size}  |  Recordings: {len(self.session.sync_set)}"
            f"{'  |  warped' if self.session.sync_set.warp else ''}",
        ]
        if self.input_handler.show_help:
            lines.append("<- ->: Direction | Up/Down: Speed | SPACE: Pause | R: Restart | "
                         "[ ]: Trace | T: Transparency | V: Density | H: Help | ESC: Quit")
        self.text_renderer.draw_lines(lines, 10, 10, screen_size)
    
    def run(self):
        """Main application loop."""
        print(f"[Replay] Starting at {self.target_fps} FPS")
        print("[Replay] Controls: <-/->=direction, up/down=speed, SPACE=pause, R=restart, ESC=quit")
        
        while self.running:
            dt = self.clock.tick(self.target_fps) / 1000.0
            self.fps = self.clock.get_fps()
            
            self._handle_events()
            views = self._update(dt)
            self._render(views)
        
        pygame.quit()

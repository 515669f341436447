"""Keyboard and mouse mapping onto camera and transport commands."""

import pygame
from pygame.locals import *
from config import replay as config


class InputHandler:
    """
    Translates pygame events into commands.
    
    One-shot keys (direction, pause, restart, toggles) are handled per event;
    held keys (speed, camera) are polled once per frame.
    """
    
    def __init__(self, camera, session, markers=None):
        self.camera = camera
        self.session = session
        self.markers = markers
        self.mouse_dragging = False
        self.last_mouse_pos = (0, 0)
        self.show_density = False
        self.show_help = True
    
    @property
    def transport(self):
        return self.session.transport
    
    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
            elif event.key == K_RIGHT:
                self.transport.set_direction(forward=True, rewind=False)
            elif event.key == K_LEFT:
                self.transport.set_direction(forward=False, rewind=True)
            elif event.key == K_SPACE:
                self.transport.toggle_pause()
            elif event.key == K_r:
                self.transport.request_restart()
            elif event.key == K_RIGHTBRACKET:
                self.session.resize_trace(config.TRACE["size_step"])
            elif event.key == K_LEFTBRACKET:
                self.session.resize_trace(-config.TRACE["size_step"])
            elif event.key == K_t:
                if self.markers is not None:
                    self.markers.toggle_transparency()
            elif event.key == K_v:
                self.show_density = not self.show_density
            elif event.key == K_h:
                self.show_help = not self.show_help
        elif event.type == MOUSEBUTTONDOWN:
            if event.button == 1:
                self.mouse_dragging = True
                self.last_mouse_pos = event.pos
        elif event.type == MOUSEBUTTONUP:
            if event.button == 1:
                self.mouse_dragging = False
        elif event.type == MOUSEWHEEL:
            self.camera.zoom_smooth(-event.y * config.CAMERA["keyboard_zoom_speed"] * 0.2)
        
        return True
    
    def handle_continuous_input(self, dt: float, keys=None):
        """Handle held keys (called each frame)."""
        if keys is None:
            keys = pygame.key.get_pressed()
        
        # Speed ramps at half the maximum speed per second while held
        ramp = self.transport.max_speed / 2.0 * dt
        if keys[K_DOWN]:
            self.transport.adjust_speed(-ramp)
        elif keys[K_UP]:
            self.transport.adjust_speed(ramp)
        
        rot_speed = config.CAMERA["keyboard_rotate_speed"] * dt
        zoom_speed = config.CAMERA["keyboard_zoom_speed"] * dt
        
        if keys[K_a]:
            self.camera.rotate(-rot_speed, 0)
        if keys[K_d]:
            self.camera.rotate(rot_speed, 0)
        if keys[K_w]:
            self.camera.rotate(0, rot_speed)
        if keys[K_s]:
            self.camera.rotate(0, -rot_speed)
        if keys[K_q]:
            self.camera.zoom(-zoom_speed)
        if keys[K_e]:
            self.camera.zoom(zoom_speed)
        
        if self.mouse_dragging:
            current_pos = pygame.mouse.get_pos()
            dx = current_pos[0] - self.last_mouse_pos[0]
            dy = current_pos[1] - self.last_mouse_pos[1]
            self.camera.rotate(
                dx * config.CAMERA["mouse_sensitivity"],
                -dy * config.CAMERA["mouse_sensitivity"]
            )
            self.last_mouse_pos = current_pos

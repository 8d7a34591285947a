"""Game domain services: board engine, session registry, protocol and lifecycle.

This package contains the authoritative game logic. Socket handlers and HTTP
routes import from here, keeping transport concerns separated from core game
mechanics.
"""

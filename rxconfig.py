"""Reflex configuration for the RWA Finance UI application."""

import os

import reflex as rx

APP_PORT = int(os.getenv("RWA_UI_APP_PORT", "8000"))

config = rx.Config(
    app_name="rwa_ui",
    # Use the src directory structure
    app_module_import="rwa_ui.app",
    frontend_port=APP_PORT,
)

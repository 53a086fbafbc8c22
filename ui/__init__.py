"""Interface de terminal (rich)."""

from ui.app import AdminApp
from ui.shell import AdminShell, confirm_prompt

__all__ = ["AdminApp", "AdminShell", "confirm_prompt"]

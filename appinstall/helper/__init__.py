"""
AUR helper modules package
"""

from .aur_helper import AURHelperManager, default_confirm, terminal_confirm

__all__ = ['AURHelperManager', 'default_confirm', 'terminal_confirm']

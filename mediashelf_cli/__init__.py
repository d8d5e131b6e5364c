"""CLI package for media-shelf"""
from .main import cli

__all__ = ['cli']

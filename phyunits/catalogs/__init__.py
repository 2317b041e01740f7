from . import astro

__all__ = ['astro']

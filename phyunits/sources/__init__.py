from .pint_source import PintUnitSource, default_source

__all__ = ['PintUnitSource', 'default_source']

from .differentiation import default_step, differentiate
from .quadrature import integrate

__all__ = ['differentiate', 'default_step', 'integrate']

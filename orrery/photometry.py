"""
Photometric helpers: size from absolute magnitude and the phase integral.
"""
import jax.numpy as jnp
from jax import jit

from .constants import DEFAULT_ALBEDO


def estimate_radius(H: float, albedo: float = DEFAULT_ALBEDO) -> float:
    """
    Estimate the radius of a body from its absolute magnitude.

    Uses the standard diameter relation for minor bodies:
    D = 1329 km / sqrt(p) * 10^(-H/5)

    Parameters
    ----------
    H : float
        Absolute magnitude
    albedo : float, optional
        Geometric albedo p

    Returns
    -------
    radius : float
        Estimated radius in km. Brighter bodies (smaller H) are larger.
    """
    diameter = 1329.0 / jnp.sqrt(albedo) * 10.0 ** (-H / 5.0)
    return 0.5 * diameter


@jit
def phase_integral(alpha):
    """
    Phase integral of a Lambertian sphere for the Sun-body-observer angle alpha (rad).

    Returns 1 at full illumination (alpha = 0) and 0 at alpha = pi, as a jax.Array
    with the shape of alpha (0-d for a scalar; wrap in float() for a Python float).
    No range checking is performed; callers clamp alpha to [0, pi].
    Works on scalars and arrays, and under jax.vmap.
    """
    return (2.0 / 3.0) * ((1.0 - alpha / jnp.pi) * jnp.cos(alpha) + jnp.sin(alpha) / jnp.pi)

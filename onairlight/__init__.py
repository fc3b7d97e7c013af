"""Components for an on-air indicator light: simulated pins, light effects, a button, sensors and configuration registries."""

__version__ = "0.6.0"
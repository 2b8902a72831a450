"""Exceptions raised by the layout and reveal engine."""


class ModringError(Exception):
    """Base class for every error raised by modring."""


class InvalidConfiguration(ModringError, ValueError):
    """A configuration that can't be laid out (modulus 0, negative natural...)."""


class DegenerateLayout(ModringError):
    """A layout with no capacity per ring; ring opacity can't be computed."""


class EmptyArrowMatch(ModringError):
    """No visible point is congruent to natural mod modulus."""

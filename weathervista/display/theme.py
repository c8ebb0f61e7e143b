"""Weather-driven backdrop theme and its particle layers."""

import logging
import random

from weathervista.display.particles import Particle, ParticleKind, generate_particles
from weathervista.models.weather import CurrentConditions

logger = logging.getLogger(__name__)

NIGHT_THEME = "night"
DEFAULT_THEME = ""

CONDITION_PARTICLES: dict[str, ParticleKind] = {
    "rain": ParticleKind.RAIN,
    "drizzle": ParticleKind.RAIN,
    "snow": ParticleKind.SNOW,
    "thunderstorm": ParticleKind.STORM,
}


def is_daytime(sunrise: int, sunset: int, now: float) -> bool:
    return sunrise < now < sunset


def select_theme(conditions: CurrentConditions | None, now: float) -> str:
    """Theme key: lowercased condition label, or night after dark."""
    if conditions is None:
        return DEFAULT_THEME
    if not is_daytime(conditions.sunrise, conditions.sunset, now):
        return NIGHT_THEME
    return conditions.condition.main.lower()


def particle_kind_for(condition_main: str) -> ParticleKind | None:
    return CONDITION_PARTICLES.get(condition_main.lower())


class Backdrop:
    """Active theme key plus one particle layer per ParticleKind."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self.theme = DEFAULT_THEME
        self.layers: dict[ParticleKind, list[Particle]] = {kind: [] for kind in ParticleKind}

    def populate_all(self) -> None:
        for kind in ParticleKind:
            self.regenerate(kind)

    def regenerate(self, kind: ParticleKind) -> None:
        """Replace a layer's particles with a fresh batch."""
        self.layers[kind] = generate_particles(kind, self.rng)

    def apply(self, conditions: CurrentConditions | None, now: float) -> str:
        """Switch theme for new conditions and refresh the matching layer.

        The refreshed layer follows the condition label, night or day.
        """
        self.theme = select_theme(conditions, now)
        if conditions is not None:
            kind = particle_kind_for(conditions.condition.main)
            if kind is not None:
                self.regenerate(kind)
        logger.debug("Backdrop theme set to %r", self.theme)
        return self.theme

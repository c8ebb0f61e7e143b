"""Ambient particle batches for the animated backdrop.

Pure data generation: every particle gets an independently randomized
horizontal position, start delay and duration. Rendering them is left to
whatever surface consumes the batch.
"""

import random
from dataclasses import dataclass
from enum import StrEnum


class ParticleKind(StrEnum):
    RAIN = "rain-drop"
    SNOW = "snowflake"
    STORM = "heavy-rain-drop"


@dataclass(frozen=True)
class ParticleSpec:
    count: int
    max_delay_s: float
    min_duration_s: float
    duration_span_s: float
    min_size_px: float | None = None
    size_span_px: float = 0.0


@dataclass(frozen=True)
class Particle:
    left_pct: float
    delay_s: float
    duration_s: float
    size_px: float | None = None


PARTICLE_SPECS: dict[ParticleKind, ParticleSpec] = {
    ParticleKind.RAIN: ParticleSpec(
        count=60, max_delay_s=5.0, min_duration_s=0.5, duration_span_s=0.5
    ),
    ParticleKind.SNOW: ParticleSpec(
        count=40, max_delay_s=10.0, min_duration_s=3.0, duration_span_s=7.0,
        min_size_px=3.0, size_span_px=5.0,
    ),
    ParticleKind.STORM: ParticleSpec(
        count=80, max_delay_s=2.0, min_duration_s=0.3, duration_span_s=0.3
    ),
}


def generate_particles(
    kind: ParticleKind, rng: random.Random | None = None
) -> list[Particle]:
    """Create a fresh batch of particles for one backdrop layer."""
    rng = rng or random.Random()
    spec = PARTICLE_SPECS[kind]
    particles = []
    for _ in range(spec.count):
        left = rng.random() * 100
        size = None
        if spec.min_size_px is not None:
            size = spec.min_size_px + rng.random() * spec.size_span_px
        delay = rng.random() * spec.max_delay_s
        duration = spec.min_duration_s + rng.random() * spec.duration_span_s
        particles.append(
            Particle(left_pct=left, delay_s=delay, duration_s=duration, size_px=size)
        )
    return particles

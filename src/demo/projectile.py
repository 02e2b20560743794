"""
Projectile demo — траектория снаряда на Canvas

Каждый тик:
    position = position + velocity
    velocity = velocity + gravity + wind
Симуляция заканчивается, когда position.y <= 0. Каждое положение рисуется
белым пикселем в (round(x), height - round(y)); точки вне холста пропускаются.
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from src.core.math.numerical_safeguards import round_to
from src.core.math.tuples import Tuple, color, point, vector
from src.graphics.canvas import Canvas

logger = logging.getLogger(__name__)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class ProjectileConfig:
    """Параметры демо (значения по умолчанию — исходная сцена 900×550)."""

    canvas_width: int = 900
    canvas_height: int = 550
    start: Tuple = field(default_factory=lambda: point(0.0, 1.0, 0.0))
    launch_direction: Tuple = field(default_factory=lambda: vector(1.0, 1.8, 0.0))
    launch_speed: float = 11.25
    gravity: Tuple = field(default_factory=lambda: vector(0.0, -0.1, 0.0))
    wind: Tuple = field(default_factory=lambda: vector(-0.01, 0.0, 0.0))
    trail_color: Tuple = field(default_factory=lambda: color(1.0, 1.0, 1.0))
    # Защита от бесконечного цикла при нефизичных параметрах
    max_ticks: int = 100_000


@dataclass(frozen=True)
class Environment:
    gravity: Tuple
    wind: Tuple


@dataclass(frozen=True)
class Projectile:
    position: Tuple
    velocity: Tuple

    def __str__(self) -> str:
        p = self.position
        return f"{p.x:.2f} {p.y:.2f} {p.z:.2f}"


# =============================================================================
# СИМУЛЯЦИЯ
# =============================================================================


def tick(env: Environment, proj: Projectile) -> Projectile:
    """Один шаг симуляции."""
    return Projectile(
        position=proj.position + proj.velocity,
        velocity=proj.velocity + env.gravity + env.wind,
    )


def simulate(config: ProjectileConfig) -> List[Tuple]:
    """
    Траектория снаряда: все положения до приземления (без точки с y <= 0).

    Returns:
        Список точек, начиная со стартовой
    """
    env = Environment(gravity=config.gravity, wind=config.wind)
    proj = Projectile(
        position=config.start,
        velocity=config.launch_direction.normalize() * config.launch_speed,
    )

    trajectory = [proj.position]
    for _ in range(config.max_ticks):
        proj = tick(env, proj)
        if proj.position.y <= 0.0:
            break
        logger.debug("Projectile at %s", proj)
        trajectory.append(proj.position)
    else:
        logger.warning("Projectile did not land within %d ticks", config.max_ticks)

    return trajectory


def plot(trajectory: Sequence[Tuple], config: ProjectileConfig) -> Canvas:
    """Рисование траектории на новом Canvas."""
    canvas = Canvas(config.canvas_width, config.canvas_height)
    skipped = 0
    for p in trajectory:
        x = int(round_to(p.x, 0))
        y = canvas.height - int(round_to(p.y, 0))
        if not canvas.contains(x, y):
            skipped += 1
            continue
        canvas.write_pixel(x, y, config.trail_color)

    if skipped:
        logger.info("Skipped %d trajectory points outside the canvas", skipped)
    return canvas


# =============================================================================
# CLI
# =============================================================================


def _configure_logging() -> None:
    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_str, logging.INFO)
    logging.basicConfig(level=log_level)


def build_parser() -> argparse.ArgumentParser:
    defaults = ProjectileConfig()
    parser = argparse.ArgumentParser(description="Render a projectile trajectory to a PPM image")
    parser.add_argument("--width", type=int, default=defaults.canvas_width, help="Canvas width")
    parser.add_argument("--height", type=int, default=defaults.canvas_height, help="Canvas height")
    parser.add_argument(
        "--speed", type=float, default=defaults.launch_speed, help="Launch speed multiplier"
    )
    parser.add_argument(
        "--output", type=Path, default=Path("output.ppm"), help="Output PPM file path"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    _configure_logging()
    args = build_parser().parse_args(argv)

    config = ProjectileConfig(
        canvas_width=args.width,
        canvas_height=args.height,
        launch_speed=args.speed,
    )
    trajectory = simulate(config)
    logger.info("Simulated %d ticks", len(trajectory))
    plot(trajectory, config).write(args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

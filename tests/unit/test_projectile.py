"""
Тесты для projectile demo

Проверяет шаг симуляции, траекторию, отрисовку и CLI.
"""

from src.core.math import color, point, vector
from src.demo.projectile import (
    Environment,
    Projectile,
    ProjectileConfig,
    build_parser,
    main,
    plot,
    simulate,
    tick,
)


class TestTick:
    """Тесты для tick"""

    def test_single_tick(self) -> None:
        env = Environment(gravity=vector(0, -0.5, 0), wind=vector(-0.25, 0, 0))
        proj = Projectile(position=point(0, 1, 0), velocity=vector(1, 1, 0))
        nxt = tick(env, proj)
        assert nxt.position == point(1, 2, 0)
        assert nxt.velocity == vector(0.75, 0.5, 0)
        assert nxt.position.is_point()
        assert nxt.velocity.is_vector()

    def test_str(self) -> None:
        proj = Projectile(position=point(1, 2.5, -0.125), velocity=vector(0, 0, 0))
        assert str(proj) == "1.00 2.50 -0.12"


class TestSimulate:
    """Тесты для simulate"""

    def test_trajectory_starts_at_start(self) -> None:
        config = ProjectileConfig()
        trajectory = simulate(config)
        assert trajectory[0] == config.start
        assert len(trajectory) > 1

    def test_all_points_above_ground(self) -> None:
        trajectory = simulate(ProjectileConfig())
        assert all(p.y > 0 for p in trajectory)
        assert all(p.is_point() for p in trajectory)

    def test_max_ticks_bounds_simulation(self) -> None:
        config = ProjectileConfig(gravity=vector(0, 0, 0), max_ticks=10)
        assert len(simulate(config)) == 11


class TestPlot:
    """Тесты для plot"""

    def test_start_pixel_is_drawn(self) -> None:
        config = ProjectileConfig()
        canvas = plot([config.start], config)
        assert canvas.pixel_at(0, config.canvas_height - 1) == color(1, 1, 1)

    def test_points_outside_are_skipped(self) -> None:
        config = ProjectileConfig(canvas_width=10, canvas_height=10)
        canvas = plot([point(50, 5, 0), point(-3, 5, 0), point(2, 5, 0)], config)
        assert canvas.pixel_at(2, 5) == color(1, 1, 1)


class TestCLI:
    """Тесты для main/build_parser"""

    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.width == 900
        assert args.height == 550
        assert args.speed == 11.25

    def test_main_writes_ppm(self, tmp_path) -> None:
        out = tmp_path / "projectile.ppm"
        assert main(["--width", "120", "--height", "60", "--speed", "3", "--output", str(out)]) == 0
        text = out.read_text(encoding="ascii")
        assert text.startswith("P3\n120 60\n255\n")
        assert "255 255 255" in text

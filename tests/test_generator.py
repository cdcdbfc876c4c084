import pytest

from accrete.accretion.generator import SCHEDULES, Generator
from accrete.util.misc import AccretionWarning

TWO_RINGS = [
    (0.0, 0.95, False, False),
    (0.95, 1.05, True, True),
    (1.05, 4.8, False, False),
    (4.8, 5.2, True, True),
    (5.2, 200.0, False, False),
]
CROWDED = [
    (0.0, 0.9, False, False),
    (0.9, 1.36, True, True),
    (1.36, 200.0, False, False),
]
CLOSE_SEEDS = {
    "seed": 4,
    "protoplanet_seeds": [(1.0, 0.0), (1.05, 0.0)],
    "protoplanet_seed_mass": 1e-5,
    "protoplanet_count": 0,
}


def summary(planets):
    return [(p.a, p.e, p.dust_mass, p.gas_mass, p.inc, p.W) for p in planets]


@pytest.mark.parametrize("schedule", ["sequential", "semi-parallel"])
def test_full_run_terminates(sol, schedule):
    generator = Generator(sol, {"seed": 7, "protoplanet_count": 10})
    planets = generator.generate(schedule)
    assert planets
    assert not generator.dust_field.dust_remains
    smas = [planet.a for planet in planets]
    assert smas == sorted(smas)
    assert len(set(smas)) == len(smas)
    assert generator.protoplanet_count >= len(planets)


@pytest.mark.parametrize("schedule", ["sequential", "semi-parallel"])
def test_same_seed_same_system(sol, schedule):
    config = {"seed": 99, "generate_bode_seeds": True, "protoplanet_count": 5}
    planets1 = Generator(sol, config).generate(schedule)
    planets2 = Generator(sol, config).generate(schedule)
    assert summary(planets1) == summary(planets2)


def test_regenerate_resets_state(sol):
    generator = Generator(sol, {"seed": 13})
    first = summary(generator.generate())
    second = summary(generator.generate())
    assert first == second


def test_schedules_agree_on_separate_seeds(sol):
    config = {
        "seed": 42,
        "protoplanet_seeds": [(1.0, 0.0), (5.0, 0.0)],
        "protoplanet_count": 0,
    }
    sequential = Generator(sol, config, bands=TWO_RINGS)
    semi_parallel = Generator(sol, config, bands=TWO_RINGS)
    planets1 = sequential.generate("sequential")
    planets2 = semi_parallel.generate("semi-parallel")

    assert [p.a for p in planets1] == [1.0, 5.0]
    assert summary(planets1) == summary(planets2)
    assert sequential.fallback_draws == semi_parallel.fallback_draws == 0


def test_unknown_schedule(sol):
    with pytest.raises(ValueError):
        Generator(sol).generate("parallel")


def test_clock_seed_recorded(sol):
    generator = Generator(sol, {"seed": 0})
    generator.generate()
    assert generator.seed != 0


def test_outer_planet_limit_override(sol):
    generator = Generator(sol, {"seed": 5, "override_outer_planet_limit": 10.0})
    assert generator.protoplanet_zone == pytest.approx((0.3, 10.0))
    planets = generator.generate()
    assert all(planet.a < 10.0 * 1.5 for planet in planets)


def test_out_of_zone_seed_warns(sol):
    config = {"seed": 3, "protoplanet_seeds": [(1.0, 0.02), (80.0, 0.02)]}
    with pytest.warns(AccretionWarning):
        planets = Generator(sol, config).generate()
    assert planets


def test_finalized_orientation(sol):
    config = {
        "seed": 17,
        "inclination_mean": 2.0,
        "inclination_std_dev": 1.0,
        "random_axial_tilt": True,
    }
    planets = Generator(sol, config).generate()
    for planet in planets:
        assert 0.0 <= planet.inc < 180.0
        assert 0.0 <= planet.W < 6.3
        assert 0.0 <= planet.axial_tilt <= 180.0
        assert planet.star is sol


def test_verbose_output(sol, capsys):
    Generator(sol, {"seed": 21, "verbose": True}).generate()
    out = capsys.readouterr().out
    assert "planets from" in out


def test_close_seeds_merge(sol):
    generator = Generator(sol, CLOSE_SEEDS, bands=CROWDED)
    planets = generator.generate("sequential")

    assert len(planets) == 1
    assert 1.0 < planets[0].a < 1.05
    assert planets[0].mass > 2e-5
    # Two seeds grown, then the merged body
    assert generator.protoplanet_count == 3
    assert generator.fallback_draws == 0
    assert not generator.dust_field.dust_remains


def test_close_seeds_leave_one_planet_semi_parallel(sol):
    generator = Generator(sol, CLOSE_SEEDS, bands=CROWDED)
    planets = generator.generate("semi-parallel")

    assert len(planets) == 1
    assert 1.0 <= planets[0].a <= 1.05
    assert not generator.dust_field.dust_remains


@pytest.mark.parametrize("schedule", SCHEDULES)
def test_no_dust_hits_draw_cap(sol, schedule, monkeypatch):
    monkeypatch.setattr("accrete.accretion.generator.MAX_FALLBACK_DRAWS", 50)
    generator = Generator(sol, {"seed": 8, "dust_density": 0.0})
    with pytest.warns(AccretionWarning, match="Dust still remains"):
        planets = generator.generate(schedule)
    assert planets == []
    assert generator.fallback_draws == 50
    assert generator.dust_field.dust_remains


@pytest.mark.parametrize("schedule", SCHEDULES)
def test_circular_cloud_terminates(sol, schedule):
    config = {"seed": 11, "cloud_eccentricity": 0.0, "protoplanet_count": 10}
    generator = Generator(sol, config)
    planets = generator.generate(schedule)
    assert planets
    assert not generator.dust_field.dust_remains


def test_pass_cap_settles_pending_growth(sol, monkeypatch):
    monkeypatch.setattr("accrete.accretion.generator.MAX_PASSES", 1)
    config = {
        "seed": 42,
        "protoplanet_seeds": [(1.0, 0.0), (5.0, 0.0)],
        "protoplanet_count": 0,
    }
    generator = Generator(sol, config, bands=TWO_RINGS)
    with pytest.warns(AccretionWarning, match="passes"):
        planets = generator.generate("semi-parallel")
    assert generator.passes == 1
    assert [p.a for p in planets] == [1.0, 5.0]
    assert all(p.mass > 1e-15 for p in planets)
    assert not generator.dust_field.dust_remains

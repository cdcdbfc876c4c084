import astropy.units as u
import pytest

from accrete.accretion.config import Config
from accrete.accretion.star import AccretionStar
from accrete.accretion.system import AccretionSystem
from accrete.accretion.universe import create_universe
from accrete.base.star import Star


def test_star_defaults_from_luminosity():
    star = Star({"mass": 1.0, "luminosity": 4.0})
    assert star.ecosphere == 2.0 * u.AU
    assert star.protoplanet_zone.to_value(u.AU) == pytest.approx([0.3, 50.0])
    assert star.dust_zone.to_value(u.AU) == pytest.approx([0.0, 200.0])


def test_main_sequence_star():
    star = AccretionStar(1.0, name="Sol")
    assert star.luminosity.to_value(u.L_sun) == pytest.approx(1.0)
    assert star.ecosphere.to_value(u.AU) == pytest.approx(1.0)
    small = AccretionStar(0.5 * u.M_sun)
    assert small.luminosity.to_value(u.L_sun) == pytest.approx(0.5**4.025)
    outer = small.protoplanet_zone[1].to_value(u.AU)
    assert outer == pytest.approx(50 * 0.5 ** (1 / 3))


def test_star_needs_positive_mass():
    with pytest.raises(ValueError):
        AccretionStar(-1.0)


def test_config_validation():
    with pytest.raises(ValueError):
        Config({"cloud_eccentricty": 0.2})
    assert Config({"cloud_eccentricity": 1.5}).cloud_eccentricity == 0.9
    assert Config({"cloud_eccentricity": -0.5}).cloud_eccentricity == 0.0
    config = Config({"seed": 3})
    changed = config.replace(seed=4)
    assert config.seed == 3
    assert changed.seed == 4
    assert changed.replace(seed=3) == config


def test_system_table(sol):
    system = AccretionSystem(sol, {"seed": 31})
    p_df = system.get_p_df()
    assert len(p_df) == len(system.planets)
    assert list(p_df["a"]) == sorted(p_df["a"])
    assert (p_df["mass"] > 0).all()
    assert "Planets" in repr(system)
    assert "Planet" in repr(system.planets[0])
    assert system.planets[0].dump_params()["T"].unit == u.d


def test_earth_orbit_period(sol):
    system = AccretionSystem(
        sol, {"seed": 2, "protoplanet_seeds": [(1.0, 0.0)]}, bands=[
            (0.0, 0.99, False, False),
            (0.99, 1.01, True, True),
            (1.01, 200.0, False, False),
        ]
    )
    assert len(system.planets) == 1
    assert system.planets[0].period().to_value(u.yr) == pytest.approx(1.0, rel=1e-3)


def test_universe_cache(tmp_path):
    params = {
        "stellar_masses": [1.0, 0.8],
        "config": {"protoplanet_count": 5},
        "schedule": "semi-parallel",
        "cache_dir": tmp_path,
    }
    universe = create_universe(params)
    assert len(universe) == 2
    assert universe.seeds == [1, 2]
    assert len(list(tmp_path.glob("*.p"))) == 2

    reloaded = create_universe(params)
    for system, cached in zip(universe.systems, reloaded.systems):
        assert [p.a for p in system.planets] == [p.a for p in cached.planets]
    assert "2 systems generated" in repr(reloaded)

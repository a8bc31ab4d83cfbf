import warnings

import numpy as np
import pytest
from astropy import units as u
from astropy.utils.exceptions import AstropyUserWarning

from orrerypy.simulate import BodyRegistry, OrbitalBody, new_star, new_planet
from orrerypy.utils import InvalidArgument


class CountingBody(OrbitalBody):
    """Records every step it is advanced by"""
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.advance_calls = []

    def advance_lw(self, delta_time):
        self.advance_calls.append(delta_time)
        super().advance_lw(delta_time)


def make_sun():
    return new_star("Sun", 1.989e30 * u.kg, 6.96340e8 * u.m, 5778 * u.K, "G2V")


def make_counting_body(name, orbital_period=10 * u.d):
    return CountingBody(name=name, mass=1e20 * u.kg, radius=1e6 * u.m,
                        orbital_radius=1e9 * u.m, orbital_period=orbital_period)


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
def test_central_body_is_first():
    sun = make_sun()
    registry = BodyRegistry(sun)
    assert registry.central_body is sun
    assert registry.get_all_bodies() == [sun]
    assert len(registry) == 1


def test_insertion_order_is_kept():
    sun = make_sun()
    bodies = [make_counting_body(name) for name in ("A", "B", "C")]
    registry = BodyRegistry(sun)
    for body in bodies:
        registry.add(body)
    assert [b.name for b in registry] == ["Sun", "A", "B", "C"]
    assert registry.orbiting_bodies() == bodies


def test_adding_the_same_body_twice_is_a_no_op():
    sun = make_sun()
    body = make_counting_body("A")
    registry = BodyRegistry(sun)
    registry.add(body)
    registry.add(body)
    registry.add(sun)
    assert len(registry) == 2


def test_equal_but_distinct_bodies_are_both_added():
    registry = BodyRegistry()
    registry.add(make_counting_body("Twin"))
    registry.add(make_counting_body("Twin"))
    assert len(registry) == 2


def test_add_ignores_none_and_rejects_other_types():
    registry = BodyRegistry()
    registry.add(None)
    assert len(registry) == 0
    with pytest.raises(TypeError):
        registry.add("Earth")


def test_get_all_bodies_returns_a_copy():
    registry = BodyRegistry(make_sun())
    registry.get_all_bodies().append(make_counting_body("A"))
    assert len(registry) == 1


def test_find_body():
    sun = make_sun()
    registry = BodyRegistry(sun)
    assert registry.find_body("Sun") is sun
    assert registry.find_body("Vulcan") is None


# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #
def test_two_days_in_hour_steps_is_48_advances_per_body():
    sun = make_sun()
    bodies = [make_counting_body("A"), make_counting_body("B", orbital_period=0 * u.s)]
    registry = BodyRegistry(sun)
    for body in bodies:
        registry.add(body)

    num_steps = registry.run_simulation(172800 * u.s, 3600 * u.s)

    assert num_steps == 48
    for body in bodies:
        assert body.advance_calls == [3600.] * 48
    assert registry.elapsed_time == 172800 * u.s


def test_central_body_is_never_advanced():
    sun = CountingBody(name="Sun", mass=1.989e30 * u.kg, radius=6.96340e8 * u.m,
                       orbital_period=1 * u.d, initial_theta=0.25 * u.rad)
    registry = BodyRegistry(sun)
    registry.add(make_counting_body("A"))
    registry.run_simulation(1 * u.d, 1 * u.h)
    assert sun.advance_calls == []
    assert sun.current_theta_lw == pytest.approx(0.25)


def test_bodies_are_advanced_in_insertion_order():
    order = []

    class OrderedBody(OrbitalBody):
        def advance_lw(self, delta_time):
            order.append(self.name)
            super().advance_lw(delta_time)

    registry = BodyRegistry()
    for name in ("first", "second", "third"):
        registry.add(OrderedBody(name=name, mass=1 * u.kg, radius=1 * u.m, orbital_period=1 * u.d))
    registry.run_simulation(2 * u.h, 1 * u.h)
    assert order == ["first", "second", "third"] * 2


def test_half_day_single_step_reaches_pi():
    body = OrbitalBody(name="Day", mass=1 * u.kg, radius=1 * u.m, orbital_radius=1 * u.au,
                       orbital_period=86400 * u.s)
    registry = BodyRegistry(make_sun())
    registry.add(body)
    registry.run_simulation(43200 * u.s, 43200 * u.s)
    assert body.current_theta.to(u.rad).value == pytest.approx(np.pi, abs=1e-9)


def test_final_theta_matches_step_count():
    body = make_counting_body("A", orbital_period=10 * u.d)
    registry = BodyRegistry()
    registry.add(body)
    registry.run_simulation(2 * u.d, 1 * u.h)
    expected = 2 * np.pi * 48 * 3600. / (10 * 86400.)
    assert body.current_theta_lw == pytest.approx(expected, abs=1e-9)


def test_partial_final_step_is_not_taken():
    body = make_counting_body("A")
    registry = BodyRegistry()
    registry.add(body)
    assert registry.run_simulation(10 * u.s, 3 * u.s) == 3
    assert len(body.advance_calls) == 3
    assert registry.elapsed_time == 9 * u.s


def test_step_count_tolerates_round_off():
    registry = BodyRegistry()
    registry.add(make_counting_body("A"))
    assert registry.run_simulation(0.3 * u.s, 0.1 * u.s) == 3
    assert registry.run_simulation(1.0 * u.s, 0.1 * u.s) == 10


@pytest.mark.parametrize("total_time, time_step, expected_steps", [(999.9999999 * u.s, 1 * u.s, 999),
                                                                   (1e4 - 1e-6, 1., 9999),
                                                                   (2 * u.d - 1 * u.ms, 1 * u.h, 47)])
def test_step_just_short_of_total_time_is_not_taken(total_time, time_step, expected_steps):
    body = make_counting_body("A")
    registry = BodyRegistry()
    registry.add(body)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", AstropyUserWarning)
        num_steps = registry.run_simulation(total_time, time_step)
    assert num_steps == expected_steps
    assert len(body.advance_calls) == expected_steps
    assert registry.elapsed_time <= u.Quantity(total_time, u.s)


def test_zero_total_time_takes_no_steps():
    body = make_counting_body("A")
    registry = BodyRegistry()
    registry.add(body)
    assert registry.run_simulation(0 * u.s, 1 * u.s) == 0
    assert body.advance_calls == []


def test_repeated_runs_accumulate():
    body = make_counting_body("A", orbital_period=4 * u.h)
    registry = BodyRegistry()
    registry.add(body)
    registry.run_simulation(1 * u.h, 1 * u.h)
    registry.run_simulation(1 * u.h, 1 * u.h)
    assert body.current_theta_lw == pytest.approx(np.pi)
    assert registry.elapsed_time.to(u.h).value == pytest.approx(2.)


@pytest.mark.parametrize("total_time, time_step", [(1 * u.d, 0 * u.s),
                                                   (1 * u.d, -1 * u.h),
                                                   (-1 * u.d, 1 * u.h),
                                                   (np.nan * u.s, 1 * u.h),
                                                   (np.inf * u.s, 1 * u.h),
                                                   (1 * u.d, np.nan * u.s)])
def test_invalid_simulation_times_are_rejected(total_time, time_step):
    body = make_counting_body("A")
    registry = BodyRegistry()
    registry.add(body)
    with pytest.raises(InvalidArgument):
        registry.run_simulation(total_time, time_step)
    assert body.advance_calls == []
    assert registry.elapsed_time == 0 * u.s


def test_planets_from_constructors_run_together():
    sun = make_sun()
    earth = new_planet("Earth", 5.972e24 * u.kg, 6.371e6 * u.m, 1 * u.au, 365.25 * u.d, number_of_moons=1)
    registry = BodyRegistry(sun)
    registry.add(earth)
    registry.run_simulation(365.25 / 4 * u.d, 365.25 / 4 * u.d)
    assert earth.current_theta_lw == pytest.approx(np.pi / 2)

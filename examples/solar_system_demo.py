"""Build the default solar system, run it for two days in one-hour steps, and report the results."""

import sys

import orrerypy as orr
from astropy import units as u

# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #

system_generator = orr.io.SystemGenerator(orr.io.all_parameters)
our_system = system_generator.gen_registry()

print("\n--- Initial System Configuration ---")
print(orr.visualize.system_state_report(our_system))

# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #

simulation_duration, simulation_time_step = system_generator.simulation_times()

print("\n--- Starting Simulation for", simulation_duration.to(u.d), "---")
num_steps = our_system.run_simulation(simulation_duration, simulation_time_step)
print("--- Simulation Ended after", num_steps, "steps ---")

print("\n--- System Configuration After Simulation ---")
print(orr.visualize.system_state_report(our_system))

# ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++ #

sun = our_system.find_body("Sun")
earth = our_system.find_body("Earth")
mars = our_system.find_body("Mars")
earths_moon = our_system.find_body("Moon")
halleys_comet = our_system.find_body("Halley's Comet")

print("\n--- Key Demonstrations ---")
print(orr.visualize.emit_light_and_heat(sun))
print(orr.visualize.describe_moons(earth))
print(orr.visualize.exert_tidal_influence(earths_moon))
print(orr.visualize.describe_orbit_shape(halleys_comet))

print("\n--- Additional Calculations ---")
print(earth.name, "Density: {:.2f}".format(earth.density()))
print(mars.name, "Surface Gravity: {:.2f}".format(mars.surface_gravity()))

# Same orbit, with the period derived from the Sun's mass instead:
earth_from_gravity = orr.simulate.OrbitalBody.from_gravitational_parameter(name="Earth (from G M)",
                                                                           mass=earth.mass,
                                                                           radius=earth.radius,
                                                                           orbital_radius=earth.orbital_radius,
                                                                           central_mass=sun.mass)
print(earth_from_gravity.name, "orbital period:", earth_from_gravity.orbital_period.to(u.d))

if "--plot" in sys.argv:
    orr.visualize.plot_system_state(our_system)

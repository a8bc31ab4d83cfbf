import matplotlib.pyplot as plt
import pytest
from astropy import units as u

from orrerypy.io import SystemGenerator, all_parameters
from orrerypy.visualize import plot_system_state


def test_plot_system_state_saves_file(tmp_path):
    registry = SystemGenerator(all_parameters).run()
    savefile = tmp_path / "system.png"
    plots = plot_system_state(registry, savefile=str(savefile))
    assert savefile.exists()
    assert set(plots.keys()) == set(body.name for body in registry)


def test_plot_system_state_onto_existing_axes():
    registry = SystemGenerator(all_parameters).gen_registry()
    fig = plt.figure()
    ax = fig.add_subplot(111, projection='polar')
    plots = plot_system_state(registry, axes_object=ax, log_radius=False)
    assert "Earth" in plots
    plt.close(fig)


def test_plot_requires_a_registry():
    with pytest.raises(TypeError):
        plot_system_state([1 * u.au])

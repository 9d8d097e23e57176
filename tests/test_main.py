"""Test FRACPERM simulation."""
#
#                                                                       Modules
# =============================================================================
# Third-party
import numpy as np
import numpy.testing as npt
import pytest
# Local
import fracperm.ioput.ioutilities as ioutil
from fracperm import fracperm_simulation
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'FRACPERM developers'
__credits__ = ['FRACPERM developers', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
INPUT_DATA = """\
# Single fractured material phase
Material_Phases 1
1 orthotropic_embedded_fracture 6
a 1.0 1.0 1.0
e0 0.0 0.0 0.0
km 1.0e-15
b0 1.0e-6
rad_xy 0.0
rad_yz 0.0

Strain_Measure creep_strain

Material_Points 3
1 1
stress 1.0 0.0 0.0 0.0 2.0 0.0 0.0 0.0 3.0
creep_strain 0.0 0.0 0.0 0.0 0.0 0.0 0.0 0.0 0.0
2 1
stress 1.0 0.0 0.0 0.0 2.0 0.0 0.0 0.0 3.0
creep_strain 0.002 0.0 0.0 0.0 0.0 0.0 0.0 0.0 0.0
3 1
stress 1.0 0.0 0.0 0.0 2.0 0.0 0.0 0.0 3.0
creep_strain 0.002 0.0 0.0 0.0 0.002 0.0 0.0 0.0 0.002
"""
# =============================================================================
@pytest.fixture
def input_file_path(tmp_path):
    file_path = tmp_path / 'fractured_rock.dat'
    file_path.write_text(INPUT_DATA)
    return file_path
# =============================================================================
def test_fracperm_simulation(input_file_path):
    points_permeability = fracperm_simulation(str(input_file_path),
                                              is_null_stdout=True)
    assert set(points_permeability.keys()) == {'1', '2', '3'}
    km = 1.0e-15
    # Closed fractures
    npt.assert_array_equal(points_permeability['1'], km*np.eye(3))
    # Single open fracture
    assert points_permeability['2'][1, 1] > km
    # Three open fractures with the same opening
    npt.assert_allclose(np.diag(points_permeability['3']),
                        km + 2.0*(points_permeability['2'][1, 1] - km),
                        rtol=1e-10)
    for point in ('1', '2', '3'):
        npt.assert_allclose(points_permeability[point],
                            np.transpose(points_permeability[point]))
# =============================================================================
def test_fracperm_simulation_output_files(input_file_path):
    points_permeability = fracperm_simulation(str(input_file_path),
                                              is_null_stdout=True)
    problem_dir = input_file_path.parent / 'fractured_rock'
    perm_file_path = problem_dir / 'fractured_rock.perm'
    screen_file_path = problem_dir / 'fractured_rock.screen'
    assert perm_file_path.is_file()
    assert screen_file_path.is_file()
    assert ioutil.screen_file_path == str(screen_file_path)
    # Permeability output file
    lines = perm_file_path.read_text().splitlines()
    assert lines[0].split()[:3] == ['Point', 'Phase', 'perm_11']
    assert len(lines) == 4
    for line in lines[1:]:
        values = line.split()
        assert len(values) == 14
        point = values[0]
        npt.assert_allclose(
            [float(x) for x in values[2:11]],
            points_permeability[point].flatten(order='F'), rtol=1e-8)
    # Screen output file without ANSI escape sequences
    screen_output = screen_file_path.read_text()
    assert 'Program Completed' in screen_output
    assert '\x1b[' not in screen_output
# =============================================================================
def test_fracperm_simulation_overwrite(input_file_path):
    fracperm_simulation(str(input_file_path), is_null_stdout=True)
    fracperm_simulation(str(input_file_path), is_null_stdout=True)
    perm_file_path = input_file_path.parent / 'fractured_rock' \
        / 'fractured_rock.perm'
    assert len(perm_file_path.read_text().splitlines()) == 4
# =============================================================================
def test_invalid_input_data_file(tmp_path):
    file_path = tmp_path / 'fractured_rock.txt'
    file_path.write_text(INPUT_DATA)
    with pytest.raises(SystemExit):
        fracperm_simulation(str(file_path), is_null_stdout=True)
    with pytest.raises(SystemExit):
        fracperm_simulation(str(tmp_path / 'missing.dat'),
                            is_null_stdout=True)

"""Test material points permeability state."""
#
#                                                                       Modules
# =============================================================================
# Third-party
import numpy as np
import numpy.testing as npt
import pytest
# Local
from fracperm.material.permeabilitymodeling import PermeabilityState, \
    get_available_permeability_models
from fracperm.material.models.orthotropic_fracture import \
    OrthotropicEmbeddedFracture
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'FRACPERM developers'
__credits__ = ['FRACPERM developers', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
@pytest.fixture
def permeability_state(fracture_properties):
    rock_properties = dict(fracture_properties)
    rock_properties['base_name'] = 'rock'
    state = PermeabilityState(['1', '2'], {'1': fracture_properties,
                                           '2': rock_properties})
    for mat_phase in ('1', '2'):
        state.init_permeability_model(mat_phase,
                                      'orthotropic_embedded_fracture')
    return state
# =============================================================================
def test_available_models():
    assert get_available_permeability_models() == \
        ['orthotropic_embedded_fracture', ]
    with pytest.raises(RuntimeError):
        get_available_permeability_models('unknown')
# =============================================================================
def test_init_permeability_model(permeability_state):
    models = permeability_state.get_material_phases_models()
    assert isinstance(models['1'], OrthotropicEmbeddedFracture)
    assert models['2'].get_required_state_properties() == \
        ('rock_stress', 'rock_creep_strain')
    with pytest.raises(RuntimeError):
        permeability_state.init_permeability_model('1', 'unknown')
    with pytest.raises(RuntimeError):
        permeability_state.init_permeability_model('3', 'unknown')
    with pytest.raises(RuntimeError):
        permeability_state.init_permeability_model(
            '1', 'orthotropic_embedded_fracture', model_source='other')
# =============================================================================
def test_compute_points_permeability(permeability_state, fracture_properties):
    strain = np.diag([0.002, 0.0, 0.0])
    stress = np.diag([1.0, 2.0, 3.0])
    points_phase = {'1': '1', '2': '2', '3': '1'}
    points_state = {'1': {'stress': stress, 'creep_strain': strain},
                    '2': {'rock_stress': stress, 'rock_creep_strain': strain},
                    '3': {'stress': stress,
                          'creep_strain': np.zeros((3, 3))}}
    permeability_state.set_points_state(points_phase, points_state)
    points_permeability = permeability_state.compute_points_permeability()
    assert set(points_permeability.keys()) == {'1', '2', '3'}
    # Same material point state regardless of the properties prefix
    npt.assert_array_equal(points_permeability['1'],
                           points_permeability['2'])
    npt.assert_array_equal(points_permeability['3'],
                           fracture_properties['km']*np.eye(3))
    # Permeability matricial form (columnwise)
    npt.assert_array_equal(
        permeability_state.get_point_permeability_mf('1'),
        points_permeability['1'].flatten(order='F'))
# =============================================================================
def test_compute_point_permeability(permeability_state, fracture_properties):
    points_state = {'1': {'stress': np.eye(3),
                          'creep_strain': np.zeros((3, 3))},
                    '2': {'stress': np.eye(3),
                          'creep_strain': np.zeros((3, 3))}}
    permeability_state.set_points_state({'1': '1', '2': '1'}, points_state)
    permeability = permeability_state.compute_point_permeability('2')
    npt.assert_array_equal(permeability, fracture_properties['km']*np.eye(3))
    assert list(permeability_state.get_points_permeability().keys()) == \
        ['2', ]
    with pytest.raises(RuntimeError):
        permeability_state.get_point_permeability_mf('1')
    with pytest.raises(RuntimeError):
        permeability_state.compute_point_permeability('3')
# =============================================================================
def test_invalid_points_state(permeability_state):
    with pytest.raises(RuntimeError):
        permeability_state.compute_points_permeability()
    with pytest.raises(RuntimeError):
        permeability_state.set_points_state({'1': '4'}, {'1': {}})
    with pytest.raises(RuntimeError):
        permeability_state.set_points_state({'1': '1'}, {})
    with pytest.raises(RuntimeError):
        permeability_state.get_point_permeability_mf('1')
# =============================================================================
def test_uninitialized_model(fracture_properties):
    state = PermeabilityState(['1', ], {'1': fracture_properties})
    state.set_points_state({'1': '1'},
                           {'1': {'stress': np.eye(3),
                                  'creep_strain': np.zeros((3, 3))}})
    with pytest.raises(RuntimeError):
        state.compute_points_permeability()

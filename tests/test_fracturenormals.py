"""Test fracture normals sources."""
#
#                                                                       Modules
# =============================================================================
# Third-party
import numpy as np
import numpy.testing as npt
import pytest
# Local
from fracperm.material.fracturenormals import ConstantFractureNormals, \
                                              PrincipalStressFractureNormals, \
                                              get_available_normals_sources
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'FRACPERM developers'
__credits__ = ['FRACPERM developers', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
def test_available_sources():
    sources = get_available_normals_sources()
    assert sources['constant'] is ConstantFractureNormals
    assert sources['principal_stress'] is PrincipalStressFractureNormals
# =============================================================================
def test_constant_normals_ignore_stress():
    c, s = np.cos(0.3), np.sin(0.3)
    normals = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
    source = ConstantFractureNormals(normals)
    assert source.get_name() == 'constant'
    stress = np.diag([3.0, 2.0, 1.0])
    npt.assert_array_equal(source.get_normals(stress), normals)
    npt.assert_array_equal(source.get_normals(), normals)
# =============================================================================
def test_constant_normals_not_modified():
    normals = np.eye(3)
    source = ConstantFractureNormals(normals)
    output = source.get_normals()
    output[0, 0] = 10.0
    npt.assert_array_equal(source.get_normals(), np.eye(3))
    # Input array is copied
    normals[1, 1] = 5.0
    npt.assert_array_equal(source.get_normals(), np.eye(3))
# =============================================================================
def test_constant_normals_invalid():
    with pytest.raises(RuntimeError):
        ConstantFractureNormals(np.eye(2))
# =============================================================================
def test_principal_stress_normals():
    stress = np.array([[2.0, 1.0, 0.0],
                       [1.0, 2.0, 0.0],
                       [0.0, 0.0, 5.0]])
    source = PrincipalStressFractureNormals()
    assert source.get_name() == 'principal_stress'
    normals = source.get_normals(stress)
    # Ascending principal stresses: 1, 3, 5
    expected = [np.array([1.0, -1.0, 0.0])/np.sqrt(2),
                np.array([1.0, 1.0, 0.0])/np.sqrt(2),
                np.array([0.0, 0.0, 1.0])]
    for i in range(3):
        npt.assert_allclose(abs(normals[:, i] @ expected[i]), 1.0,
                            atol=1e-12)
# =============================================================================
def test_principal_stress_injected_decomposition():
    calls = []

    def decomposition(x):
        calls.append(x)
        return np.zeros(3), np.eye(3)[:, ::-1]

    source = PrincipalStressFractureNormals(
        spectral_decomposition=decomposition)
    normals = source.get_normals(np.eye(3))
    npt.assert_array_equal(normals, np.eye(3)[:, ::-1])
    assert len(calls) == 1
# =============================================================================
def test_principal_stress_invalid():
    source = PrincipalStressFractureNormals()
    with pytest.raises(RuntimeError):
        source.get_normals(np.zeros(3))
    with pytest.raises(RuntimeError):
        source.get_normals(np.array([[1.0, 2.0, 0.0],
                                     [0.0, 1.0, 0.0],
                                     [0.0, 0.0, 1.0]]))

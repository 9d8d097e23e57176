"""Test tensorial operations toolkit."""
#
#                                                                       Modules
# =============================================================================
# Third-party
import numpy as np
import numpy.testing as npt
import pytest
# Local
import fracperm.tensor.tensoroperations as top
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'FRACPERM developers'
__credits__ = ['FRACPERM developers', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
def test_self_dyad():
    n = np.array([1.0, 2.0, 3.0])
    npt.assert_array_equal(top.self_dyad(n), np.outer(n, n))
    with pytest.raises(RuntimeError):
        top.self_dyad(np.eye(3))
# =============================================================================
def test_contractions():
    a = np.arange(9.0).reshape(3, 3)
    v = np.array([1.0, -1.0, 2.0])
    npt.assert_allclose(top.dot22_1(a, a), a @ a)
    npt.assert_allclose(top.quad121(v, a), v @ a @ v)
# =============================================================================
def test_check_second_order():
    assert top.check_second_order(np.zeros((3, 3)))
    assert not top.check_second_order(np.zeros((2, 2)))
    assert not top.check_second_order(np.zeros(9))
    assert not top.check_second_order([[0.0]*3]*3)
# =============================================================================
def test_is_symmetric_scaled_tolerance():
    x = np.diag([1.0e6, 2.0e6, 3.0e6])
    assert top.is_symmetric(x)
    # Round-off asymmetry of large-magnitude tensor
    x[1, 0] = 1.0e-8
    assert top.is_symmetric(x)
    x[1, 0] = 1.0e2
    assert not top.is_symmetric(x)
    # Unit-magnitude tensor
    y = np.eye(3)
    y[0, 1] = 1.0e-8
    assert not top.is_symmetric(y)
# =============================================================================
def test_spectral_decomposition_ascending():
    x = np.array([[3.0, 1.0, 0.0],
                  [1.0, 2.0, 0.0],
                  [0.0, 0.0, -1.0]])
    eigenvalues, eigenvectors = top.spectral_decomposition(x)
    assert np.all(np.diff(eigenvalues) >= 0.0)
    # Eigenvectors stored columnwise
    for i in range(3):
        npt.assert_allclose(x @ eigenvectors[:, i],
                            eigenvalues[i]*eigenvectors[:, i], atol=1e-12)
    npt.assert_allclose(eigenvectors.T @ eigenvectors, np.eye(3),
                        atol=1e-12)
# =============================================================================
def test_spectral_decomposition_invalid():
    with pytest.raises(RuntimeError):
        top.spectral_decomposition(np.zeros((3, 2)))
    with pytest.raises(RuntimeError):
        top.spectral_decomposition(np.array([[1.0, 2.0, 0.0],
                                             [0.0, 1.0, 0.0],
                                             [0.0, 0.0, 1.0]]))
# =============================================================================
@pytest.mark.parametrize('theta', [0.0, 0.3, np.pi/2, -1.2])
def test_rotation_tensors_orthonormal(theta):
    for rotation in (top.rotation_tensor_xy_plane(theta),
                     top.rotation_tensor_yz_plane(theta)):
        npt.assert_allclose(rotation @ rotation.T, np.eye(3), atol=1e-14)
        npt.assert_allclose(np.linalg.det(rotation), 1.0)
# =============================================================================
def test_rotation_tensors_layout():
    theta = 0.4
    c, s = np.cos(theta), np.sin(theta)
    npt.assert_array_equal(top.rotation_tensor_xy_plane(theta),
                           np.array([[c, s, 0.0], [-s, c, 0.0],
                                     [0.0, 0.0, 1.0]]))
    npt.assert_array_equal(top.rotation_tensor_yz_plane(theta),
                           np.array([[1.0, 0.0, 0.0], [0.0, c, s],
                                     [0.0, -s, c]]))
    npt.assert_array_equal(top.rotation_tensor_xy_plane(0.0), np.eye(3))
    npt.assert_array_equal(top.rotation_tensor_yz_plane(0.0), np.eye(3))
# =============================================================================
def test_spectral_decomposition_roundoff_asymmetry():
    x = np.diag([3.0e6, 1.0e6, 2.0e6])
    x[1, 0] = 1.0e-8
    eigenvalues, eigenvectors = top.spectral_decomposition(x)
    npt.assert_allclose(eigenvalues, [1.0e6, 2.0e6, 3.0e6])
    npt.assert_allclose(np.abs(eigenvectors), np.array([[0.0, 0.0, 1.0],
                                                        [1.0, 0.0, 0.0],
                                                        [0.0, 1.0, 0.0]]),
                        atol=1e-12)

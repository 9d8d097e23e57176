"""Algebraic tensorial operations and standard tensorial operators.

This module is essentially a toolkit containing the definition of the
second-order tensorial operators (e.g., dyadic product, single contraction,
quadratic form, planar rotation tensors) and the spectral
decomposition of symmetric second-order tensors required to compute the
permeability of fractured rock at a material point.

Functions
---------
dyad11
    Dyadic product: :math:`i \\otimes j \\rightarrow ij`.
dot22_1
    Single contraction: :math:`ik \\cdot kj \\rightarrow ij`.
quad121
    Quadratic form: :math:`i \\cdot ij \\cdot j \\rightarrow \\text{scalar}`.
self_dyad
    Self dyadic product of first-order tensor (structural tensor).
check_second_order
    Check if array is a square second-order tensor.
is_symmetric
    Check if square second-order tensor is symmetric.
spectral_decomposition
    Perform spectral decomposition of symmetric second-order tensor.
rotation_tensor_xy_plane
    Set rotation tensor about the third axis (rotation in 1-2 plane).
rotation_tensor_yz_plane
    Set rotation tensor about the first axis (rotation in 2-3 plane).
"""
#
#                                                                       Modules
# =============================================================================
# Third-party
import numpy as np
import scipy.linalg
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'FRACPERM developers'
__credits__ = ['FRACPERM developers', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
#
#                                                          Tensorial operations
# =============================================================================
# Tensorial products
dyad11 = lambda a1, b1: np.einsum('i,j -> ij', a1, b1)
# Tensorial single contractions
dot22_1 = lambda a2, b2: np.einsum('ik,kj -> ij', a2, b2)
# Quadratic forms
quad121 = lambda a1, b2: np.einsum('i,ij,j', a1, b2, a1)
# =============================================================================
def self_dyad(x):
    """Self dyadic product of first-order tensor.

    .. math::

       \\mathbf{M} = \\mathbf{n} \\otimes \\mathbf{n}

    When :math:`\\mathbf{n}` is a unit vector, :math:`\\mathbf{M}` is the
    structural (orientation) tensor of the plane whose normal is
    :math:`\\mathbf{n}`.

    ----

    Parameters
    ----------
    x : numpy.ndarray (1d)
        First-order tensor.

    Returns
    -------
    m : numpy.ndarray (2d)
        Self dyadic product (symmetric second-order tensor).
    """
    if len(x.shape) != 1:
        raise RuntimeError('The self dyadic product is only available for '
                           'first-order tensors.')
    return dyad11(x, x)
# =============================================================================
def check_second_order(x, n_dim=3):
    """Check if array is a square second-order tensor.

    Parameters
    ----------
    x : numpy.ndarray (2d)
        Second-order tensor.
    n_dim : int, default=3
        Number of spatial dimensions.

    Returns
    -------
    is_valid : bool
        `True` if `x` is a second-order tensor with shape `(n_dim, n_dim)`,
        `False` otherwise.
    """
    return isinstance(x, np.ndarray) and x.shape == (n_dim, n_dim)
# =============================================================================
def is_symmetric(x, rtol=1e-5, atol=1e-10):
    """Check if square second-order tensor is symmetric.

    The absolute tolerance is scaled by the Frobenius norm of the tensor
    (when greater than unity), so that round-off asymmetries of
    large-magnitude tensors are accepted.

    ----

    Parameters
    ----------
    x : numpy.ndarray (2d)
        Square second-order tensor.
    rtol : float, default=1e-5
        Relative tolerance.
    atol : float, default=1e-10
        Absolute tolerance for a tensor with unit norm.

    Returns
    -------
    is_symmetric : bool
        `True` if second-order tensor is symmetric, `False` otherwise.
    """
    scale = max(1.0, float(np.linalg.norm(x)))
    return bool(np.allclose(x, np.transpose(x), rtol=rtol, atol=atol*scale))
#
#                                                        Spectral decomposition
# =============================================================================
def spectral_decomposition(x):
    """Perform spectral decomposition of symmetric second-order tensor.

    Eigenvalues are sorted in **ascending** order and the associated
    (orthonormal) eigenvectors are stored columnwise in the same order, i.e.,
    the :math:`i` th column of `eigenvectors` is the direction associated with
    the :math:`i` th smallest eigenvalue. The sign of each eigenvector is
    arbitrary.

    ----

    Parameters
    ----------
    x : numpy.ndarray (2d)
        Symmetric second-order tensor (square array) whose eigenvalues and
        eigenvectors are computed.

    Returns
    -------
    eigenvalues : numpy.ndarray (1d)
        Eigenvalues of second-order tensor sorted in ascending order.
    eigenvectors : numpy.ndarray (2d)
        Eigenvectors of second-order tensor stored columnwise according with
        eigenvalues.
    """
    # Check if second-order tensor is square
    if len(x.shape) != 2 or x.shape[0] != x.shape[1]:
        raise RuntimeError('Spectral decomposition is only available for '
                           'square second-order tensors.')
    # Check if second-order tensor is symmetric
    if not is_symmetric(x):
        raise RuntimeError('Second-order tensor must be symmetric to perform '
                           'spectral decomposition.')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Perform spectral decomposition of the symmetric part (eigenvalues in
    # ascending order)
    eigenvalues, eigenvectors = scipy.linalg.eigh(0.5*(x + np.transpose(x)))
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Return
    return eigenvalues, eigenvectors
#
#                                                             Rotation tensors
# =============================================================================
def rotation_tensor_xy_plane(theta):
    """Set rotation tensor about the third axis (rotation in 1-2 plane).

    .. math::

       \\mathbf{R}_{xy} =
           \\begin{bmatrix}
               \\cos(\\theta) & \\sin(\\theta) & 0 \\\\
               -\\sin(\\theta) & \\cos(\\theta) & 0 \\\\
               0 & 0 & 1
           \\end{bmatrix}

    ----

    Parameters
    ----------
    theta : float
        Rotation angle (radians).

    Returns
    -------
    r : numpy.ndarray (2d)
        Rotation tensor.
    """
    # Compute convenient sine and cosine
    s = np.sin(theta)
    c = np.cos(theta)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Build rotation tensor
    r = np.zeros((3, 3))
    r[0, 0] = c
    r[0, 1] = s
    r[1, 0] = -s
    r[1, 1] = c
    r[2, 2] = 1.0
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Return
    return r
# =============================================================================
def rotation_tensor_yz_plane(theta):
    """Set rotation tensor about the first axis (rotation in 2-3 plane).

    .. math::

       \\mathbf{R}_{yz} =
           \\begin{bmatrix}
               1 & 0 & 0 \\\\
               0 & \\cos(\\theta) & \\sin(\\theta) \\\\
               0 & -\\sin(\\theta) & \\cos(\\theta)
           \\end{bmatrix}

    ----

    Parameters
    ----------
    theta : float
        Rotation angle (radians).

    Returns
    -------
    r : numpy.ndarray (2d)
        Rotation tensor.
    """
    # Compute convenient sine and cosine
    s = np.sin(theta)
    c = np.cos(theta)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Build rotation tensor
    r = np.zeros((3, 3))
    r[0, 0] = 1.0
    r[1, 1] = c
    r[1, 2] = s
    r[2, 1] = -s
    r[2, 2] = c
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Return
    return r

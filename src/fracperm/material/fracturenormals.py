"""Fracture normals sources.

This module includes the interface to implement any source of the fracture
planes unit normals as well as the two available sources: a constant
(user-specified) set of fracture normals and the set of fracture normals
aligned with the principal stress directions.

In both cases the fracture normals are stored columnwise in a second-order
tensor, i.e., the :math:`i` th column is the unit normal of the :math:`i` th
fracture plane.

Classes
-------
FractureNormalsSource
    Fracture normals source interface.
ConstantFractureNormals
    Constant (user-specified) fracture normals.
PrincipalStressFractureNormals
    Fracture normals aligned with principal stress directions.

Functions
---------
get_available_normals_sources
    Get available fracture normals sources.
"""
#
#                                                                       Modules
# =============================================================================
# Standard
from abc import ABC, abstractmethod
import copy
# Third-party
import numpy as np
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
class FractureNormalsSource(ABC):
    """Fracture normals source interface.

    Attributes
    ----------
    _name : str
        Fracture normals source name.

    Methods
    -------
    get_normals(self, stress)
        *abstract*: Get fracture normals at material point.
    get_name(self)
        Get fracture normals source name.
    """
    @abstractmethod
    def __init__(self):
        """Constructor."""
        pass
    # -------------------------------------------------------------------------
    @abstractmethod
    def get_normals(self, stress):
        """Get fracture normals at material point.

        Parameters
        ----------
        stress : numpy.ndarray (2d)
            Cauchy stress tensor at material point.

        Returns
        -------
        normals : numpy.ndarray (2d)
            Fracture planes unit normals stored columnwise.
        """
        pass
    # -------------------------------------------------------------------------
    def get_name(self):
        """Get fracture normals source name.

        Returns
        -------
        name : str
            Fracture normals source name.
        """
        return self._name
# =============================================================================
class ConstantFractureNormals(FractureNormalsSource):
    """Constant (user-specified) fracture normals.

    The stress tensor at the material point is ignored.

    Attributes
    ----------
    _name : str
        Fracture normals source name.
    _normals : numpy.ndarray (2d)
        Fracture planes unit normals stored columnwise.
    """
    def __init__(self, normals):
        """Constructor.

        Parameters
        ----------
        normals : numpy.ndarray (2d)
            Fracture planes unit normals stored columnwise.
        """
        self._name = 'constant'
        if not top.check_second_order(normals):
            raise RuntimeError('The constant fracture normals must be stored '
                               'columnwise in a 3x3 second-order tensor.')
        self._normals = np.array(normals, dtype=float)
        # Normals are shared between calls and cannot be modified in place
        self._normals.setflags(write=False)
    # -------------------------------------------------------------------------
    def get_normals(self, stress=None):
        """Get fracture normals at material point.

        Parameters
        ----------
        stress : numpy.ndarray (2d), default=None
            Cauchy stress tensor at material point. Ignored.

        Returns
        -------
        normals : numpy.ndarray (2d)
            Fracture planes unit normals stored columnwise.
        """
        return copy.deepcopy(self._normals)
# =============================================================================
class PrincipalStressFractureNormals(FractureNormalsSource):
    """Fracture normals aligned with principal stress directions.

    The three fracture planes are assumed to lie within the principal stress
    planes, such that the fracture normals are the eigenvectors of the stress
    tensor. The eigenvectors are stored columnwise following the ordering
    convention of the spectral decomposition procedure (default: ascending
    order of the principal stresses).

    Attributes
    ----------
    _name : str
        Fracture normals source name.
    _spectral_decomposition : function
        Spectral decomposition of symmetric second-order tensor. Receives the
        tensor and returns the eigenvalues (numpy.ndarray (1d)) and the
        orthonormal eigenvectors stored columnwise (numpy.ndarray (2d)).
    """
    def __init__(self, spectral_decomposition=None):
        """Constructor.

        Parameters
        ----------
        spectral_decomposition : function, default=None
            Spectral decomposition of symmetric second-order tensor. Defaults
            to :py:func:`tensoroperations.spectral_decomposition`.
        """
        self._name = 'principal_stress'
        if spectral_decomposition is None:
            self._spectral_decomposition = top.spectral_decomposition
        else:
            self._spectral_decomposition = spectral_decomposition
    # -------------------------------------------------------------------------
    def get_normals(self, stress):
        """Get fracture normals at material point.

        Parameters
        ----------
        stress : numpy.ndarray (2d)
            Cauchy stress tensor at material point.

        Returns
        -------
        normals : numpy.ndarray (2d)
            Fracture planes unit normals (stress tensor eigenvectors) stored
            columnwise.
        """
        if not top.check_second_order(stress):
            raise RuntimeError('The stress tensor must be a 3x3 second-order '
                               'tensor.')
        _, eigenvectors = self._spectral_decomposition(stress)
        return np.array(eigenvectors, dtype=float)
# =============================================================================
def get_available_normals_sources():
    """Get available fracture normals sources.

    Returns
    -------
    available_sources : dict
        Fracture normals source class (item, FractureNormalsSource) associated
        with each source name (key, str).
    """
    available_sources = {'constant': ConstantFractureNormals,
                         'principal_stress': PrincipalStressFractureNormals}
    return available_sources

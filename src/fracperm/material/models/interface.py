"""Permeability model interface.

This module includes the interface to implement any permeability model, i.e.,
a material model that computes the permeability second-order tensor at a
material point given the current material point state.

Classes
-------
PermeabilityModel
    Permeability model interface.
"""
#
#                                                                       Modules
# =============================================================================
# Standard
from abc import ABC, abstractmethod
import copy
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'FRACPERM developers'
__credits__ = ['FRACPERM developers', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
class PermeabilityModel(ABC):
    """Permeability model interface.

    Permeability models are stateless: the permeability tensor is a function
    of the current material point state only and no variables are stored
    between evaluations.

    Attributes
    ----------
    _name : str
        Permeability model name.
    _material_properties : dict
        Permeability model material properties (key, str) values
        (item, {int, float, bool, str, tuple}).
    _base_name : str
        Prefix of the material point state properties names.

    Methods
    -------
    get_required_properties()
        *abstract*: Get permeability model required and optional material
        properties and model options.
    get_required_state_properties(self)
        *abstract*: Get material point state properties names.
    compute_permeability(self, point_state)
        *abstract*: Compute permeability tensor at material point.
    get_name(self)
        Get permeability model name.
    get_base_name(self)
        Get prefix of the material point state properties names.
    get_property_name(self, name)
        Get material point state property name.
    get_material_properties(self)
        Permeability model material properties.
    """
    @abstractmethod
    def __init__(self, material_properties):
        """Constructor.

        Parameters
        ----------
        material_properties : dict
            Permeability model material properties (key, str) values
            (item, {int, float, bool, str, tuple}).
        """
        pass
    # -------------------------------------------------------------------------
    @staticmethod
    @abstractmethod
    def get_required_properties():
        """Get permeability model required and optional material properties.

        Returns
        -------
        required_properties : dict
            Number of values (item, int) of each required numerical material
            property (key, str).
        optional_properties : dict
            Number of values (item, int) of each optional numerical material
            property (key, str).
        model_options : dict
            Admissible values (item, {tuple, None}) of each optional
            single-valued model option (key, str). Options with admissible
            value `None` accept any valid name.
        """
        pass
    # -------------------------------------------------------------------------
    @abstractmethod
    def get_required_state_properties(self):
        """Get material point state properties names.

        Returns
        -------
        state_properties : tuple[str]
            Names of the material point state properties (second-order
            tensors) consumed by the permeability model.
        """
        pass
    # -------------------------------------------------------------------------
    @abstractmethod
    def compute_permeability(self, point_state):
        """Compute permeability tensor at material point.

        Parameters
        ----------
        point_state : dict
            Material point state properties (item, numpy.ndarray (2d)) stored
            by name (key, str). The state is not modified.

        Returns
        -------
        permeability : numpy.ndarray (2d)
            Permeability second-order tensor.
        """
        pass
    # -------------------------------------------------------------------------
    def get_name(self):
        """Get permeability model name.

        Returns
        -------
        name : str
            Permeability model name.
        """
        return self._name
    # -------------------------------------------------------------------------
    def get_base_name(self):
        """Get prefix of the material point state properties names.

        Returns
        -------
        base_name : str
            Prefix of the material point state properties names (empty string
            if not specified).
        """
        return self._base_name
    # -------------------------------------------------------------------------
    def get_property_name(self, name):
        """Get material point state property name.

        Parameters
        ----------
        name : str
            Material point state property name without prefix.

        Returns
        -------
        property_name : str
            Material point state property name prefixed by the base name
            (`base_name_name`) if the base name is specified, `name`
            otherwise.
        """
        if self._base_name:
            return self._base_name + '_' + name
        return name
    # -------------------------------------------------------------------------
    def get_material_properties(self):
        """Permeability model material properties.

        Returns
        -------
        material_properties : dict
            Permeability model material properties (key, str) values
            (item, {int, float, bool, str, tuple}).
        """
        return copy.deepcopy(self._material_properties)

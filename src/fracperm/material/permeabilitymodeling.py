"""Permeability modeling of material points.

This module includes the class that contains the data associated with the
material phases permeability models and the material points state, as well as
the required methods to compute the permeability tensor of each material
point.

Classes
-------
PermeabilityState
    Material points permeability state.

Functions
---------
get_available_permeability_models
    Get available permeability models.
"""
#
#                                                                       Modules
# =============================================================================
# Standard
import copy
# Third-party
import numpy as np
# Local
import fracperm.tensor.matrixoperations as mop
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
#
#                                                            Permeability state
# =============================================================================
class PermeabilityState:
    """Material points permeability state.

    Attributes
    ----------
    _n_dim : int
        Problem number of spatial dimensions.
    _comp_order_nsym : list[str]
        Second-order tensor components nonsymmetric order.
    _material_phases : list[str]
        Material phases labels (str).
    _material_phases_properties : dict
        Permeability model material properties (item, dict) associated to
        each material phase (key, str).
    _material_phases_models : dict
        Permeability model (item, PermeabilityModel) associated to each
        material phase (key, str).
    _strain_measure : str
        Name of the material point strain tensor property.
    _points_phase : dict
        Material phase (item, str) associated to each material point
        (key, str).
    _points_state : dict
        Material point state properties (item, dict) associated to each
        material point (key, str). Each material point state stores the
        state properties (item, numpy.ndarray (2d)) by name (key, str).
    _points_permeability : dict
        Permeability tensor (item, numpy.ndarray (2d)) associated to each
        material point (key, str).

    Methods
    -------
    init_permeability_model(self, mat_phase, model_keyword, \
                            model_source='fracperm')
        Initialize material phase permeability model.
    set_points_state(self, points_phase, points_state)
        Set material points phase and state properties.
    compute_point_permeability(self, point)
        Compute permeability tensor of material point.
    compute_points_permeability(self)
        Compute permeability tensor of each material point.
    get_point_permeability_mf(self, point)
        Get permeability tensor of material point (matricial form).
    get_material_phases(self)
        Get material phases.
    get_material_phases_properties(self)
        Get material phases permeability model properties.
    get_material_phases_models(self)
        Get material phases permeability models.
    get_points_phase(self)
        Get material phase of each material point.
    get_points_state(self)
        Get state properties of each material point.
    get_points_permeability(self)
        Get permeability tensor of each material point.
    """
    def __init__(self, material_phases, material_phases_properties,
                 strain_measure='creep_strain', problem_type=4):
        """Constructor.

        Parameters
        ----------
        material_phases : list[str]
            Material phases labels (str).
        material_phases_properties : dict
            Permeability model material properties (item, dict) associated to
            each material phase (key, str).
        strain_measure : str, default='creep_strain'
            Name of the material point strain tensor property.
        problem_type : int, default=4
            Problem type: 3D (4).
        """
        self._material_phases = copy.deepcopy(material_phases)
        self._material_phases_properties = \
            copy.deepcopy(material_phases_properties)
        self._strain_measure = strain_measure
        self._material_phases_models = {mat_phase: None
                                        for mat_phase in material_phases}
        self._points_phase = None
        self._points_state = None
        self._points_permeability = None
        # Get problem type parameters
        n_dim, comp_order_nsym = \
            mop.get_problem_type_parameters(problem_type)
        self._n_dim = n_dim
        self._comp_order_nsym = comp_order_nsym
    # -------------------------------------------------------------------------
    def init_permeability_model(self, mat_phase, model_keyword,
                                model_source='fracperm'):
        """Initialize material phase permeability model.

        Parameters
        ----------
        mat_phase : str
            Material phase label.
        model_keyword : str
            Permeability model input data file keyword.
        model_source : {'fracperm',}, default='fracperm'
            Permeability model source.
        """
        if mat_phase not in self._material_phases:
            raise RuntimeError('Unknown material phase \'' + str(mat_phase)
                               + '\'.')
        # Initialize material phase permeability model
        if model_source == 'fracperm':
            if model_keyword == 'orthotropic_embedded_fracture':
                permeability_model = OrthotropicEmbeddedFracture(
                    self._material_phases_properties[mat_phase],
                    strain_measure=self._strain_measure)
            else:
                raise RuntimeError('Unknown permeability model from '
                                   'FRACPERM\'s source.')
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        else:
            raise RuntimeError('Unknown permeability model source.')
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Update material phases permeability models
        self._material_phases_models[mat_phase] = permeability_model
    # -------------------------------------------------------------------------
    def set_points_state(self, points_phase, points_state):
        """Set material points phase and state properties.

        Parameters
        ----------
        points_phase : dict
            Material phase (item, str) associated to each material point
            (key, str).
        points_state : dict
            Material point state properties (item, dict) associated to each
            material point (key, str).
        """
        for point, mat_phase in points_phase.items():
            if mat_phase not in self._material_phases:
                raise RuntimeError('Material point ' + str(point) + ' is '
                                   'associated to unknown material phase \''
                                   + str(mat_phase) + '\'.')
            elif point not in points_state.keys():
                raise RuntimeError('Missing state of material point '
                                   + str(point) + '.')
        self._points_phase = copy.deepcopy(points_phase)
        self._points_state = copy.deepcopy(points_state)
        self._points_permeability = {}
    # -------------------------------------------------------------------------
    def compute_point_permeability(self, point):
        """Compute permeability tensor of material point.

        Parameters
        ----------
        point : str
            Material point label.

        Returns
        -------
        permeability : numpy.ndarray (2d)
            Permeability second-order tensor.
        """
        if self._points_phase is None:
            raise RuntimeError('Material points state has not been set.')
        elif point not in self._points_phase.keys():
            raise RuntimeError('Unknown material point ' + str(point) + '.')
        # Get material phase permeability model
        mat_phase = self._points_phase[point]
        permeability_model = self._material_phases_models[mat_phase]
        if permeability_model is None:
            raise RuntimeError('Permeability model of material phase \''
                               + str(mat_phase) + '\' has not been '
                               'initialized.')
        # Compute material point permeability
        permeability = permeability_model.compute_permeability(
            self._points_state[point])
        self._points_permeability[point] = permeability
        return copy.deepcopy(permeability)
    # -------------------------------------------------------------------------
    def compute_points_permeability(self):
        """Compute permeability tensor of each material point.

        Returns
        -------
        points_permeability : dict
            Permeability tensor (item, numpy.ndarray (2d)) associated to each
            material point (key, str).
        """
        if self._points_phase is None:
            raise RuntimeError('Material points state has not been set.')
        # Loop over material points
        for point in self._points_phase.keys():
            self.compute_point_permeability(point)
        return copy.deepcopy(self._points_permeability)
    # -------------------------------------------------------------------------
    def get_point_permeability_mf(self, point):
        """Get permeability tensor of material point (matricial form).

        Parameters
        ----------
        point : str
            Material point label.

        Returns
        -------
        permeability_mf : numpy.ndarray (1d)
            Permeability tensor stored in matricial form (columnwise).
        """
        if self._points_permeability is None \
                or point not in self._points_permeability.keys():
            raise RuntimeError('The permeability of material point '
                               + str(point) + ' has not been computed.')
        permeability = np.asarray(self._points_permeability[point])
        return mop.get_tensor_mf(permeability, self._n_dim,
                                 self._comp_order_nsym)
    # -------------------------------------------------------------------------
    def get_material_phases(self):
        """Get material phases.

        Returns
        -------
        material_phases : list[str]
            Material phases labels (str).
        """
        return copy.deepcopy(self._material_phases)
    # -------------------------------------------------------------------------
    def get_material_phases_properties(self):
        """Get material phases permeability model properties.

        Returns
        -------
        material_phases_properties : dict
            Permeability model material properties (item, dict) associated to
            each material phase (key, str).
        """
        return copy.deepcopy(self._material_phases_properties)
    # -------------------------------------------------------------------------
    def get_material_phases_models(self):
        """Get material phases permeability models.

        Returns
        -------
        material_phases_models : dict
            Permeability model (item, PermeabilityModel) associated to each
            material phase (key, str).
        """
        return self._material_phases_models
    # -------------------------------------------------------------------------
    def get_points_phase(self):
        """Get material phase of each material point.

        Returns
        -------
        points_phase : dict
            Material phase (item, str) associated to each material point
            (key, str).
        """
        return copy.deepcopy(self._points_phase)
    # -------------------------------------------------------------------------
    def get_points_state(self):
        """Get state properties of each material point.

        Returns
        -------
        points_state : dict
            Material point state properties (item, dict) associated to each
            material point (key, str).
        """
        return copy.deepcopy(self._points_state)
    # -------------------------------------------------------------------------
    def get_points_permeability(self):
        """Get permeability tensor of each material point.

        Returns
        -------
        points_permeability : dict
            Permeability tensor (item, numpy.ndarray (2d)) associated to each
            material point (key, str).
        """
        return copy.deepcopy(self._points_permeability)
# =============================================================================
def get_available_permeability_models(model_source='fracperm'):
    """Get available permeability models.

    Parameters
    ----------
    model_source : {'fracperm',}, default='fracperm'
        Permeability model source.

    Returns
    -------
    available_perm_models : list[str]
        Available permeability models.
    """
    # Set the available permeability models from a given source
    if model_source == 'fracperm':
        available_perm_models = ['orthotropic_embedded_fracture', ]
    else:
        raise RuntimeError('Unknown permeability model source.')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Return
    return available_perm_models

"""Orthotropic embedded fracture permeability model.

This module includes the implementation of the permeability model of a rock
matrix with three mutually orthogonal embedded fracture planes, as proposed by
Zill et al. (2021) [#]_. The permeability tensor is given by

.. math::

   \\mathbf{k} = k_{m} \\mathbf{I} + \\sum_{i=1}^{3} \\dfrac{b_{i}}{a_{i}}
       \\left( \\dfrac{b_{i}^{2}}{12} - k_{m} \\right)
       (\\mathbf{I} - \\mathbf{M}_{i})

where :math:`k_{m}` is the matrix (intrinsic) permeability,
:math:`\\mathbf{I}` is the second-order identity tensor,
:math:`\\mathbf{M}_{i} = \\mathbf{n}_{i} \\otimes \\mathbf{n}_{i}` is the
structural tensor of the :math:`i` th fracture plane with unit normal
:math:`\\mathbf{n}_{i}`, :math:`a_{i}` is the mean fracture spacing and
:math:`b_{i}` is the fracture aperture,

.. math::

   b_{i} = b_{0} + a_{i} \\langle \\boldsymbol{\\varepsilon} :
       \\mathbf{M}_{i} - \\varepsilon_{0i} \\rangle

being :math:`\\varepsilon_{0i}` the threshold strain along the :math:`i` th
fracture normal. Only open fractures (resolved normal strain above threshold)
contribute to the permeability.

.. [#] Zill, F., Lüdeling, C., Kolditz, O., and Nagel, T. (2021).
       Hydro-mechanical continuum modelling of fluid percolation through
       rock salt. International Journal of Rock Mechanics and Mining Sciences,
       147:104879.

Classes
-------
OrthotropicEmbeddedFracture
    Orthotropic embedded fracture permeability model.
"""
#
#                                                                       Modules
# =============================================================================
# Third-party
import numpy as np
# Local
import fracperm.tensor.tensoroperations as top
import fracperm.tensor.matrixoperations as mop
from fracperm.material.models.interface import PermeabilityModel
from fracperm.material.fracturenormals import get_available_normals_sources
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'FRACPERM developers'
__credits__ = ['FRACPERM developers', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
class OrthotropicEmbeddedFracture(PermeabilityModel):
    """Orthotropic embedded fracture permeability model.

    Attributes
    ----------
    _name : str
        Permeability model name.
    _material_properties : dict
        Permeability model material properties (key, str) values
        (item, {int, float, bool, str, tuple}).
    _base_name : str
        Prefix of the material point state properties names.
    _strain_measure : str
        Name of the material point strain tensor property.
    _spacing : numpy.ndarray (1d)
        Mean fracture spacing along each fracture normal.
    _threshold_strain : numpy.ndarray (1d)
        Threshold strain along each fracture normal.
    _km : float
        Matrix (intrinsic) permeability.
    _b0 : float
        Initial fracture aperture (input value). The baseline aperture used in
        the computations is derived from the matrix permeability.
    _rotation : numpy.ndarray (2d)
        Fracture normals rotation tensor.
    _normals_source : FractureNormalsSource
        Fracture normals source.

    Methods
    -------
    get_required_properties()
        Get permeability model required and optional material properties.
    get_required_state_properties(self)
        Get material point state properties names.
    compute_permeability(self, point_state)
        Compute permeability tensor at material point.
    compute_fracture_state(self, stress, strain)
        Compute fracture planes state at material point.
    get_permeability(self, stress, strain)
        Compute permeability tensor from stress and strain tensors.
    get_normals_source(self)
        Get fracture normals source.
    get_rotation_tensor(self)
        Get fracture normals rotation tensor.
    get_fracture_rotation_tensor(rad_xy, rad_yz)
        Compute fracture normals rotation tensor.
    get_baseline_aperture(km)
        Compute fracture baseline aperture.
    compute_aperture_coefficient(normal_strain, threshold_strain, spacing, km)
        Compute fracture aperture and permeability enhancement coefficient.
    assemble_permeability(km, normals, coefficients)
        Assemble permeability tensor.
    _get_switch(option, value)
        Get model option switch from bool or `on`/`off` specification.
    """
    def __init__(self, material_properties, strain_measure='creep_strain',
                 spectral_decomposition=None):
        """Permeability model constructor.

        Parameters
        ----------
        material_properties : dict
            Permeability model material properties (key, str) values
            (item, {int, float, bool, str, tuple}).
        strain_measure : str, default='creep_strain'
            Name of the material point strain tensor property.
        spectral_decomposition : function, default=None
            Spectral decomposition of symmetric second-order tensor used to
            compute the principal stress directions. Defaults to
            :py:func:`tensoroperations.spectral_decomposition`.
        """
        self._name = 'orthotropic_embedded_fracture'
        self._material_properties = dict(material_properties)
        self._strain_measure = str(strain_measure)
        # Check required material properties
        required_properties, _, _ = type(self).get_required_properties()
        for name in required_properties.keys():
            if name not in material_properties.keys():
                raise RuntimeError('Missing material property \'' + name
                                   + '\' of the orthotropic embedded fracture '
                                   'permeability model.')
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Set mean fracture spacing
        spacing = np.array(material_properties['a'], dtype=float).flatten()
        if spacing.shape != (3,):
            raise RuntimeError('The mean fracture spacing must be specified '
                               'along the 3 fracture normals.')
        for i in range(3):
            if not spacing[i] > 0.0:
                raise RuntimeError('The mean fracture spacing along fracture '
                                   'normal ' + str(i + 1) + ' must be greater '
                                   'than 0 (found ' + str(spacing[i]) + ').')
        self._spacing = spacing
        # Set threshold strain
        threshold_strain = np.array(material_properties['e0'],
                                    dtype=float).flatten()
        if threshold_strain.shape != (3,):
            raise RuntimeError('The threshold strain must be specified along '
                               'the 3 fracture normals.')
        self._threshold_strain = threshold_strain
        # Set matrix permeability and initial fracture aperture
        self._km = float(material_properties['km'])
        if not np.isfinite(self._km) or self._km < 0.0:
            raise RuntimeError('The matrix permeability must be a finite, '
                               'non-negative number (found '
                               + str(self._km) + ').')
        self._b0 = float(material_properties['b0'])
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Set fracture normals rotation tensor
        self._rotation = type(self).get_fracture_rotation_tensor(
            float(material_properties['rad_xy']),
            float(material_properties['rad_yz']))
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Set fracture normals source
        available_sources = get_available_normals_sources()
        is_constant_normals = type(self)._get_switch(
            'normal_vector_to_fracture_is_constant',
            material_properties.get('normal_vector_to_fracture_is_constant',
                                    False))
        if is_constant_normals:
            if material_properties.get('n', None) is None:
                raise RuntimeError('The fracture normals (\'n\') must be '
                                   'specified when the normal vector to '
                                   'fracture is constant.')
            normals = np.asarray(material_properties['n'], dtype=float)
            if normals.ndim == 1:
                # Fracture normals specified columnwise (matricial form)
                if normals.shape != (9,):
                    raise RuntimeError('The fracture normals matricial form '
                                       'must have 9 components (found '
                                       + str(normals.size) + ').')
                n_dim, comp_order_nsym = mop.get_problem_type_parameters()
                normals = mop.get_tensor_from_mf(normals, n_dim,
                                                 comp_order_nsym)
            self._normals_source = available_sources['constant'](normals)
        else:
            self._normals_source = available_sources['principal_stress'](
                spectral_decomposition=spectral_decomposition)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Set material point state properties prefix
        base_name = material_properties.get('base_name', None)
        self._base_name = '' if base_name is None else str(base_name)
    # -------------------------------------------------------------------------
    @staticmethod
    def get_required_properties():
        """Get permeability model required and optional material properties.

        The model options are optional as well.

        *Input data file syntax*:

        .. code-block:: text

           a < value > < value > < value >
           e0 < value > < value > < value >
           km < value >
           b0 < value >
           rad_xy < value >
           rad_yz < value >
           n < value > < value > < value > ... (9 values)
           normal_vector_to_fracture_is_constant < on | off >
           base_name < name >

        where

        - ``a`` - Mean fracture spacing along each fracture normal (> 0).
        - ``e0`` - Threshold strain along each fracture normal.
        - ``km`` - Matrix (intrinsic) permeability.
        - ``b0`` - Initial fracture aperture.
        - ``rad_xy`` - Fracture normals rotation angle (radians) in the 1-2
          plane.
        - ``rad_yz`` - Fracture normals rotation angle (radians) in the 2-3
          plane.
        - ``n`` - Fracture normals stored columnwise (components order 11,
          21, 31, 12, 22, 32, 13, 23, 33). Optional.
        - ``normal_vector_to_fracture_is_constant`` - Use the fracture normals
          ``n`` (`on`) or the principal stress directions (`off`). Optional,
          defaults to `off`.
        - ``base_name`` - Prefix of the material point state properties
          names. Optional.

        ----

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
        required_properties = {'a': 3, 'e0': 3, 'km': 1, 'b0': 1,
                               'rad_xy': 1, 'rad_yz': 1}
        optional_properties = {'n': 9}
        model_options = {'normal_vector_to_fracture_is_constant':
                         (True, False),
                         'base_name': None}
        return required_properties, optional_properties, model_options
    # -------------------------------------------------------------------------
    def get_required_state_properties(self):
        """Get material point state properties names.

        Returns
        -------
        state_properties : tuple[str]
            Names of the stress tensor and strain tensor material point state
            properties.
        """
        return (self.get_property_name('stress'),
                self.get_property_name(self._strain_measure))
    # -------------------------------------------------------------------------
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
        stress_name, strain_name = self.get_required_state_properties()
        for name in (stress_name, strain_name):
            if name not in point_state.keys():
                raise RuntimeError('Missing material point state property \''
                                   + name + '\'.')
        return self.get_permeability(point_state[stress_name],
                                     point_state[strain_name])
    # -------------------------------------------------------------------------
    def get_permeability(self, stress, strain):
        """Compute permeability tensor from stress and strain tensors.

        Parameters
        ----------
        stress : numpy.ndarray (2d)
            Cauchy stress tensor.
        strain : numpy.ndarray (2d)
            Strain tensor.

        Returns
        -------
        permeability : numpy.ndarray (2d)
            Permeability second-order tensor.
        """
        fracture_state = self.compute_fracture_state(stress, strain)
        return type(self).assemble_permeability(
            self._km, fracture_state['normals'],
            fracture_state['coefficients'])
    # -------------------------------------------------------------------------
    def compute_fracture_state(self, stress, strain):
        """Compute fracture planes state at material point.

        Parameters
        ----------
        stress : numpy.ndarray (2d)
            Cauchy stress tensor.
        strain : numpy.ndarray (2d)
            Strain tensor.

        Returns
        -------
        fracture_state : dict
            Fracture planes state:

            * 'normals' : rotated fracture normals stored columnwise \
              (numpy.ndarray (2d))
            * 'normal_strains' : strain resolved along each fracture \
              normal (numpy.ndarray (1d))
            * 'is_open' : open fracture flags (numpy.ndarray (1d) of bool)
            * 'apertures' : fracture apertures (numpy.ndarray (1d))
            * 'coefficients' : permeability enhancement coefficients \
              (numpy.ndarray (1d))
        """
        if not top.check_second_order(strain):
            raise RuntimeError('The strain tensor must be a 3x3 second-order '
                               'tensor.')
        # Get fracture normals
        normals = self._normals_source.get_normals(stress)
        # Rotate fracture normals
        rotated_normals = top.dot22_1(self._rotation, normals)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Initialize fracture planes state
        normal_strains = np.zeros(3)
        is_open = np.zeros(3, dtype=bool)
        apertures = np.zeros(3)
        coefficients = np.zeros(3)
        # Loop over fracture planes
        for i in range(3):
            # Compute strain along fracture normal
            normal_strains[i] = top.quad121(rotated_normals[:, i], strain)
            # Compute fracture aperture and enhancement coefficient
            is_open[i], apertures[i], coefficients[i] = \
                type(self).compute_aperture_coefficient(
                    normal_strains[i], self._threshold_strain[i],
                    self._spacing[i], self._km)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        fracture_state = {'normals': rotated_normals,
                          'normal_strains': normal_strains,
                          'is_open': is_open,
                          'apertures': apertures,
                          'coefficients': coefficients}
        return fracture_state
    # -------------------------------------------------------------------------
    def get_normals_source(self):
        """Get fracture normals source.

        Returns
        -------
        normals_source : FractureNormalsSource
            Fracture normals source.
        """
        return self._normals_source
    # -------------------------------------------------------------------------
    def get_rotation_tensor(self):
        """Get fracture normals rotation tensor.

        Returns
        -------
        rotation : numpy.ndarray (2d)
            Fracture normals rotation tensor.
        """
        return self._rotation.copy()
    # -------------------------------------------------------------------------
    @staticmethod
    def get_fracture_rotation_tensor(rad_xy, rad_yz):
        """Compute fracture normals rotation tensor.

        The fracture normals follow the (random) rotation of the material,
        defined by a rotation in the 1-2 plane followed by a rotation in the
        2-3 plane:

        .. math::

           \\mathbf{R} = \\mathbf{R}_{xy}(\\theta_{xy}) \\,
               \\mathbf{R}_{yz}(\\theta_{yz}) \\, \\mathbf{I}

        ----

        Parameters
        ----------
        rad_xy : float
            Rotation angle (radians) in the 1-2 plane.
        rad_yz : float
            Rotation angle (radians) in the 2-3 plane.

        Returns
        -------
        rotation : numpy.ndarray (2d)
            Fracture normals rotation tensor.
        """
        rotation_xy = top.rotation_tensor_xy_plane(rad_xy)
        rotation_yz = top.rotation_tensor_yz_plane(rad_yz)
        return top.dot22_1(rotation_xy, rotation_yz)
    # -------------------------------------------------------------------------
    @staticmethod
    def get_baseline_aperture(km):
        """Compute fracture baseline aperture.

        .. math::

           b_{0} = \\sqrt{12 k_{m}}

        ----

        Parameters
        ----------
        km : float
            Matrix (intrinsic) permeability.

        Returns
        -------
        b0 : float
            Fracture baseline aperture.
        """
        return np.sqrt(12.0*km)
    # -------------------------------------------------------------------------
    @staticmethod
    def compute_aperture_coefficient(normal_strain, threshold_strain, spacing,
                                     km):
        """Compute fracture aperture and permeability enhancement coefficient.

        .. math::

           \\begin{align}
               H & = \\begin{cases}
                         1, & \\text{if } \\varepsilon_{n} > \\varepsilon_{0}
                         \\\\
                         0, & \\text{otherwise}
                     \\end{cases} \\\\
               b & = b_{0} + H a (\\varepsilon_{n} - \\varepsilon_{0}) \\\\
               c & = H \\dfrac{b}{a} \\left( \\dfrac{b^{2}}{12} - k_{m}
                     \\right)
           \\end{align}

        where :math:`b_{0} = \\sqrt{12 k_{m}}`.

        ----

        Parameters
        ----------
        normal_strain : float
            Strain along fracture normal.
        threshold_strain : float
            Threshold strain along fracture normal.
        spacing : float
            Mean fracture spacing.
        km : float
            Matrix (intrinsic) permeability.

        Returns
        -------
        is_open : bool
            `True` if the fracture is open, `False` otherwise.
        aperture : float
            Fracture aperture.
        coefficient : float
            Permeability enhancement coefficient (null if the fracture is
            closed).
        """
        is_open = bool(normal_strain > threshold_strain)
        h = 1.0 if is_open else 0.0
        # Compute fracture aperture
        b0 = OrthotropicEmbeddedFracture.get_baseline_aperture(km)
        aperture = b0 + h*spacing*(normal_strain - threshold_strain)
        # Compute permeability enhancement coefficient
        coefficient = h*(aperture/spacing)*((aperture*aperture/12.0) - km)
        return is_open, aperture, coefficient
    # -------------------------------------------------------------------------
    @staticmethod
    def assemble_permeability(km, normals, coefficients):
        """Assemble permeability tensor.

        .. math::

           \\mathbf{k} = k_{m} \\mathbf{I} + \\sum_{i=1}^{3} c_{i}
               (\\mathbf{I} - \\mathbf{n}_{i} \\otimes \\mathbf{n}_{i})

        ----

        Parameters
        ----------
        km : float
            Matrix (intrinsic) permeability.
        normals : numpy.ndarray (2d)
            Fracture normals stored columnwise.
        coefficients : numpy.ndarray (1d)
            Permeability enhancement coefficient of each fracture plane.

        Returns
        -------
        permeability : numpy.ndarray (2d)
            Permeability second-order tensor.
        """
        soid = np.eye(3)
        # Initialize with matrix permeability
        permeability = km*soid
        # Add fracture planes contributions
        for i in range(3):
            structural_tensor = top.self_dyad(normals[:, i])
            permeability = permeability \
                + coefficients[i]*(soid - structural_tensor)
        return permeability
    # -------------------------------------------------------------------------
    @staticmethod
    def _get_switch(option, value):
        """Get model option switch from bool or `on`/`off` specification.

        Parameters
        ----------
        option : str
            Model option name.
        value : {bool, str}
            Model option specification.

        Returns
        -------
        is_on : bool
            `True` if model option is switched on, `False` otherwise.
        """
        if isinstance(value, (bool, np.bool_)):
            return bool(value)
        elif isinstance(value, str) and value.lower() in ('on', 'off'):
            return value.lower() == 'on'
        raise RuntimeError('The model option \'' + option + '\' must be '
                           'specified as on/off or bool (found '
                           + repr(value) + ').')

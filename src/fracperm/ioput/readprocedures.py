"""Input data file reading and checking procedures.

This module includes a set of general and specific functions to read and
process data from the input data file. These functions also perform some checks
on the input data to avoid downstream execution errors.

Functions
---------
searchkeywordline
    Search mandatory keyword in data file and get corresponding line number.
searchoptkeywordline
    Search optional keyword in data file and get corresponding line number.
get_formatted_parameter
    Get string parameter converted to appropriate type.
read_material_properties
    Read material phases data and properties.
read_strain_measure
    Read material points strain tensor property name.
read_material_points
    Read material points phase and state properties.
"""
#
#                                                                       Modules
# =============================================================================
# Standard
import linecache
import re
# Third-party
import numpy as np
# Local
import fracperm.ioput.info as info
import fracperm.ioput.ioutilities as ioutil
import fracperm.tensor.matrixoperations as mop
import fracperm.tensor.tensoroperations as top
from fracperm.material.permeabilitymodeling import \
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
#
#                                                               Search keywords
# =============================================================================
def searchkeywordline(file, keyword):
    """Search mandatory keyword in data file and get corresponding line number.

    Parameters
    ----------
    file : file
        Data file.
    keyword : str
        Keyword.

    Returns
    -------
    line_number : int
        Number of data file line where the keyword is first found.
    """
    is_found, line_number = searchoptkeywordline(file, keyword)
    if is_found:
        return line_number
    # Keyword not found
    summary = 'Missing keyword'
    description = 'The keyword - {} - has not been found in the input ' \
        + 'data file.'
    info.displayinfo('4', summary, description, keyword)
# =============================================================================
def searchoptkeywordline(file, keyword):
    """Search optional keyword in data file and get corresponding line number.

    Only the first word of each (non-comment) line is compared with the
    keyword.

    Parameters
    ----------
    file : file
        Data file.
    keyword : str
        Keyword.

    Returns
    -------
    is_found : bool
        `True` if keyword is found in data file, `False` otherwise.
    line_number : int
        Number of data file line where the keyword is first found. Set to 0 by
        default if keyword is not found.
    """
    file.seek(0)
    line_number = 0
    for line in file:
        line_number = line_number + 1
        words = line.split()
        if len(words) > 0 and words[0] == keyword:
            return True, line_number
    return False, 0
#
#                                                           Parameter formatter
# =============================================================================
def get_formatted_parameter(x):
    """Get string parameter converted to appropriate type.

    Parameters specified as `on` or `off` (case insensitive) are converted to
    bool, integer literals to int and any other finite number to float.
    Remaining parameters are kept as str.

    Parameters
    ----------
    x : str
        Parameter specification.

    Returns
    -------
    y : {int, float, str, bool}
        Parameter value.
    """
    x = str(x)
    if x.lower() in ('on', 'off'):
        y = x.lower() == 'on'
    elif re.fullmatch('[+-]?[0-9]+', x):
        y = int(x)
    elif ioutil.checknumber(x):
        y = float(x)
    else:
        y = x
    return y
#
#                                                             Specific keywords
# =============================================================================
def read_material_properties(file, file_path, keyword):
    """Read material phases data and properties.

    The specification of the data associated with the material phases has the
    following input data file syntax:

    .. code-block:: text

        Material_Phases < n_material_phases >
        < phase_id > < model_name > < n_properties > [ < model_source > ]
        < property_1_name > < value > [ < value > ... ]
        < property_2_name > < value > [ < value > ... ]
        < option_1_name > < option >
        < phase_id > < model_name > < n_properties > [ < model_source > ]
        < property_1_name > < value > [ < value > ... ]
        ...

    where `n_material_phases` (int) is the number of material phases,
    `phase_id` (int) is the material identifier, `model_name` (str) is the
    permeability model name, `n_properties` (int) is the total number of
    material properties and model options, `model_source` (int, optional) is
    the permeability model source, `property_X_name` (str) is the material
    property name and `option_X_name` is the model option name.

    ----

    Parameters
    ----------
    file : file
        Data file.
    file_path : str
        Data file path.
    keyword : str
        Keyword.

    Returns
    -------
    n_material_phases : int
        Number of material phases.
    material_phases_data : dict
        Material phase data (item, dict) associated with each material phase
        (key, str).
    material_phases_properties : dict
        Permeability model material properties (item, dict) associated with
        each material phase (key, str).
    """
    # Get display features
    indent = ioutil.setdisplayfeatures()[2]
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Search keyword
    keyword_line_number = searchkeywordline(file, keyword)
    line = linecache.getline(file_path, keyword_line_number).split()
    if len(line) == 1:
        summary = 'Missing number of material phases'
        description = 'The keyword - {} - is not properly defined in ' \
            + 'the input data file.' + '\n' \
            + indent + 'Missing number of material phases.'
        info.displayinfo('4', summary, description, keyword)
    elif not ioutil.checkposint(line[1]):
        summary = 'Invalid number of material phases'
        description = 'The keyword - {} - is not properly defined in ' \
            + 'the input data file.' + '\n' \
            + indent + 'Invalid number of material phases.'
        info.displayinfo('4', summary, description, keyword)
    # Set number of material phases
    n_material_phases = int(line[1])
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Initialize material phases properties and data dictionaries
    material_phases_properties = {}
    material_phases_data = {}
    # Loop over material phases
    line_number = keyword_line_number + 1
    for i in range(n_material_phases):
        # Read material phase header
        phase_header = linecache.getline(file_path, line_number).split()
        if len(phase_header) not in [3, 4]:
            summary = 'Missing material phase header'
            description = 'The keyword - {} - is not properly defined in ' \
                + 'the input data file.' + '\n' \
                + indent + 'Missing specification of a material phase header.'
            info.displayinfo('4', summary, description, keyword)
        elif not ioutil.checkposint(phase_header[0]):
            summary = 'Invalid material phase header'
            description = 'The keyword - {} - is not properly defined in ' \
                + 'the input data file.' + '\n' \
                + indent + 'Invalid specification of a material phase header.'
            info.displayinfo('4', summary, description, keyword)
        elif phase_header[0] in material_phases_properties.keys():
            summary = 'Duplicated material phase header'
            description = 'The keyword - {} - is not properly defined in ' \
                + 'the input data file.' + '\n' \
                + indent + 'Duplicated specification of a material phase ' \
                + 'header.'
            info.displayinfo('4', summary, description, keyword)
        # Set material phase
        mat_phase = str(phase_header[0])
        material_phases_data[mat_phase] = {}
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Get material phase permeability model source identifier
        if len(phase_header) == 3:
            model_source_id = 1
        elif not ioutil.checkposint(phase_header[3]):
            summary = 'Invalid permeability model source'
            description = 'The keyword - {} - is not properly defined in ' \
                + 'the input data file.' + '\n' \
                + indent + 'Invalid permeability model source of ' \
                + 'material phase {}.'
            info.displayinfo('4', summary, description, keyword, mat_phase)
        else:
            model_source_id = int(phase_header[3])
        # Set material phase permeability model source
        if model_source_id == 1:
            model_source = 'fracperm'
        else:
            summary = 'Unknown permeability model source'
            description = 'The keyword - {} - is not properly defined in ' \
                + 'the input data file.' + '\n' \
                + indent + 'Unknown permeability model source of ' \
                + 'material phase {}.'
            info.displayinfo('4', summary, description, keyword, mat_phase)
        material_phases_data[mat_phase]['source'] = model_source
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Set material phase permeability model keyword
        available_perm_models = get_available_permeability_models(model_source)
        if phase_header[1] not in available_perm_models:
            summary = 'Unknown permeability model'
            description = 'The keyword - {} - is not properly defined in ' \
                + 'the input data file.' + '\n' \
                + indent + 'Unknown permeability model ({}) of ' \
                + 'material phase {}.'
            info.displayinfo('4', summary, description, keyword,
                             phase_header[1], mat_phase)
        model_keyword = phase_header[1]
        material_phases_data[mat_phase]['keyword'] = model_keyword
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Get permeability model material properties and model options
        if model_keyword == 'orthotropic_embedded_fracture':
            req_properties, opt_properties, model_options = \
                OrthotropicEmbeddedFracture.get_required_properties()
        num_properties = {**req_properties, **opt_properties}
        # Check number of material properties
        max_n_properties = len(num_properties) + len(model_options)
        if not ioutil.checkposint(phase_header[2]):
            summary = 'Invalid number of material properties'
            description = 'The keyword - {} - is not properly defined in ' \
                + 'the input data file.' + '\n' \
                + indent + 'Invalid number of material properties and ' \
                + 'model options of material phase {}.'
            info.displayinfo('4', summary, description, keyword, mat_phase)
        elif int(phase_header[2]) < len(req_properties) \
                or int(phase_header[2]) > max_n_properties:
            summary = 'Wrong number of material properties'
            description = 'The keyword - {} - is not properly defined in ' \
                + 'the input data file.' + '\n' \
                + indent + 'Wrong number of material properties and ' \
                + 'model options of material phase {}.'
            info.displayinfo('4', summary, description, keyword, mat_phase)
        n_properties = int(phase_header[2])
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Update line number
        line_number = line_number + 1
        # Initialize material phase properties
        material_phases_properties[mat_phase] = {}
        # Loop over material properties and model options
        for j in range(n_properties):
            property_line = linecache.getline(file_path, line_number).split()
            if len(property_line) < 2:
                summary = 'Invalid material property or model option'
                description = 'The keyword - {} - is not properly defined ' \
                    + 'in the input data file.' + '\n' \
                    + indent + 'Invalid material property or model ' \
                    + 'option of material phase {}.'
                info.displayinfo('4', summary, description, keyword, mat_phase)
            elif property_line[0] not in num_properties.keys() \
                    and property_line[0] not in model_options.keys():
                summary = 'Unknown material property or model option'
                description = 'The keyword - {} - is not properly defined ' \
                    + 'in the input data file.' + '\n' \
                    + indent + 'Unknown material property or model option ' \
                    + '({}) of material phase {}.'
                info.displayinfo('4', summary, description, keyword,
                                 property_line[0], mat_phase)
            elif property_line[0] in \
                    material_phases_properties[mat_phase].keys():
                summary = 'Duplicated material property or model option'
                description = 'The keyword - {} - is not properly defined ' \
                    + 'in the input data file.' + '\n' \
                    + indent + 'Duplicated material property or model ' \
                    + 'option ({}) of material phase {}.'
                info.displayinfo('4', summary, description, keyword,
                                 property_line[0], mat_phase)
            prop_name = str(property_line[0])
            # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
            # Read model option
            if prop_name in model_options.keys():
                admissible_values = model_options[prop_name]
                option = get_formatted_parameter(property_line[1])
                if len(property_line) != 2:
                    is_valid_option = False
                elif admissible_values is None:
                    is_valid_option = isinstance(option, str) \
                        and ioutil.checkvalidname(option)
                else:
                    is_valid_option = isinstance(option, bool) \
                        and option in admissible_values
                if not is_valid_option:
                    summary = 'Invalid model option'
                    description = 'The keyword - {} - is not properly ' \
                        + 'defined in the input data file.' + '\n' \
                        + indent + 'Invalid model option ({}) of material ' \
                        + 'phase {}.'
                    info.displayinfo('4', summary, description, keyword,
                                     prop_name, mat_phase)
                material_phases_properties[mat_phase][prop_name] = option
            # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
            # Read material property
            else:
                n_values = num_properties[prop_name]
                values = property_line[1:]
                if len(values) != n_values or \
                        not all([ioutil.checknumber(x) for x in values]):
                    summary = 'Invalid material property'
                    description = 'The keyword - {} - is not properly ' \
                        + 'defined in the input data file.' + '\n' \
                        + indent + 'Invalid material property ({}) of ' \
                        + 'material phase {}: expected {} numerical ' \
                        + 'value(s).'
                    info.displayinfo('4', summary, description, keyword,
                                     prop_name, mat_phase, n_values)
                if n_values == 1:
                    prop_value = float(values[0])
                else:
                    prop_value = tuple([float(x) for x in values])
                material_phases_properties[mat_phase][prop_name] = prop_value
            # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
            # Update line number
            line_number = line_number + 1
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Check missing required material properties
        properties = material_phases_properties[mat_phase]
        for prop_name in req_properties.keys():
            if prop_name not in properties.keys():
                summary = 'Missing material property'
                description = 'The keyword - {} - is not properly defined ' \
                    + 'in the input data file.' + '\n' \
                    + indent + 'Missing material property ({}) of material ' \
                    + 'phase {}.'
                info.displayinfo('4', summary, description, keyword,
                                 prop_name, mat_phase)
        # Check model-specific consistency
        if model_keyword == 'orthotropic_embedded_fracture':
            if properties.get('normal_vector_to_fracture_is_constant', False) \
                    and 'n' not in properties.keys():
                summary = 'Missing fracture normals'
                description = 'The keyword - {} - is not properly defined ' \
                    + 'in the input data file.' + '\n' \
                    + indent + 'The fracture normals (n) of material phase ' \
                    + '{} must be specified when the normal vector to ' \
                    + 'fracture' + '\n' + indent + 'is constant.'
                info.displayinfo('4', summary, description, keyword,
                                 mat_phase)
            for k, spacing in enumerate(properties['a']):
                if not spacing > 0.0:
                    summary = 'Invalid mean fracture spacing'
                    description = 'The keyword - {} - is not properly ' \
                        + 'defined in the input data file.' + '\n' \
                        + indent + 'The mean fracture spacing along ' \
                        + 'fracture normal {} of material phase {} must be ' \
                        + 'greater than 0 (found {}).'
                    info.displayinfo('4', summary, description, keyword,
                                     k + 1, mat_phase, spacing)
            if properties['km'] < 0.0:
                summary = 'Invalid matrix permeability'
                description = 'The keyword - {} - is not properly defined ' \
                    + 'in the input data file.' + '\n' \
                    + indent + 'The matrix permeability of material phase ' \
                    + '{} must be non-negative (found {}).'
                info.displayinfo('4', summary, description, keyword,
                                 mat_phase, properties['km'])
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return n_material_phases, material_phases_data, material_phases_properties
# =============================================================================
def read_strain_measure(file, file_path, keyword,
                        default_measure='creep_strain'):
    """Read material points strain tensor property name.

    The specification of the strain tensor property name has the following
    input data file syntax:

    .. code-block:: text

       Strain_Measure < name >

    ----

    Parameters
    ----------
    file : file
        Data file.
    file_path : str
        Data file path.
    keyword : str
        Keyword.
    default_measure : str, default='creep_strain'
        Strain tensor property name adopted if the keyword is not found.

    Returns
    -------
    strain_measure : str
        Strain tensor property name.
    """
    is_found, keyword_line_number = searchoptkeywordline(file, keyword)
    if not is_found:
        return default_measure
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    line = linecache.getline(file_path, keyword_line_number).split()
    if len(line) != 2 or not ioutil.checkvalidname(line[1]) \
            or line[1] == 'stress':
        summary = 'Invalid strain measure'
        description = 'The keyword - {} - is not properly defined in the ' \
            + 'input data file.'
        info.displayinfo('4', summary, description, keyword)
    return str(line[1])
# =============================================================================
def read_material_points(file, file_path, keyword, material_phases_properties,
                         strain_measure, n_dim, comp_order_nsym):
    """Read material points phase and state properties.

    The specification of the material points has the following input data file
    syntax:

    .. code-block:: text

       Material_Points < n_points >
       < point_id > < phase_id >
       stress < value > < value > ... (9 values)
       < strain_measure > < value > < value > ... (9 values)
       < point_id > < phase_id >
       ...

    where `n_points` (int) is the number of material points, `point_id` (int)
    is the material point identifier, `phase_id` (int) is the material phase
    identifier and `strain_measure` (str) is the strain tensor property name.
    Tensor components are specified columnwise (components order 11, 21, 31,
    12, 22, 32, 13, 23, 33). The stress tensor must be symmetric.

    The state properties are stored by name prefixed by the material phase
    `base_name` (`base_name_stress`, `base_name_strain_measure`), if
    specified.

    ----

    Parameters
    ----------
    file : file
        Data file.
    file_path : str
        Data file path.
    keyword : str
        Keyword.
    material_phases_properties : dict
        Permeability model material properties (item, dict) associated with
        each material phase (key, str).
    strain_measure : str
        Strain tensor property name.
    n_dim : int
        Problem number of spatial dimensions.
    comp_order_nsym : list[str]
        Second-order tensor components nonsymmetric order.

    Returns
    -------
    points_phase : dict
        Material phase (item, str) associated to each material point
        (key, str).
    points_state : dict
        Material point state properties (item, dict) associated to each
        material point (key, str).
    """
    # Get display features
    indent = ioutil.setdisplayfeatures()[2]
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Search keyword
    keyword_line_number = searchkeywordline(file, keyword)
    line = linecache.getline(file_path, keyword_line_number).split()
    if len(line) != 2 or not ioutil.checkposint(line[1]):
        summary = 'Invalid number of material points'
        description = 'The keyword - {} - is not properly defined in ' \
            + 'the input data file.' + '\n' \
            + indent + 'Invalid number of material points.'
        info.displayinfo('4', summary, description, keyword)
    n_points = int(line[1])
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Set state properties names
    state_names = ('stress', strain_measure)
    # Initialize material points phase and state
    points_phase = {}
    points_state = {}
    # Loop over material points
    line_number = keyword_line_number + 1
    for i in range(n_points):
        # Read material point header
        point_header = linecache.getline(file_path, line_number).split()
        if len(point_header) != 2 \
                or not ioutil.checkposint(point_header[0]) \
                or not ioutil.checkposint(point_header[1]):
            summary = 'Invalid material point header'
            description = 'The keyword - {} - is not properly defined in ' \
                + 'the input data file.' + '\n' \
                + indent + 'Invalid specification of a material point header.'
            info.displayinfo('4', summary, description, keyword)
        elif point_header[0] in points_phase.keys():
            summary = 'Duplicated material point header'
            description = 'The keyword - {} - is not properly defined in ' \
                + 'the input data file.' + '\n' \
                + indent + 'Duplicated specification of material point {}.'
            info.displayinfo('4', summary, description, keyword,
                             point_header[0])
        elif point_header[1] not in material_phases_properties.keys():
            summary = 'Undefined material phase'
            description = 'The keyword - {} - is not properly defined in ' \
                + 'the input data file.' + '\n' \
                + indent + 'Material point {} is associated with undefined ' \
                + 'material phase {}.'
            info.displayinfo('4', summary, description, keyword,
                             point_header[0], point_header[1])
        point = str(point_header[0])
        mat_phase = str(point_header[1])
        # Get material phase state properties prefix
        base_name = material_phases_properties[mat_phase].get('base_name',
                                                               None)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Read material point state properties
        point_state = {}
        for j in range(len(state_names)):
            line_number = line_number + 1
            state_line = linecache.getline(file_path, line_number).split()
            if len(state_line) == 0 or state_line[0] not in state_names:
                summary = 'Invalid material point state property'
                description = 'The keyword - {} - is not properly defined ' \
                    + 'in the input data file.' + '\n' \
                    + indent + 'Invalid state property of material point ' \
                    + '{} (expected: {}).'
                info.displayinfo('4', summary, description, keyword, point,
                                 ', '.join(state_names))
            elif len(state_line) != n_dim**2 + 1 or \
                    not all([ioutil.checknumber(x) for x in state_line[1:]]):
                summary = 'Invalid material point state property'
                description = 'The keyword - {} - is not properly defined ' \
                    + 'in the input data file.' + '\n' \
                    + indent + 'Invalid {} tensor of material point {}: ' \
                    + 'expected {} numerical values.'
                info.displayinfo('4', summary, description, keyword,
                                 state_line[0], point, n_dim**2)
            # Set state property name
            if base_name:
                name = base_name + '_' + state_line[0]
            else:
                name = state_line[0]
            if name in point_state.keys():
                summary = 'Duplicated material point state property'
                description = 'The keyword - {} - is not properly defined ' \
                    + 'in the input data file.' + '\n' \
                    + indent + 'Duplicated {} tensor of material point {}.'
                info.displayinfo('4', summary, description, keyword,
                                 state_line[0], point)
            # Get state property tensor
            tensor = mop.get_tensor_from_mf(
                np.array([float(x) for x in state_line[1:]]), n_dim,
                comp_order_nsym)
            # Check stress tensor symmetry
            if state_line[0] == 'stress' and not top.is_symmetric(tensor):
                summary = 'Nonsymmetric stress tensor'
                description = 'The keyword - {} - is not properly defined ' \
                    + 'in the input data file.' + '\n' \
                    + indent + 'The stress tensor of material point {} must ' \
                    + 'be symmetric.'
                info.displayinfo('4', summary, description, keyword, point)
            point_state[name] = tensor
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        points_phase[point] = mat_phase
        points_state[point] = point_state
        # Update line number
        line_number = line_number + 1
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return points_phase, points_state

"""Read input data file and store data.

This module includes a function that reads the input data file and stores all
the relevant data in suitable containers.

Functions
---------
read_input_data_file
    Read input data file and store data in suitable containers.
"""
#
#                                                                       Modules
# =============================================================================
# Local
import fracperm.ioput.info as info
import fracperm.ioput.packager as packager
import fracperm.ioput.readprocedures as rproc
import fracperm.tensor.matrixoperations as mop
from fracperm.material.permeabilitymodeling import PermeabilityState
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'FRACPERM developers'
__credits__ = ['FRACPERM developers', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
def read_input_data_file(input_file, dirs_dict):
    """Read input data file and store data in suitable containers.

    Parameters
    ----------
    input_file : file
        Input data file.
    dirs_dict : dict
        Container of output directories and files paths.

    Returns
    -------
    points_dict : dict
        Container of data associated with the material points.
    permeability_state : PermeabilityState
        Material points permeability state.
    """
    # Get input data file path
    input_file_path = dirs_dict['input_file_path']
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Get parameters dependent on the problem type (3D only)
    problem_type = 4
    n_dim, comp_order_nsym = \
        mop.get_problem_type_parameters(problem_type)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Read number of material phases, permeability models and associated
    # properties (mandatory)
    info.displayinfo('5', 'Reading material phases data...')
    keyword = 'Material_Phases'
    _, material_phases_data, material_phases_properties = \
        rproc.read_material_properties(input_file, input_file_path, keyword)
    material_phases = list(material_phases_properties.keys())
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Read strain tensor property name (optional)
    keyword = 'Strain_Measure'
    strain_measure = rproc.read_strain_measure(input_file, input_file_path,
                                               keyword)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Read material points phase and state properties (mandatory)
    info.displayinfo('5', 'Reading material points data...')
    keyword = 'Material_Points'
    points_phase, points_state = rproc.read_material_points(
        input_file, input_file_path, keyword, material_phases_properties,
        strain_measure, n_dim, comp_order_nsym)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Instantiate material points permeability state
    permeability_state = PermeabilityState(
        material_phases, material_phases_properties,
        strain_measure=strain_measure, problem_type=problem_type)
    # Loop over material phases
    for mat_phase in material_phases:
        # Get material phase permeability model keyword and source
        model_keyword = material_phases_data[mat_phase]['keyword']
        model_source = material_phases_data[mat_phase]['source']
        # Initialize material phase permeability model
        permeability_state.init_permeability_model(mat_phase, model_keyword,
                                                   model_source)
    # Set material points phase and state properties
    permeability_state.set_points_state(points_phase, points_state)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Store data associated with the material points
    info.displayinfo('5', 'Storing material points data...')
    points_dict = packager.store_points_data(points_phase, points_state)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return points_dict, permeability_state

"""FRACPERM (Orthotropic Embedded Fracture Permeability).

FRACPERM computes the permeability tensor of fractured rock at a set of
material points given the current stress and strain tensors at each point.
The rock mass is modeled as an isotropic rock matrix with three embedded,
mutually orthogonal fracture planes whose apertures evolve with the strain
resolved along the fracture normals, following Zill et al. (2021) [#]_.

.. [#] Zill, F., Lüdeling, C., Kolditz, O., and Nagel, T. (2021).
       Hydro-mechanical continuum modelling of fluid percolation through
       rock salt. International Journal of Rock Mechanics and Mining Sciences,
       147:104879.

Functions
---------
fracperm_simulation
    Perform FRACPERM simulation.
"""
#
#                                                                       Modules
# =============================================================================
# Standard
import sys
import time
# Third-party
import numpy as np
# Local
import fracperm.ioput.info as info
import fracperm.ioput.ioutilities as ioutil
import fracperm.ioput.readinputdata as rid
import fracperm.ioput.fileoperations as filop
import fracperm.ioput.packager as packager
from fracperm.ioput.permoutput import PermOutput
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'FRACPERM developers'
__credits__ = ['FRACPERM developers', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
def fracperm_simulation(arg_input_file_path, is_null_stdout=False):
    """Perform FRACPERM simulation.

    Parameters
    ----------
    arg_input_file_path : str
        Input data file path provided as input.
    is_null_stdout : bool, default=False
        Suppress execution output to stdout.

    Returns
    -------
    points_permeability : dict
        Permeability tensor (item, numpy.ndarray (2d)) associated to each
        material point (key, str).
    """
    # Suppress execution output to stdout
    ioutil.is_null_stdout = is_null_stdout
    # Reset '.screen' output file path
    ioutil.screen_file_path = None
    #
    #                                             Read user input data file and
    #                                 create problem output directory structure
    # =========================================================================
    # Process input data file path
    input_file_name, input_file_path, input_file_dir = \
        filop.set_input_datafile_path(str(arg_input_file_path))
    # Set output directory structure and output files paths
    problem_name, problem_dir, perm_file_path = \
        filop.set_problem_dirs(input_file_name, input_file_dir)
    # Store problem directories and files paths
    dirs_dict = packager.store_paths_data(
        input_file_name, input_file_path, input_file_dir, problem_name,
        problem_dir, perm_file_path)
    #
    #                                                             Start program
    # =========================================================================
    # Get current time and date
    start_date = time.strftime("%d/%b/%Y")
    start_time = time.strftime("%Hh%Mm%Ss")
    start_time_s = time.time()
    phase_names = ['']
    phase_times = np.zeros((1, 2))
    phase_names[0] = 'Total'
    phase_times[0, :] = [start_time_s, 0.0]
    # Display starting program header
    info.displayinfo('0', problem_name, input_file_name, start_time,
                     start_date)
    #
    #                                                 Read user input data file
    # =========================================================================
    # Display starting phase information and set phase initial time
    info.displayinfo('2', 'Read input data file')
    phase_init_time = time.time()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Read input data file and store data in convenient containers
    with open(input_file_path, 'r') as input_file:
        info.displayinfo('5', 'Reading the input data file...')
        points_dict, permeability_state = \
            rid.read_input_data_file(input_file, dirs_dict)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Set phase ending time and display finishing phase information
    phase_end_time = time.time()
    phase_names.append('Read input data')
    phase_times = np.append(
        phase_times, [[phase_init_time, phase_end_time]], axis=0)
    info.displayinfo('3', 'Read input data file',
                     phase_times[phase_times.shape[0] - 1, 1]
                     - phase_times[phase_times.shape[0] - 1, 0])
    #
    #                              Compute material points permeability tensors
    # =========================================================================
    # Display starting phase information and set phase initial time
    info.displayinfo('2', 'Compute material points permeability')
    phase_init_time = time.time()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Loop over material points
    n_points = points_dict['n_points']
    for i, point in enumerate(points_dict['points']):
        # Compute material point permeability tensor
        permeability_state.compute_point_permeability(point)
        # Display material points evaluation progress
        info.displayinfo('6', 'progress', i + 1, n_points)
    info.displayinfo('6', 'completed', n_points)
    # Get material points permeability tensors
    points_permeability = permeability_state.get_points_permeability()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Set phase ending time and display finishing phase information
    phase_end_time = time.time()
    phase_names.append('Compute material points permeability')
    phase_times = np.append(
        phase_times, [[phase_init_time, phase_end_time]], axis=0)
    info.displayinfo('3', 'Compute material points permeability',
                     phase_times[phase_times.shape[0] - 1, 1]
                     - phase_times[phase_times.shape[0] - 1, 0])
    #
    #                                                        Write output files
    # =========================================================================
    # Display starting phase information and set phase initial time
    info.displayinfo('2', 'Write output files')
    phase_init_time = time.time()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Write material points permeability output file
    info.displayinfo('5', 'Writing permeability output file (.perm)...')
    perm_output = PermOutput(dirs_dict['perm_file_path'])
    perm_output.init_file()
    perm_output.write_file(permeability_state)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Set phase ending time and display finishing phase information
    phase_end_time = time.time()
    phase_names.append('Write output files')
    phase_times = np.append(
        phase_times, [[phase_init_time, phase_end_time]], axis=0)
    info.displayinfo('3', 'Write output files',
                     phase_times[phase_times.shape[0] - 1, 1]
                     - phase_times[phase_times.shape[0] - 1, 0])
    #
    #                                                               End program
    # =========================================================================
    # Get current time and date
    end_date = time.strftime("%d/%b/%Y")
    end_time = time.strftime("%Hh%Mm%Ss")
    end_time_s = time.time()
    phase_times[0, 1] = end_time_s
    # Display ending program message
    info.displayinfo('1', end_time, end_date, problem_name, phase_names,
                     phase_times)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return points_permeability
# =============================================================================
# A FRACPERM simulation can be performed directly by executing this module with
# the following command
#
# python -m fracperm.main < input_data_file_path >
#
# where input_data_file_path is the input data file path (mandatory)
if __name__ == '__main__':
    # Set input data file path
    if len(sys.argv[1:]) == 0:
        summary = 'Missing input data file'
        description = 'The input data file was not provided.'
        info.displayinfo('4', summary, description)
    else:
        input_file_path = str(sys.argv[1])
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Perform FRACPERM simulation
    fracperm_simulation(input_file_path, is_null_stdout=False)

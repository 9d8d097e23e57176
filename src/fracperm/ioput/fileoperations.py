"""Input data file and output directory handling.

This module includes the functions that check the problem input data file path
and build the problem output directory, where the '.screen' and '.perm' output
files are written.

Functions
---------
make_directory
    Create directory, optionally replacing an existing one.
set_input_datafile_path
    Check input data file path and get its name and directory.
set_problem_dirs
    Create problem output directory and set output files paths.
"""
#
#                                                                       Modules
# =============================================================================
# Standard
import os
import shutil
# Local
import fracperm.ioput.info as info
import fracperm.ioput.ioutilities as ioutil
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
#                                                          Directory operations
# =============================================================================
def make_directory(dir, option='no_overwrite'):
    """Create directory, optionally replacing an existing one.

    Parameters
    ----------
    dir : str
        Directory path.
    option : {'no_overwrite', 'overwrite'}, default='no_overwrite'
        If 'overwrite', an existing directory is removed together with its
        content before being created again. If 'no_overwrite', an existing
        directory raises an error.
    """
    if option not in ('no_overwrite', 'overwrite'):
        raise RuntimeError('Unknown directory creation option \''
                           + str(option) + '\'.')
    if option == 'overwrite' and os.path.isdir(dir):
        shutil.rmtree(dir)
    os.mkdir(dir)
#
#                                                               Input data file
# =============================================================================
def set_input_datafile_path(path):
    """Check input data file path and get its name and directory.

    The input data file must exist, have the '.dat' extension and a name made
    of letters, numbers or underscores only. Otherwise, the program is
    aborted.

    Parameters
    ----------
    path : str
        Input data file path.

    Returns
    -------
    input_file_name : str
        Input data file name (without extension).
    input_file_path : str
        Input data file absolute path.
    input_file_dir : str
        Input data file directory absolute path.
    """
    input_file_path = os.path.abspath(path)
    input_file_dir, base_name = os.path.split(input_file_path)
    input_file_name, input_file_ext = os.path.splitext(base_name)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    if not os.path.isfile(input_file_path):
        summary = 'Input data file not found'
        description = 'No input data file was found at the path:' + '\n\n' \
            + 2*' ' + '{}'
        info.displayinfo('4', summary, description, input_file_path)
    elif input_file_ext != '.dat':
        summary = 'Invalid input data file extension'
        description = 'The input data file extension must be \'.dat\' ' \
            + '(found \'{}\').'
        info.displayinfo('4', summary, description, input_file_ext)
    elif not ioutil.checkvalidname(input_file_name):
        summary = 'Invalid input data file name'
        description = 'The input data file name ({}) must only contain ' \
            + 'letters, numbers or underscores.'
        info.displayinfo('4', summary, description, input_file_name)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    return input_file_name, input_file_path, input_file_dir
#
#                                                              Output directory
# =============================================================================
def set_problem_dirs(input_file_name, input_file_dir):
    """Create problem output directory and set output files paths.

    The problem output directory is created in the input data file directory
    and named after the input data file. An existing output directory is
    overwritten.

    .. code-block :: text

       rock_sample.dat
       rock_sample/
            |---- rock_sample.screen
            |---- rock_sample.perm

    where `rock_sample.screen` stores everything displayed to the default
    standard output device and `rock_sample.perm` stores the permeability
    tensor of each material point.

    ----

    Parameters
    ----------
    input_file_name : str
        Input data file name (without extension).
    input_file_dir : str
        Input data file directory path.

    Returns
    -------
    problem_name : str
        Problem name.
    problem_dir : str
        Problem output directory path.
    perm_file_path : str
        Problem '.perm' output file path.
    """
    problem_name = input_file_name
    problem_dir = os.path.join(input_file_dir, problem_name)
    # Create output directory (status: 0 new, 1 overwritten)
    status = int(os.path.isdir(problem_dir))
    make_directory(problem_dir, option='overwrite')
    # Set output files paths
    perm_file_path = os.path.join(problem_dir, problem_name + '.perm')
    ioutil.screen_file_path = os.path.join(problem_dir,
                                           problem_name + '.screen')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    info.displayinfo('-1', problem_dir, status)
    return problem_name, problem_dir, perm_file_path

"""Store data in suitable containers.

This module includes a set of functions that store data in suitable
category-related containers.

Functions
---------
store_paths_data
    Store problem directories and files paths.
store_points_data
    Store data associated with the material points.
"""
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'FRACPERM developers'
__credits__ = ['FRACPERM developers', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
def store_paths_data(input_file_name, input_file_path, input_file_dir,
                     problem_name, problem_dir, perm_file_path):
    """Store problem directories and files paths.

    Parameters
    ----------
    input_file_name : str
        Input data file name.
    input_file_path : str
        Input data file path.
    input_file_dir : str
        Input data file directory path.
    problem_name : str
        Problem name.
    problem_dir : str
        Problem output directory path.
    perm_file_path : str
        Problem '.perm' output file path.

    Returns
    -------
    dirs_dict : dict
        Container.
    """
    # Initialize directories and paths dictionary
    dirs_dict = dict()
    # Build directories and paths dictionary
    dirs_dict['input_file_name'] = input_file_name
    dirs_dict['input_file_path'] = input_file_path
    dirs_dict['input_file_dir'] = input_file_dir
    dirs_dict['problem_name'] = problem_name
    dirs_dict['problem_dir'] = problem_dir
    dirs_dict['perm_file_path'] = perm_file_path
    # Return
    return dirs_dict
# =============================================================================
def store_points_data(points_phase, points_state):
    """Store data associated with the material points.

    Parameters
    ----------
    points_phase : dict
        Material phase (item, str) associated to each material point
        (key, str).
    points_state : dict
        Material point state properties (item, dict) associated to each
        material point (key, str).

    Returns
    -------
    points_dict : dict
        Container.
    """
    # Initialize material points dictionary
    points_dict = dict()
    # Build material points dictionary
    points_dict['n_points'] = len(points_phase.keys())
    points_dict['points'] = list(points_phase.keys())
    points_dict['points_phase'] = points_phase
    points_dict['points_state'] = points_state
    # Return
    return points_dict

"""Second-order tensors matricial storage and procedures.

This module contains the procedures associated with the matricial storage of
second-order tensorial quantities (stress, strain, fracture normals,
permeability) read from the input data file or written to the output files.
All the components of a second-order tensor are stored columnwise, i.e., the
components order ``11, 21, 31, 12, 22, 32, 13, 23, 33`` in 3D.

Functions
---------
get_problem_type_parameters
    Get parameters dependent on the problem type.
get_tensor_mf
    Get second-order tensor matricial form.
get_tensor_from_mf
    Recover second-order tensor from associated matricial form.
"""
#
#                                                                       Modules
# =============================================================================
# Third-party
import numpy as np
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
#                                                       Problem type parameters
# =============================================================================
def get_problem_type_parameters(problem_type=4):
    """Get parameters dependent on the problem type.

    Only the 3D problem type is available, since the fracture network is
    defined by three mutually orthogonal fracture planes.

    Parameters
    ----------
    problem_type : int, default=4
        Problem type: 3D (4).

    Returns
    -------
    n_dim : int
        Problem number of spatial dimensions.
    comp_order_nsym : list[str]
        Second-order tensor components nonsymmetric (columnwise) order.
    """
    if problem_type == 4:
        n_dim = 3
        comp_order_nsym = ['11', '21', '31', '12', '22', '32', '13', '23',
                           '33']
    else:
        raise RuntimeError('Unavailable problem type.')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Return
    return n_dim, comp_order_nsym
# =============================================================================
def _check_comp_order(n_dim, comp_order):
    """Check second-order tensor components order.

    Parameters
    ----------
    n_dim : int
        Problem number of spatial dimensions.
    comp_order : list[str]
        Second-order tensor components order.
    """
    if any([len(comp) != 2 for comp in comp_order]):
        raise RuntimeError('Invalid component in second-order tensor '
                           'components order.')
    elif any([int(x) not in range(1, n_dim + 1)
              for x in list(''.join(comp_order))]):
        raise RuntimeError('Invalid component in second-order tensor '
                           'components order.')
    elif len(list(dict.fromkeys(comp_order))) != len(comp_order):
        raise RuntimeError('Duplicated component in second-order tensor '
                           'components order.')
    elif len(comp_order) != n_dim**2:
        raise RuntimeError('Invalid number of components in second-order '
                           'tensor components order.')
#
#                                        Tensorial - Matricial forms conversion
# =============================================================================
def get_tensor_mf(tensor, n_dim, comp_order):
    """Get second-order tensor matricial form.

    Parameters
    ----------
    tensor : numpy.ndarray (2d)
        Second-order tensor to be stored in matricial form.
    n_dim : int
        Problem number of spatial dimensions.
    comp_order : list[str]
        Second-order tensor components order associated to matricial form.

    Returns
    -------
    tensor_mf : numpy.ndarray (1d)
        Matricial form of input tensor.
    """
    # Check input arguments validity
    if len(tensor.shape) != 2:
        raise RuntimeError('Matricial form storage is only available for '
                           'second-order tensors.')
    elif any([tensor.shape[i] != n_dim for i in range(len(tensor.shape))]):
        raise RuntimeError('Invalid tensor dimensions.')
    _check_comp_order(n_dim, comp_order)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Initialize tensor matricial form
    tensor_mf = np.zeros(len(comp_order))
    # Store tensor in matricial form
    for i, comp in enumerate(comp_order):
        so_idx = tuple([int(x) - 1 for x in list(comp)])
        tensor_mf[i] = tensor[so_idx]
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Return
    return tensor_mf
# =============================================================================
def get_tensor_from_mf(tensor_mf, n_dim, comp_order):
    """Recover second-order tensor from associated matricial form.

    Parameters
    ----------
    tensor_mf : numpy.ndarray (1d)
        Second-order tensor stored in matricial form.
    n_dim : int
        Problem number of spatial dimensions.
    comp_order : list[str]
        Second-order tensor components order associated to matricial form.

    Returns
    -------
    tensor : numpy.ndarray (2d)
        Second-order tensor recovered from matricial form.
    """
    # Check input arguments validity
    if len(tensor_mf.shape) != 1:
        raise RuntimeError('Second-order tensor matricial form must be a '
                           'vector.')
    elif tensor_mf.shape[0] != len(comp_order):
        raise RuntimeError('Invalid number of components in tensor '
                           'matricial form.')
    _check_comp_order(n_dim, comp_order)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Initialize tensor
    tensor = np.zeros((n_dim, n_dim))
    # Get tensor from matricial form
    for i, comp in enumerate(comp_order):
        so_idx = tuple([int(x) - 1 for x in list(comp)])
        tensor[so_idx] = tensor_mf[i]
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Return
    return tensor

"""Test second-order tensors matricial storage."""
#
#                                                                       Modules
# =============================================================================
# Third-party
import numpy as np
import numpy.testing as npt
import pytest
# Local
import fracperm.tensor.matrixoperations as mop
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'FRACPERM developers'
__credits__ = ['FRACPERM developers', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
def test_problem_type_parameters():
    n_dim, comp_order_nsym = mop.get_problem_type_parameters()
    assert n_dim == 3
    assert comp_order_nsym == ['11', '21', '31', '12', '22', '32', '13',
                               '23', '33']
    with pytest.raises(RuntimeError):
        mop.get_problem_type_parameters(1)
# =============================================================================
def test_columnwise_storage():
    n_dim, comp_order_nsym = mop.get_problem_type_parameters()
    tensor = np.arange(1.0, 10.0).reshape(3, 3)
    tensor_mf = mop.get_tensor_mf(tensor, n_dim, comp_order_nsym)
    npt.assert_array_equal(tensor_mf, tensor.flatten(order='F'))
    npt.assert_array_equal(
        mop.get_tensor_from_mf(tensor_mf, n_dim, comp_order_nsym), tensor)
# =============================================================================
def test_invalid_storage():
    n_dim, comp_order_nsym = mop.get_problem_type_parameters()
    with pytest.raises(RuntimeError):
        mop.get_tensor_mf(np.zeros(3), n_dim, comp_order_nsym)
    with pytest.raises(RuntimeError):
        mop.get_tensor_from_mf(np.zeros(8), n_dim, comp_order_nsym)
    with pytest.raises(RuntimeError):
        mop.get_tensor_mf(np.zeros((3, 3)), n_dim, ['11', '11', '22'])
    # Independent components only
    with pytest.raises(RuntimeError):
        mop.get_tensor_from_mf(np.zeros(6), n_dim,
                               ['11', '22', '33', '12', '23', '13'])

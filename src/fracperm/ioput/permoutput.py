"""Output file: Material points permeability results.

This module includes the class associated with the output file where the
permeability tensor of each material point is stored.

Classes
-------
PermOutput
    Output file: Material points permeability results.
"""
#
#                                                                       Modules
# =============================================================================
# Local
import fracperm.tensor.tensoroperations as top
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'FRACPERM developers'
__credits__ = ['FRACPERM developers', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
class PermOutput:
    """Output file: Material points permeability results.

    Attributes
    ----------
    _file_path : str
        Output file path.
    _header : list[str]
        List containing the header of each column (str).
    _col_width : int
        Output file column width.

    Methods
    -------
    init_file(self)
        Open output file and write file header.
    write_file(self, permeability_state)
        Write output file.
    """
    def __init__(self, file_path):
        """Constructor.

        Parameters
        ----------
        file_path : str
            Output file path.
        """
        self._file_path = file_path
        # Set output file header
        self._header = ['Point', 'Phase',
                        'perm_11', 'perm_21', 'perm_31',
                        'perm_12', 'perm_22', 'perm_32',
                        'perm_13', 'perm_23', 'perm_33',
                        'perm_p1', 'perm_p2', 'perm_p3']
        # Set column width
        self._col_width = max(16, max([len(x) for x in self._header]) + 2)
    # -------------------------------------------------------------------------
    def init_file(self):
        """Open output file and write file header."""
        # Set output file header format structure
        write_list = [
            '{:>9s}'.format(self._header[0])
            + '{:>9s}'.format(self._header[1])
            + ''.join([('{:>' + str(self._col_width) + 's}').format(x)
                       for x in self._header[2:]])]
        # Write output file header
        with open(self._file_path, 'w') as output_file:
            output_file.writelines(write_list)
    # -------------------------------------------------------------------------
    def write_file(self, permeability_state):
        """Write output file.

        Each material point permeability tensor is stored columnwise (matricial
        form), followed by the principal permeabilities sorted in ascending
        order.

        Parameters
        ----------
        permeability_state : PermeabilityState
            Material points permeability state.
        """
        # Get material points phase and permeability
        points_phase = permeability_state.get_points_phase()
        points_permeability = permeability_state.get_points_permeability()
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        write_list = []
        # Loop over material points
        for point, mat_phase in points_phase.items():
            # Get permeability tensor (matricial form)
            permeability_mf = \
                permeability_state.get_point_permeability_mf(point)
            # Compute principal permeabilities
            principal_perms, _ = \
                top.spectral_decomposition(points_permeability[point])
            # Set material point format structure
            write_list.append(
                '\n' + '{:>9d}'.format(int(point))
                + '{:>9d}'.format(int(mat_phase))
                + ''.join([('{:>' + str(self._col_width) + '.8e}').format(x)
                           for x in permeability_mf])
                + ''.join([('{:>' + str(self._col_width) + '.8e}').format(x)
                           for x in principal_perms]))
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Write material points permeability (append mode)
        with open(self._file_path, 'a') as output_file:
            output_file.writelines(write_list)

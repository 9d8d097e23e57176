"""FRACPERM (Orthotropic Embedded Fracture Permeability).

FRACPERM computes the permeability tensor of fractured rock at a set of
material points given the current stress and strain tensors at each point,
following the orthotropic embedded fracture permeability model of Zill et al.
(2021) [#]_.

.. [#] Zill, F., Lüdeling, C., Kolditz, O., and Nagel, T. (2021).
       Hydro-mechanical continuum modelling of fluid percolation through
       rock salt. International Journal of Rock Mechanics and Mining Sciences,
       147:104879.
"""
#
#                                                                       Modules
# =============================================================================
from fracperm import main
from fracperm.main import fracperm_simulation
from fracperm import ioput
from fracperm import material
from fracperm import tensor

"""Shared fixtures of FRACPERM test suite."""
#
#                                                                       Modules
# =============================================================================
# Third-party
import pytest
# Local
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
@pytest.fixture(autouse=True)
def reset_screen_output(monkeypatch):
    """Reset '.screen' output file path and standard output suppression."""
    monkeypatch.setattr(ioutil, 'screen_file_path', None)
    monkeypatch.setattr(ioutil, 'is_null_stdout', True)
# =============================================================================
@pytest.fixture
def fracture_properties():
    """Orthotropic embedded fracture material properties."""
    return {'a': (1.0, 1.0, 1.0),
            'e0': (0.0, 0.0, 0.0),
            'km': 1.0e-15,
            'b0': 1.0e-6,
            'rad_xy': 0.0,
            'rad_yz': 0.0}

"""I/O utility tools.

This module includes the standard output and '.screen' file output global
settings as well as the input data checking tools.

Functions
---------
print2(*objects)
    Print to both standard output device and '.screen' output file.
setdisplayfeatures()
    Set output display features.
escapeANSI(string)
    Remove ANSI escape sequences from string.
checknumber(x)
    Check if instance is or represents a finite number.
checkposint(x)
    Check if instance is or represents a positive integer.
checkvalidname(x)
    Check if string contains only letters, numbers or underscores.
"""
#
#                                                                       Modules
# =============================================================================
# Standard
import re
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
# Set '.screen' file path as a global variable
screen_file_path = None
# Set standard output suppression as a global variable
is_null_stdout = False
# =============================================================================
def print2(*objects):
    """Print to both standard output device and '.screen' output file.

    ANSI escape sequences (e.g., colors) are removed from the '.screen' output
    file. Output to the standard output device is skipped if `is_null_stdout`
    is set.

    Parameters
    ----------
    objects : list
        Objects to print.
    """
    if not is_null_stdout:
        print(*objects)
    if screen_file_path is not None:
        with open(screen_file_path, 'a', encoding='utf-8') as screen_file:
            print(*[escapeANSI(str(x)) for x in objects], file=screen_file)
# =============================================================================
def setdisplayfeatures():
    """Set output display features.

    Returns
    -------
    display_features : tuple
        Output display features:

        * output_width (int) : \
            Maximum line length of '.screen' output file.
        * dashed_line (str) : \
            Dashed line of length `output_width`.
        * indent (str) : \
            Indentation spacing.
        * tilde_line (str) : \
            Tildes line of length `output_width`.
        * equal_line (str) : \
            Equal signs line of length `output_width`.
    """
    output_width = 92
    return (output_width, output_width*'-', 2*' ', output_width*'~',
            output_width*'=')
# =============================================================================
def escapeANSI(string):
    """Remove ANSI escape sequences from string.

    Parameters
    ----------
    string : str
        String.

    Returns
    -------
    string_esc : str
        String without ANSI escape sequences.
    """
    ansi_escape = re.compile(r'(\x9B|\x1B\[)[0-?]*[ -\/]*[@-~]')
    return ansi_escape.sub('', string)
# =============================================================================
def checknumber(x):
    """Check if instance is or represents a finite number.

    Parameters
    ----------
    x
        Object.

    Returns
    -------
    is_number : bool
        `True` if `x` is or represents a finite number, `False` otherwise.
    """
    try:
        value = float(x)
    except (TypeError, ValueError):
        return False
    return bool(np.isfinite(value))
# =============================================================================
def checkposint(x):
    """Check if instance is or represents a positive integer.

    Parameters
    ----------
    x
        Object.

    Returns
    -------
    is_posint : bool
        `True` if `x` is or represents a positive integer, `False` otherwise.
    """
    if isinstance(x, (bool, np.bool_)):
        return False
    elif isinstance(x, (int, np.integer)):
        return bool(x > 0)
    return re.fullmatch('[1-9][0-9]*', str(x)) is not None
# =============================================================================
def checkvalidname(x):
    """Check if string contains only letters, numbers or underscores.

    Parameters
    ----------
    x : str
        String.

    Returns
    -------
    is_valid : bool
        `True` if `x` is a non-empty string of letters, numbers or
        underscores, `False` otherwise.
    """
    return re.fullmatch('[A-Za-z0-9_]+', str(x)) is not None

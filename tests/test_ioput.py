"""Test output display and file operations."""
#
#                                                                       Modules
# =============================================================================
# Standard
import os
# Third-party
import numpy as np
import pytest
# Local
import fracperm.ioput.info as info
import fracperm.ioput.ioutilities as ioutil
import fracperm.ioput.fileoperations as filop
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'FRACPERM developers'
__credits__ = ['FRACPERM developers', ]
__status__ = 'Stable'
# =============================================================================
#
# =============================================================================
@pytest.mark.parametrize('x, expected',
                         [('1.5', True), ('-2e-3', True), (3, True),
                          ('nan', False), ('inf', False), ('a', False),
                          (None, False)])
def test_checknumber(x, expected):
    assert ioutil.checknumber(x) is expected
# =============================================================================
@pytest.mark.parametrize('x, expected',
                         [('1', True), ('12', True), (3, True),
                          (np.int64(2), True), ('0', False), ('01', False),
                          ('-1', False), ('1.0', False), (0, False),
                          (True, False)])
def test_checkposint(x, expected):
    assert ioutil.checkposint(x) is expected
# =============================================================================
@pytest.mark.parametrize('x, expected',
                         [('rock_1', True), ('ROCK', True), ('', False),
                          ('rock-1', False), ('rock 1', False)])
def test_checkvalidname(x, expected):
    assert ioutil.checkvalidname(x) is expected
# =============================================================================
def test_print2_screen_file(tmp_path, capsys):
    screen_file_path = tmp_path / 'problem.screen'
    ioutil.screen_file_path = str(screen_file_path)
    ioutil.is_null_stdout = False
    ioutil.print2('\x1b[32m' + 'colored' + '\x1b[0m', 'text')
    assert 'colored' in capsys.readouterr().out
    assert screen_file_path.read_text() == 'colored text\n'
    # Suppressed standard output
    ioutil.is_null_stdout = True
    ioutil.print2('silent')
    assert capsys.readouterr().out == ''
    assert screen_file_path.read_text().splitlines()[-1] == 'silent'
# =============================================================================
def test_displayinfo_abort(tmp_path):
    screen_file_path = tmp_path / 'problem.screen'
    ioutil.screen_file_path = str(screen_file_path)
    with pytest.raises(SystemExit) as excinfo:
        info.displayinfo('4', 'Invalid property', 'Property {} of phase {}.',
                         'km', 1)
    assert excinfo.value.code == 1
    screen_output = screen_file_path.read_text()
    assert 'Input data error: Invalid property' in screen_output
    assert 'Property km of phase 1.' in screen_output
    assert 'Program Aborted' in screen_output
# =============================================================================
def test_displayinfo_completed(tmp_path):
    screen_file_path = tmp_path / 'problem.screen'
    ioutil.screen_file_path = str(screen_file_path)
    phase_names = ['Total', 'Read input data', 'Write output files']
    phase_times = np.array([[0.0, 4.0], [0.0, 1.0], [1.0, 4.0]])
    info.displayinfo('1', '10h00m00s', '01/Jan/2024', 'problem',
                     phase_names, phase_times)
    screen_output = screen_file_path.read_text()
    assert 'Program Completed' in screen_output
    assert 'Read input data' in screen_output
    assert '75.00' in screen_output
# =============================================================================
def test_displayinfo_progress_not_stored(tmp_path):
    screen_file_path = tmp_path / 'problem.screen'
    ioutil.screen_file_path = str(screen_file_path)
    info.displayinfo('6', 'progress', 1, 2)
    assert not screen_file_path.exists()
    info.displayinfo('6', 'completed', 2)
    assert '2 material point(s)' in screen_file_path.read_text()
# =============================================================================
def test_displayinfo_unknown_code():
    with pytest.raises(RuntimeError):
        info.displayinfo('7')
# =============================================================================
def test_make_directory(tmp_path):
    directory = tmp_path / 'results'
    filop.make_directory(str(directory))
    (directory / 'old.perm').write_text('')
    with pytest.raises(FileExistsError):
        filop.make_directory(str(directory))
    filop.make_directory(str(directory), 'overwrite')
    assert os.listdir(directory) == []
    with pytest.raises(RuntimeError):
        filop.make_directory(str(directory), 'append')
# =============================================================================
def test_set_input_datafile_path(tmp_path):
    file_path = tmp_path / 'rock_sample.dat'
    file_path.write_text('')
    input_file_name, input_file_path, input_file_dir = \
        filop.set_input_datafile_path(str(file_path))
    assert input_file_name == 'rock_sample'
    assert input_file_path == str(file_path)
    assert input_file_dir == str(tmp_path)
# =============================================================================
@pytest.mark.parametrize('name', ['rock_sample.txt', 'rock-sample.dat'])
def test_set_input_datafile_path_invalid(tmp_path, name):
    file_path = tmp_path / name
    file_path.write_text('')
    with pytest.raises(SystemExit):
        filop.set_input_datafile_path(str(file_path))
# =============================================================================
def test_set_problem_dirs(tmp_path):
    problem_name, problem_dir, perm_file_path = \
        filop.set_problem_dirs('rock_sample', str(tmp_path))
    assert problem_name == 'rock_sample'
    assert problem_dir == str(tmp_path / 'rock_sample')
    assert perm_file_path == str(tmp_path / 'rock_sample'
                                 / 'rock_sample.perm')
    assert ioutil.screen_file_path == str(tmp_path / 'rock_sample'
                                          / 'rock_sample.screen')
    assert 'created' in (tmp_path / 'rock_sample'
                         / 'rock_sample.screen').read_text()
    # Existing output directory
    filop.set_problem_dirs('rock_sample', str(tmp_path))
    assert 'overwritten' in (tmp_path / 'rock_sample'
                             / 'rock_sample.screen').read_text()

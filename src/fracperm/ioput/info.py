"""Display information during program execution.

This module includes a function that outputs the program execution messages
(banners, execution phases, tasks and input data errors) to both the default
standard output device (e.g., terminal) and the '.screen' output file. The
input data error message aborts the program.

Functions
---------
displayinfo
    Display information during program execution.
"""
#
#                                                                       Modules
# =============================================================================
# Standard
import sys
# Third-party
import numpy as np
import colorama
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
def displayinfo(code, *args):
    """Display information during program execution.

    ----

    Parameters
    ----------
    code : str
        Code associated with the output information:

        * -1 : Problem output directory (args: directory, status)
        *  0 : Program launched (args: problem, input data file, time, date)
        *  1 : Program completed (args: time, date, problem, phases names, \
               phases initial and final times)
        *  2 : Execution phase started (args: phase)
        *  3 : Execution phase completed (args: phase, duration)
        *  4 : Input data error, aborts the program (args: summary, \
               description, description arguments)
        *  5 : Execution phase task (args: task, [number of indents])
        *  6 : Material points evaluation (args: 'progress', point, \
               number of points; or 'completed', number of points)
    """
    # Get display features
    output_width, dashed_line, indent, tilde_line, equal_line = \
        ioutil.setdisplayfeatures()
    yellow = colorama.Fore.YELLOW
    reset = colorama.Style.RESET_ALL
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Build message
    if code == '-1':
        problem_dir, status = args[0:2]
        if status == 0:
            status_msg = 'created'
        else:
            status_msg = 'overwritten (existing results were removed)'
        message = 3*'\n' + 'Output directory: ' + str(problem_dir) + '\n' \
            + 'Output directory status: ' + status_msg + '\n'
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    elif code == '0':
        problem_name, input_file_name, start_time, start_date = args[0:4]
        fields = (('Problem', problem_name),
                  ('Input data file', str(input_file_name) + '.dat'),
                  ('Launched at', str(start_time) + ' (' + str(start_date)
                   + ')'))
        message = '\n' + equal_line + '\n' \
            + '{:^{width}}'.format('FRACPERM', width=output_width) + '\n' \
            + '{:^{width}}'.format('Permeability of rock with embedded '
                                   'orthotropic fractures',
                                   width=output_width) + '\n' \
            + equal_line + '\n\n' \
            + ''.join([indent + yellow + '{:<18}'.format(label + ':') + reset
                       + str(value) + '\n' for label, value in fields]) \
            + '\n' + dashed_line
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    elif code == '1':
        end_time, end_date, problem_name, phase_names, phase_times = args[0:5]
        # Compute execution phases durations (first phase is the total)
        durations = phase_times[:, 1] - phase_times[:, 0]
        total_time = durations[0]
        if total_time > 0.0:
            shares = 100.0*durations/total_time
        else:
            shares = np.zeros(len(durations))
        # Build execution times table
        table = 2*indent + '{:<50}{:>14}{:>11}'.format(
            'Phase', 'Time (s)', 'Share (%)') + '\n' \
            + 2*indent + 75*'-' + '\n'
        for i in range(1, len(phase_names)):
            table += 2*indent + '{:<50}{:>14.2e}{:>11.2f}'.format(
                phase_names[i], durations[i], shares[i]) + '\n'
        table += 2*indent + 75*'-' + '\n'
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        fields = (('Problem', problem_name),
                  ('Completed at', str(end_time) + ' (' + str(end_date)
                   + ')'),
                  ('Total time', '{:.2e}s (~{:.0f}h{:.0f}m)'.format(
                      total_time, np.floor(total_time/3600),
                      np.floor((total_time % 3600)/60))))
        message = '\n' + tilde_line + '\n' \
            + ''.join([indent + yellow + '{:<18}'.format(label + ':') + reset
                       + str(value) + '\n' for label, value in fields]) \
            + '\n' + table + '\n' \
            + colorama.Fore.GREEN \
            + '{:^{width}}'.format('Program Completed', width=output_width) \
            + reset + '\n' + equal_line
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    elif code == '2':
        message = colorama.Fore.GREEN + '>> Phase: ' + reset + str(args[0])
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    elif code == '3':
        message = '\n' + colorama.Fore.GREEN + '<< Phase completed: ' + reset \
            + '{} ({:.2e}s)'.format(args[0], args[1]) + '\n' + dashed_line
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    elif code == '4':
        summary, description = args[0:2]
        message = '\n\n' + colorama.Fore.RED + equal_line + '\n' \
            + indent + 'Input data error: ' + summary + reset + '\n\n' \
            + indent + description.format(*args[2:]) + '\n' \
            + colorama.Fore.RED + equal_line + '\n' \
            + '{:^{width}}'.format('Program Aborted', width=output_width) \
            + reset
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    elif code == '5':
        n_indents = args[1] if len(args) > 1 else 1
        message = '\n' + n_indents*indent + '> ' + str(args[0])
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    elif code == '6':
        if args[0] == 'progress':
            # Progress is only displayed in the standard output device
            if ioutil.is_null_stdout:
                return
            point, n_points = args[1:3]
            end = '\n' if point == n_points else '\r'
            print(indent + '> Material point {} of {}'.format(point, n_points),
                  end=end)
            return
        message = '\n' + indent + '> Permeability tensor evaluated at ' \
            + '{} material point(s)'.format(args[1])
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    else:
        raise RuntimeError('Unknown display information code \'' + str(code)
                           + '\'.')
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Display information
    ioutil.print2(message)
    # Abort program
    if code == '4':
        sys.exit(1)

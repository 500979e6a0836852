import logging
import subprocess


class CmdException(Exception):
    pass


logger = logging.getLogger('cmd')


def run_interactive(cmd_list):
    '''
    Run a command attached to the current terminal and wait for it.

    Output goes straight to our stdout/stderr so progress and prompts
    stay visible. Returns the exit code of the command, negative when
    it was killed by a signal.
    '''
    logger.debug('Spawning: %s', ' '.join(cmd_list))
    try:
        process = subprocess.Popen(cmd_list)
    except OSError as err:
        raise CmdException('Unable to run "{cmd}": {error}'.format(
            cmd=cmd_list[0],
            error=str(err)
        ))

    try:
        return process.wait()
    except KeyboardInterrupt:
        # terraform handles SIGINT itself; let it finish cleaning up
        process.wait()
        raise

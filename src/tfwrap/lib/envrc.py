import os
import tempfile

from tfwrap.lib.base import Base
from tfwrap.lib.line_reader import iter_lines
from tfwrap.lib.tfwrap import TfWrap


class EnvrcException(Exception):
    pass


class EnvrcEncodingException(EnvrcException):
    pass


class Envrc(Base):
    '''
    The direnv file that exports the active environment.

    Only lines containing ``export ENV`` are touched; everything else
    is written back exactly as it was read.
    '''

    MARKER = 'export ENV'
    LINE_TEMPLATE = 'export ENV={env}\n'

    def __init__(self, path=TfWrap.ENVRC_FILE):
        super().__init__()
        self.path = path

    def read_lines(self):
        lines = []
        try:
            with open(self.path, 'rb') as f:
                for chunk in iter_lines(f):
                    try:
                        lines.append(chunk.decode('utf-8'))
                    except UnicodeDecodeError:
                        raise EnvrcEncodingException(
                            '{} appears to not be valid UTF-8'.format(
                                self.path))
        except OSError as err:
            raise EnvrcException('Cannot open {} file: {}'.format(
                self.path, str(err)))
        return lines

    def set_env_lines(self, lines, new_env):
        new_line = self.LINE_TEMPLATE.format(env=new_env)
        return [
            new_line if self.MARKER in line else line
            for line in lines
        ]

    def write_lines(self, lines):
        # write through symlinks so a shared .envrc stays linked
        path = os.path.realpath(self.path)
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix='.envrc.', suffix='.tmp', dir=os.path.dirname(path))
            with os.fdopen(fd, 'w', encoding='utf-8', newline='') as f:
                f.write(''.join(lines))
            if os.path.exists(path):
                os.chmod(tmp_path, os.stat(path).st_mode & 0o7777)
            os.replace(tmp_path, path)
        except OSError as err:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise EnvrcException('Cannot write {} file changes: {}'.format(
                self.path, str(err)))

    def set_env(self, new_env):
        lines = self.read_lines()
        new_lines = self.set_env_lines(lines, new_env)

        if not any(self.MARKER in line for line in lines):
            self.logger.warning('No "%s" line found in %s, nothing replaced',
                                self.MARKER, self.path)
        self.write_lines(new_lines)
        self.logger.debug('%s now exports ENV=%s', self.path, new_env)
        return new_lines

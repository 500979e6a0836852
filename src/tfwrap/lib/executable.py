from tfwrap.lib import cmd
from tfwrap.lib.base import Base


class Executable(Base):

    def __init__(self, exec_name):
        super().__init__()
        self.exec_name = exec_name

    def get_exec_path(self):
        return self.exec_name

    def run(self, *args):
        executable_cmd = [self.get_exec_path()]
        if args:
            for arg in args:
                executable_cmd.append(arg)
        self.logger.info('Running {}'.format(' '.join(executable_cmd)))
        result = cmd.run_interactive(executable_cmd)
        self.logger.info('Return code is {}'.format(result))
        return result

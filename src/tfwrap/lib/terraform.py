from tfwrap.lib.executable import Executable
from tfwrap.lib.tfwrap import TfWrap


class Terraform(Executable):

    def __init__(self, exec_name=TfWrap.TERRAFORM_BIN):
        super().__init__(exec_name)

    def plan(self, var_file):
        return self.run('plan', '-var-file', var_file)

    def apply(self, var_file, auto_approve=False):
        args = ['apply', '-var-file', var_file]
        if auto_approve:
            args.append('--auto-approve')
        return self.run(*args)

    def destroy(self, var_file):
        return self.run('destroy', '-var-file', var_file)

    def init(self, backend_config):
        return self.run('init', '-backend-config', backend_config)

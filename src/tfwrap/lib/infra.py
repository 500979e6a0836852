from tfwrap.lib.base import Base
from tfwrap.lib.env import Env
from tfwrap.lib.terraform import Terraform


class Infra(Base):
    '''
    Runs terraform against the environment selected by ENV.

    Every command checks the required variables before building any
    path or starting terraform, and returns terraform's exit code.
    '''

    def __init__(self, config, terraform=None):
        super().__init__()
        self.config = config
        self.terraform = terraform

    def __prepare(self):
        self.config.check_required()
        env = Env.from_config(self.config)
        if not env.is_valid():
            self.logger.warning('Environment directory %s does not exist',
                                env.get_env_dir())
        if self.terraform is None:
            self.terraform = Terraform(self.config.terraform_bin)
        return env

    def plan(self):
        env = self.__prepare()
        return self.terraform.plan(env.get_variables_file())

    def apply(self, auto_approve=False):
        env = self.__prepare()
        return self.terraform.apply(env.get_variables_file(),
                                    auto_approve=auto_approve)

    def destroy(self):
        env = self.__prepare()
        return self.terraform.destroy(env.get_variables_file())

    def init(self):
        env = self.__prepare()
        return self.terraform.init(env.get_backend_config_file())

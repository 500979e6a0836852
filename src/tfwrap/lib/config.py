import os
from types import MappingProxyType
from tfwrap.lib.base import Base
from tfwrap.lib.tfwrap import TfWrap


class ConfigException(Exception):
    pass


class ConfigMissingVariableException(ConfigException):
    pass


class Config(Base):
    '''
    Read-only snapshot of the settings tf depends on.

    Built once at startup from the process environment and handed to
    every command, so commands never look at os.environ directly.
    '''

    ENV = 'ENV'
    AWS_PROFILE = 'AWS_PROFILE'
    TERRAFORM_BIN = 'TERRAFORM_BIN'

    REQUIRED_VARIABLES = (ENV, AWS_PROFILE)

    def __init__(self, variables=None):
        super().__init__()
        self.__variables = MappingProxyType(dict(variables or {}))

    @classmethod
    def from_environ(cls, environ=None):
        if environ is None:
            environ = os.environ
        return cls(environ)

    def has(self, name):
        return bool(self.__variables.get(name))

    def get(self, name, default=None):
        value = self.__variables.get(name)
        if value:
            return value
        if default is not None:
            return default
        raise ConfigMissingVariableException(
            '{} environment variable is not set'.format(name))

    def check_required(self):
        for name in self.REQUIRED_VARIABLES:
            if not self.has(name):
                self.logger.debug('Missing required variable %s', name)
                raise ConfigMissingVariableException(
                    '{} environment variable is not set'.format(name))

    @property
    def env(self):
        return self.get(self.ENV)

    @property
    def aws_profile(self):
        return self.get(self.AWS_PROFILE)

    @property
    def terraform_bin(self):
        return self.get(self.TERRAFORM_BIN, TfWrap.TERRAFORM_BIN)

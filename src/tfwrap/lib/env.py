import os
import shutil

from tfwrap.lib.base import Base
from tfwrap.lib.tfwrap import TfWrap


class EnvException(Exception):
    pass


class EnvInvalidDirException(EnvException):
    pass


class Env(Base):

    def __init__(self, name=None):
        super().__init__()
        self.name = name
        self.env_dir = None
        if name:
            self.env_dir = os.path.join(TfWrap.ENVIRONMENTS_DIR, name)

    @classmethod
    def from_config(cls, config):
        return cls(config.env)

    def is_valid(self):
        return self.env_dir is not None and os.path.isdir(self.env_dir)

    @classmethod
    def list(cls):
        try:
            dirs = os.listdir(path=TfWrap.ENVIRONMENTS_DIR)
        except OSError as err:
            raise EnvInvalidDirException(
                'Cannot list environments directory {}: {}'.format(
                    TfWrap.ENVIRONMENTS_DIR, str(err)))
        return sorted(
            d for d in dirs
            if os.path.isdir(os.path.join(TfWrap.ENVIRONMENTS_DIR, d))
        )

    def get_name(self):
        return self.name

    def get_env_dir(self):
        return self.env_dir

    def get_variables_file(self):
        return os.path.join(self.env_dir, TfWrap.VARIABLES_FILE)

    def get_backend_config_file(self):
        return os.path.join(self.env_dir, TfWrap.BACKEND_CONFIG_FILE)

    @staticmethod
    def clean_terraform_cache(cache_dir=TfWrap.TERRAFORM_CACHE_DIR):
        '''
        Remove the local terraform cache so the next init starts
        from the backend of the newly selected environment.
        Returns True when something was removed.
        '''
        if not os.path.exists(cache_dir):
            return False
        try:
            shutil.rmtree(cache_dir)
        except OSError as err:
            raise EnvException(
                'Unable to remove Terraform cache directory: {}'.format(
                    str(err)))
        return True

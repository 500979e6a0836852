import argparse
from tfwrap.lib.env import Env
from tfwrap.lib.envrc import Envrc


def set_env(config, args):
    '''
    Switch the active environment in .envrc
    '''
    env_arg_parser = argparse.ArgumentParser(
        prog='tf set-env',
        description='Point .envrc to another environment and drop '
                    'the local terraform cache.'
    )
    env_arg_parser.add_argument(
        'new_env',
        metavar='NEW_ENV',
        type=str,
        help='Environment name. Run "tf list-env" to show available options.'
    )
    args = env_arg_parser.parse_args(args)

    Envrc().set_env(args.new_env)
    Env.clean_terraform_cache()

    print('Run \'direnv allow\' to load new env changes. '
          'Terraform will need to be init\'d again.')
    return 0


def list_env(config, args):
    '''
    List environments under envs/
    '''
    env_arg_parser = argparse.ArgumentParser(
        prog='tf list-env',
        description='List available environments'
    )
    env_arg_parser.parse_args(args)

    for name in Env.list():
        print(name)
    return 0

import argparse
import logging
import sys
from tfwrap.__version__ import __version__
from tfwrap.cmdline import (
    env,
    infra
)
from tfwrap.lib.cmd import CmdException
from tfwrap.lib.config import Config, ConfigException
from tfwrap.lib.env import EnvException
from tfwrap.lib.envrc import EnvrcException

TFWRAP_VERSION = __version__

EXIT_ERROR = -1
EXIT_INTERRUPTED = 130
EXIT_SIGNAL_BASE = 128

SUB_MODULES = {
    'set-env': {
        'help': 'Switch the environment exported by .envrc',
        'entry': env.set_env,
        'usage': 'tf set-env NEW_ENV'
    },
    'list-env': {
        'help': 'List environments under envs/',
        'entry': env.list_env,
        'usage': 'tf list-env'
    },
    'plan': {
        'help': 'terraform plan for $ENV',
        'entry': infra.plan,
        'usage': 'tf plan'
    },
    'apply': {
        'help': 'terraform apply for $ENV',
        'entry': infra.apply,
        'usage': 'tf apply [-y]'
    },
    'destroy': {
        'help': 'terraform destroy for $ENV',
        'entry': infra.destroy,
        'usage': 'tf destroy'
    },
    'init': {
        'help': 'terraform init with the $ENV backend config',
        'entry': infra.init,
        'usage': 'tf init'
    },
}

KNOWN_ERRORS = (
    CmdException,
    ConfigException,
    EnvException,
    EnvrcException,
)

logger = logging.getLogger('tf')


def exit_code(return_code):
    '''
    Killed children report -signum, shells expect 128 + signum.
    '''
    if return_code < 0:
        return EXIT_SIGNAL_BASE - return_code
    return return_code


def build_main_help_text():
    help_text = 'tf {version}\n\n'.format(
        version=TFWRAP_VERSION
    )
    help_text += 'Available Commands:\n\n'

    for name, value in SUB_MODULES.items():
        help_text += '  {usage:<20} {help_text}\n'.format(
            usage=value['usage'],
            help_text=value['help']
        )
    return help_text


def main(argv=None, environ=None):
    '''
    Parse arguments and run the selected command.

    Returns the process exit code instead of exiting so it can be
    driven from tests.
    '''
    main_parser = argparse.ArgumentParser(
        prog='tf',
        description='Terraform environment wrapper',
        add_help=False
    )
    main_parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    main_parser.add_argument(
        'sub_module',
        type=str,
        nargs='?',
        help=build_main_help_text()
    )

    args, sub_module_args = main_parser.parse_known_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.sub_module not in SUB_MODULES:
        if args.sub_module is not None:
            logger.error('Unknown command %s', args.sub_module)
        print(build_main_help_text())
        return EXIT_ERROR

    config = Config.from_environ(environ)
    func = SUB_MODULES[args.sub_module]['entry']

    try:
        return exit_code(func(config, sub_module_args))
    except KNOWN_ERRORS as err:
        logger.error('Error: {}'.format(str(err)))
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.error('Interrupted')
        return EXIT_INTERRUPTED


def run():
    '''
    tf main entry point
    ---------------------------------

    You SHOULD NOT write any business logic here.
    '''
    logging.basicConfig(format='%(levelname)s - %(name)s -> %(message)s',
                        level=logging.INFO)
    sys.exit(main())

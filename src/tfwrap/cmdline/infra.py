import argparse
from tfwrap.lib.infra import Infra


def __parse(prog, description, args, auto_approve=False):
    infra_arg_parser = argparse.ArgumentParser(
        prog=prog,
        description=description
    )
    if auto_approve:
        infra_arg_parser.add_argument(
            '-y',
            dest='auto_approve',
            action='store_true',
            help='Skip interactive approval (terraform --auto-approve).'
        )
    return infra_arg_parser.parse_args(args)


def plan(config, args):
    '''
    Plan entry point
    '''
    __parse('tf plan', 'Run terraform plan with envs/$ENV/main.tfvars',
            args)
    return Infra(config).plan()


def apply(config, args):
    '''
    Apply entry point
    '''
    args = __parse('tf apply',
                   'Run terraform apply with envs/$ENV/main.tfvars',
                   args, auto_approve=True)
    return Infra(config).apply(auto_approve=args.auto_approve)


def destroy(config, args):
    '''
    Destroy entry point
    '''
    __parse('tf destroy', 'Run terraform destroy with envs/$ENV/main.tfvars',
            args)
    return Infra(config).destroy()


def init(config, args):
    '''
    Init entry point
    '''
    __parse('tf init',
            'Run terraform init with envs/$ENV/terraform_state.tfvars',
            args)
    return Infra(config).init()

class TfWrap:
    # Environments folder, relative to the working directory
    ENVIRONMENTS_DIR = 'envs'
    # Variables file used by plan, apply and destroy
    VARIABLES_FILE = 'main.tfvars'
    # Backend config file used by init
    BACKEND_CONFIG_FILE = 'terraform_state.tfvars'
    # direnv file holding the active environment
    ENVRC_FILE = '.envrc'
    # Terraform local cache directory
    TERRAFORM_CACHE_DIR = '.terraform'
    # Default terraform executable, resolved through PATH
    TERRAFORM_BIN = 'terraform'

"""Sampler that reports (possibly encrypted) environment variables as headlines.

    CLEAR_ENV_VAR=hello SECURE_ENV_VAR=+encs+... \
    GENEOS_TOOLKIT_KEY_FILE=/path/to/key-file python examples/env_sampler.py
"""

import socket

from geneos_toolkit import Dataview, Settings, get_secure_var_or, get_var_or, print_result_and_exit


def main() -> None:
    settings = Settings()
    clear_env_var = get_var_or("CLEAR_ENV_VAR", "Default")
    secure_env_var = get_secure_var_or("SECURE_ENV_VAR", settings.key_file or "key-file", "Default")

    builder = (
        Dataview.builder()
        .set_row_header("Process")
        .add_headline("Hostname", socket.gethostname())
        .add_headline("Clear Env Var", clear_env_var)
        .add_headline("Secure Env Var", secure_env_var)
        .add_value("process1", "Status", "Running")
        .add_value("process1", "CPU", "2.5%")
        .add_value("process1", "Memory", "150MB")
    )
    print_result_and_exit(builder)


if __name__ == "__main__":
    main()

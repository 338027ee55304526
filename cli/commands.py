"""CLI commands for inspecting config files."""

from typing import Optional, Sequence

from confmgr.config import ConfigMgr, OptionType, string_to


def _load(config: ConfigMgr, path: str, additional: Optional[Sequence[str]] = None) -> bool:
    """Initial load of path, then each additional file on top."""
    if not config.load_initial(path):
        print(f"Error: could not load config file: {path}")
        return False

    for extra in additional or []:
        if not config.load_additional_file(extra):
            print(f"Warning: skipped additional config file: {extra}")
    return True


def show_table(path: str, additional: Optional[Sequence[str]] = None, config: Optional[ConfigMgr] = None) -> int:
    """Print the merged option table sorted by name.

    Args:
        path: Initial config file.
        additional: Files layered on top, in order.
        config: Registry to load into (a fresh one by default).

    Returns:
        Process exit code.
    """
    config = config or ConfigMgr()
    if not _load(config, path, additional):
        return 1

    options = config.as_dict()
    width = max(len(name) for name in options)
    for name in sorted(options):
        print(f"{name.ljust(width)} = {options[name]}")
    return 0


def get_value(path: str, name: str, type_name: str = "string", default: Optional[str] = None, quiet: bool = False, config: Optional[ConfigMgr] = None) -> int:
    """Print one option read as the given type.

    Args:
        path: Config file to load.
        name: Option name.
        type_name: One of the OptionType values (e.g. 'uint16', 'bool').
        default: Default as text; converted to the requested type.
        quiet: Suppress missing/bad value diagnostics.
        config: Registry to load into (a fresh one by default).

    Returns:
        Process exit code.
    """
    option_type = OptionType(type_name)
    default_text = default if default is not None else ("0" if option_type is not OptionType.STRING else "")
    default_value = string_to(default_text, option_type)
    if default_value is None:
        print(f"Error: default '{default_text}' is not a valid {option_type.value}")
        return 2

    config = config or ConfigMgr()
    if not _load(config, path):
        return 1

    value = config.get_option(name, default_value, option_type, show_logs=not quiet)
    if isinstance(value, bool):
        value = "true" if value else "false"
    print(value)
    return 0


def list_keys(path: str, prefix: str, config: Optional[ConfigMgr] = None) -> int:
    """Print every option name starting with prefix, one per line."""
    config = config or ConfigMgr()
    if not _load(config, path):
        return 1

    for name in config.get_keys_by_string(prefix):
        print(name)
    return 0


def show_version():
    """Show confmgr version."""
    from confmgr import __version__

    print(f"confmgr {__version__}")

import logging
import threading
from typing import Any, Optional, Sequence

from ..constants import CONFIG_PATH, DIST_SUFFIX, LOGGER_NAME
from ..logging_manager import LoggingMixin
from .convert import OptionType, string_to, string_to_bool, to_string
from .parser import parse_file

__all__ = ["ConfigMgr"]


class ConfigMgr(LoggingMixin):
    """Holds the process-wide option table loaded from `key = value` files.

    Construct one instance at startup and hand it to whatever needs settings.
    Every access to the table, reads included, goes through one lock, so a
    lookup never observes a half-applied load.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Creates an empty registry.

        Args:
            logger: Logger for diagnostics. Defaults to the 'config' logger.
        """
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self._lock = threading.Lock()
        self._options: dict[str, str] = {}
        self._filename = ""
        self._args: list[str] = []
        self._additional_files: list[str] = []

    def configure(self, filename: str, args: Optional[Sequence[str]] = None, additional_files: Optional[Sequence[str]] = None):
        """Sets the primary config filename used by load_app_configs().

        Args:
            filename: Primary config path, without the '.dist' suffix.
            args: Command line arguments of the process, kept for get_arguments().
            additional_files: Files layered on top by load_additional_configs().
        """
        with self._lock:
            self._filename = filename
            self._args = list(args or [])
            self._additional_files = list(additional_files or [])

    def get_filename(self) -> str:
        with self._lock:
            return self._filename

    def get_arguments(self) -> list[str]:
        with self._lock:
            return list(self._args)

    def get_additional_files(self) -> list[str]:
        with self._lock:
            return list(self._additional_files)

    def get_config_path(self) -> str:
        """Returns the directory config files are expected in."""
        return CONFIG_PATH

    def _add_key(self, name: str, value: str, replace: bool = True):
        """Inserts or replaces one option. Caller must hold the lock."""
        if name in self._options and not replace:
            self._log(f"> Config: Option '{name}' is exist! Option key - '{self._options[name]}'", log_type="error")
            return

        self._options[name] = value

    def add_key(self, name: str, value: str, replace: bool = True):
        """Inserts an option, or replaces it when replace is True.

        With replace=False an existing option is kept and the clash is logged.
        """
        with self._lock:
            self._add_key(name, value, replace)

    def _load_file(self, path: str) -> bool:
        """Parses one file and merges it into the table. Caller must hold the lock.

        Returns:
            True if the file loaded. On failure the table is left untouched.
        """
        result = parse_file(path, self.logger)
        if not result.ok:
            self._log(f"> {result.error}", log_type="error")
            return False

        for name, value in result.options.items():
            self._add_key(name, value)
        return True

    def load_initial(self, path: str) -> bool:
        """Discards every loaded option, then loads `path`."""
        with self._lock:
            self._options.clear()
            return self._load_file(path)

    def load_additional_file(self, path: str) -> bool:
        """Loads `path` on top of the current options; its keys win on clash."""
        with self._lock:
            return self._load_file(path)

    def load_app_configs(self) -> bool:
        """Loads the '<filename>.dist' file as the initial config.

        Only the '.dist' file is read; the un-suffixed primary file is not
        layered on top.
        """
        return self.load_initial(self.get_filename() + DIST_SUFFIX)

    def load_additional_configs(self) -> bool:
        """Layers every file passed to configure(additional_files=...) in order.

        A failing file is logged and skipped; the remaining files still load.

        Returns:
            True only if every additional file loaded.
        """
        success = True
        for path in self.get_additional_files():
            if not self.load_additional_file(path):
                success = False
        return success

    def _lookup(self, name: str) -> Optional[str]:
        with self._lock:
            return self._options.get(name)

    def _get_value_default(self, name: str, default: Any, option_type: OptionType, show_logs: bool) -> Any:
        value = self._lookup(name)
        if value is None:
            if show_logs:
                default_text = to_string(default)
                self._log(f'> Config: Missing name {name} in config, add "{name} = {default_text}"', log_type="error")
            return default

        if option_type is OptionType.STRING:
            return value

        converted = string_to(value, option_type)
        if converted is None:
            if show_logs:
                self._log(f"> Config: Bad value defined for name '{name}', going to use '{to_string(default)}' instead", log_type="error")
            return default

        return converted

    def get_option(self, name: str, default: Any, option_type: Optional[OptionType] = None, show_logs: bool = True) -> Any:
        """Reads an option converted to option_type, falling back to default.

        Never raises for configuration problems: a missing option or a value
        that does not convert yields `default`, logged unless show_logs is False.

        Args:
            name: Option name (case-sensitive).
            default: Returned when the option is missing or invalid.
            option_type: Target type. Inferred from `default` when None.
            show_logs: Set to False to probe optional settings silently.

        Returns:
            The converted option value, or default.

        Raises:
            TypeError: If option_type is None and default's type is unsupported.
        """
        if option_type is None:
            option_type = OptionType.for_default(default)

        if option_type is OptionType.BOOL:
            return self._get_bool(name, bool(default), show_logs)

        return self._get_value_default(name, default, option_type, show_logs)

    def _get_bool(self, name: str, default: bool, show_logs: bool) -> bool:
        text = self._get_value_default(name, to_string(default), OptionType.STRING, show_logs)

        value = string_to_bool(text)
        if value is None:
            if show_logs:
                default_text = "true" if default else "false"
                self._log(f"> Config: Bad value defined for name '{name}', going to use '{default_text}' instead", log_type="error")
            return default

        return value

    def get_string(self, name: str, default: str, show_logs: bool = True) -> str:
        return self.get_option(name, default, OptionType.STRING, show_logs)

    def get_int(self, name: str, default: int, option_type: OptionType = OptionType.INT32, show_logs: bool = True) -> int:
        """Shortcut for integer options; option_type picks the width and signedness."""
        return self.get_option(name, default, option_type, show_logs)

    def get_float(self, name: str, default: float, show_logs: bool = True) -> float:
        return self.get_option(name, default, OptionType.FLOAT, show_logs)

    def get_bool(self, name: str, default: bool, show_logs: bool = True) -> bool:
        return self.get_option(name, default, OptionType.BOOL, show_logs)

    def get_keys_by_string(self, prefix: str) -> list[str]:
        """Returns every loaded option name starting with prefix.

        Order follows the table and is not part of the contract.
        """
        with self._lock:
            return [name for name in self._options if name.startswith(prefix)]

    def __contains__(self, name: str) -> bool:
        return self._lookup(name) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._options)

    def as_dict(self) -> dict[str, str]:
        """Returns a copy of the raw option table."""
        with self._lock:
            return dict(self._options)
